"""Transaction entity."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from src.domain.constants import Category, TransactionType
from src.utils.decimal_utils import format_money, to_money


@dataclass
class Transaction:
    """Dated, categorized money movement against one account."""

    description: str
    amount: Decimal
    transaction_type: TransactionType
    category: Category
    transaction_date: date
    account_id: int | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        self.amount = to_money(self.amount)

    @property
    def is_income(self) -> bool:
        return self.transaction_type is TransactionType.INCOME

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign it contributes to an account balance."""
        return self.amount if self.is_income else -self.amount

    @property
    def formatted_amount(self) -> str:
        return format_money(self.amount)

    @property
    def signed_formatted_amount(self) -> str:
        prefix = "+" if self.is_income else "-"
        return prefix + self.formatted_amount


__all__ = ["Transaction"]
