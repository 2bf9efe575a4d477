"""Account entity and its balance rule."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from src.domain.constants import AccountType
from src.domain.models.transactions import Transaction
from src.utils.decimal_utils import format_money, to_money


@dataclass
class Account:
    """Money container owned by a single user.

    ``current_balance`` starts at ``initial_balance`` and only moves through
    ``add_transaction``. Pass it explicitly when rehydrating from storage.
    """

    name: str
    account_type: AccountType
    initial_balance: Decimal
    user_id: int | None = None
    current_balance: Decimal | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=datetime.now)
    transactions: list[Transaction] = field(
        default_factory=list, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self.initial_balance = to_money(self.initial_balance)
        if self.current_balance is None:
            self.current_balance = self.initial_balance
        else:
            self.current_balance = to_money(self.current_balance)

    def add_transaction(self, transaction: Transaction) -> Decimal:
        """Append a transaction and move the balance by its amount.

        Args:
            transaction: A validated transaction.

        Returns:
            Decimal: The balance after applying the transaction.
        """
        new_balance = self.current_balance + transaction.signed_amount
        transaction.account_id = self.id
        self.transactions.append(transaction)
        self.current_balance = new_balance
        return new_balance

    @property
    def is_credit_card(self) -> bool:
        return self.account_type is AccountType.CREDIT_CARD

    @property
    def formatted_balance(self) -> str:
        return format_money(self.current_balance)


__all__ = ["Account"]
