"""Budget entity and its usage arithmetic."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from src.domain.constants import Category
from src.domain.models.periods import YearMonth
from src.utils.decimal_utils import coerce_decimal, format_money, to_money

PERCENT_QUANT = Decimal("0.0001")


@dataclass
class Budget:
    """Monthly spending cap for one category of one user."""

    category: Category
    budget_amount: Decimal
    budget_month: YearMonth
    user_id: int | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        self.budget_amount = to_money(self.budget_amount)

    @property
    def key(self) -> tuple[int | None, Category, YearMonth]:
        """Uniqueness key: (user, category, month)."""
        return (self.user_id, self.category, self.budget_month)

    def usage_percentage(self, spent) -> Decimal:
        """Return spent as a percentage of the budget.

        The spent/budget ratio is rounded half-up to 4 decimals before
        scaling by 100, so 1.00 of 3.00 reports 33.33. A zero budget reports
        0 whatever the spend.
        """
        if self.budget_amount == 0:
            return Decimal("0")
        ratio = coerce_decimal(spent) / self.budget_amount
        return ratio.quantize(PERCENT_QUANT, rounding=ROUND_HALF_UP) * 100

    def is_exceeded(self, spent) -> bool:
        return coerce_decimal(spent) > self.budget_amount

    def remaining_amount(self, spent) -> Decimal:
        return self.budget_amount - coerce_decimal(spent)

    @property
    def formatted_amount(self) -> str:
        return format_money(self.budget_amount)


__all__ = ["Budget", "PERCENT_QUANT"]
