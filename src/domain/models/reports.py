"""Read models derived from entities and aggregates."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.domain.models.accounts import Account
from src.domain.models.budgets import Budget


@dataclass(frozen=True)
class BudgetStatus:
    """Budget together with metrics derived from current spending.

    Attributes:
        budget: The budget being evaluated.
        spent: Expense total for the budget's category and month.
        remaining: Budget amount minus spent; negative on overage.
        usage_percentage: Spent as a percentage of the budget amount.
        exceeded: True when spent is strictly above the budget amount.
    """

    budget: Budget
    spent: Decimal
    remaining: Decimal
    usage_percentage: Decimal
    exceeded: bool


@dataclass(frozen=True)
class PeriodSummary:
    """Income and expense totals for a date range."""

    start_date: date
    end_date: date
    total_income: Decimal
    total_expense: Decimal

    @property
    def net(self) -> Decimal:
        """Return total_income minus total_expense."""
        return self.total_income - self.total_expense


@dataclass(frozen=True)
class AccountsOverview:
    """Accounts of a user together with their combined balance."""

    accounts: list[Account]
    total_balance: Decimal


__all__ = ["BudgetStatus", "PeriodSummary", "AccountsOverview"]
