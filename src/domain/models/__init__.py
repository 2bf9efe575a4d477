"""Domain models package."""

from .periods import YearMonth
from .transactions import Transaction
from .accounts import Account
from .budgets import Budget
from .users import User
from .reports import AccountsOverview, BudgetStatus, PeriodSummary

__all__ = [
    "YearMonth",
    "Transaction",
    "Account",
    "Budget",
    "User",
    "AccountsOverview",
    "BudgetStatus",
    "PeriodSummary",
]
