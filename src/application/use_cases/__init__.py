"""Application use cases package."""

from .create_budget import CreateBudgetUseCase
from .delete_user import DeleteUserUseCase
from .get_accounts_overview import GetAccountsOverviewUseCase
from .get_budget_status import GetBudgetStatusUseCase
from .get_period_summary import GetPeriodSummaryUseCase
from .get_recent_transactions import GetRecentTransactionsUseCase
from .open_account import OpenAccountUseCase
from .record_transaction import RecordTransactionUseCase
from .register_user import RegisterUserUseCase

__all__ = [
    "CreateBudgetUseCase",
    "DeleteUserUseCase",
    "GetAccountsOverviewUseCase",
    "GetBudgetStatusUseCase",
    "GetPeriodSummaryUseCase",
    "GetRecentTransactionsUseCase",
    "OpenAccountUseCase",
    "RecordTransactionUseCase",
    "RegisterUserUseCase",
]
