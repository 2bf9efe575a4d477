"""Composition root for wiring infrastructure adapters."""

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.aggregation import LedgerAggregationPort
from src.application.ports.budgets_repository import BudgetsRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.application.ports.users_repository import UsersRepositoryPort
from src.application.use_cases.get_recent_transactions import (
    GetRecentTransactionsUseCase,
)
from src.infrastructure.accounts_repository import SqlAlchemyAccountsRepository
from src.infrastructure.aggregation_repository import (
    SqlAlchemyLedgerAggregation,
)
from src.infrastructure.budgets_repository import SqlAlchemyBudgetsRepository
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import FinanceSettings
from src.infrastructure.transactions_repository import (
    SqlAlchemyTransactionsRepository,
)
from src.infrastructure.users_repository import SqlAlchemyUsersRepository


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_users_repository(
    db_port: DatabaseEnginePort | None = None,
) -> UsersRepositoryPort:
    """Return the users repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyUsersRepository(resolved_db)


def build_accounts_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AccountsRepositoryPort:
    """Return the accounts repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAccountsRepository(resolved_db)


def build_budgets_repository(
    db_port: DatabaseEnginePort | None = None,
) -> BudgetsRepositoryPort:
    """Return the budgets repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyBudgetsRepository(resolved_db)


def build_transactions_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionsRepositoryPort:
    """Return the ledger-aware transactions repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionsRepository(resolved_db, logger=get_app_logger())


def build_aggregation(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerAggregationPort:
    """Return the aggregation repository used by budgets and reports."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerAggregation(resolved_db)


def build_recent_transactions_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetRecentTransactionsUseCase:
    """Return the recent transactions use case with the configured limit."""
    settings = FinanceSettings.from_env()
    return GetRecentTransactionsUseCase(
        build_aggregation(db_port),
        default_limit=settings.recent_limit,
    )


__all__ = [
    "build_database_adapter",
    "build_users_repository",
    "build_accounts_repository",
    "build_budgets_repository",
    "build_transactions_repository",
    "build_aggregation",
    "build_recent_transactions_use_case",
]
