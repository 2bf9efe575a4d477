"""Application ports package."""

from .accounts_repository import AccountsRepositoryPort
from .aggregation import LedgerAggregationPort
from .budgets_repository import BudgetsRepositoryPort
from .database import DatabaseEnginePort
from .transactions_repository import (
    RecordedTransaction,
    TransactionsRepositoryPort,
)
from .users_repository import UsersRepositoryPort

__all__ = [
    "AccountsRepositoryPort",
    "LedgerAggregationPort",
    "BudgetsRepositoryPort",
    "DatabaseEnginePort",
    "RecordedTransaction",
    "TransactionsRepositoryPort",
    "UsersRepositoryPort",
]
