"""Port for transaction persistence."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Protocol

from src.domain.constants import Category
from src.domain.models import Transaction


@dataclass(frozen=True)
class RecordedTransaction:
    """Stored transaction with the balance of its account afterwards."""

    transaction: Transaction
    balance: Decimal


class TransactionsRepositoryPort(Protocol):
    """Port exposing ledger writes and transaction listings."""

    def record(
        self,
        account_id: int,
        transaction: Transaction,
    ) -> RecordedTransaction:
        """Insert a transaction and update its account balance atomically.

        Raises:
            NotFoundError: If the account does not exist.
        """

    def list_for_account(self, account_id: int) -> list[Transaction]:
        """Return transactions by date then creation time, newest first."""

    def list_by_category_and_range(
        self,
        category: Category,
        start_date: date,
        end_date: date,
    ) -> list[Transaction]:
        """Return transactions of a category in an inclusive date range."""


__all__ = ["RecordedTransaction", "TransactionsRepositoryPort"]
