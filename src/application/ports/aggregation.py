"""Aggregation port: sums and recency-ordered reads over the ledger."""

from datetime import date
from decimal import Decimal
from typing import Protocol

from src.domain.constants import Category
from src.domain.models import Transaction


class LedgerAggregationPort(Protocol):
    """Port exposing the aggregates used by budgets and reports.

    Every sum defaults to ``Decimal("0.00")`` when no rows match.
    """

    def total_balance_for_user(self, user_id: int) -> Decimal:
        """Return the current balance summed over a user's accounts."""

    def spending_by_category_and_month(
        self,
        user_id: int,
        category: Category,
        year: int,
        month: int,
    ) -> Decimal:
        """Return expense total for a category in one calendar month."""

    def total_income_in_period(
        self,
        user_id: int,
        start_date: date,
        end_date: date,
    ) -> Decimal:
        """Return income total between inclusive dates."""

    def total_expense_in_period(
        self,
        user_id: int,
        start_date: date,
        end_date: date,
    ) -> Decimal:
        """Return expense total between inclusive dates."""

    def recent_transactions_for_user(
        self,
        user_id: int,
        limit: int | None = None,
    ) -> list[Transaction]:
        """Return transactions across accounts, newest date then newest entry."""


__all__ = ["LedgerAggregationPort"]
