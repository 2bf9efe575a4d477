"""Contract-style tests for use cases using the ledger ports."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.ports.aggregation import LedgerAggregationPort
from src.application.ports.budgets_repository import BudgetsRepositoryPort
from src.application.use_cases.get_budget_status import GetBudgetStatusUseCase
from src.application.use_cases.get_recent_transactions import (
    GetRecentTransactionsUseCase,
)
from src.domain.constants import Category, TransactionType
from src.domain.models import Budget, Transaction, YearMonth


class FakeLedgerAggregation(LedgerAggregationPort):
    """In-memory aggregation over a flat list of (user_id, transaction)."""

    def __init__(self, entries: list[tuple[int, Transaction]]) -> None:
        self._entries = entries

    def total_balance_for_user(self, user_id: int) -> Decimal:
        return Decimal("0.00")

    def spending_by_category_and_month(
        self,
        user_id: int,
        category: Category,
        year: int,
        month: int,
    ) -> Decimal:
        period = YearMonth(year, month)
        return sum(
            (
                transaction.amount
                for owner, transaction in self._entries
                if owner == user_id
                and transaction.category is category
                and transaction.transaction_type is TransactionType.EXPENSE
                and period.contains(transaction.transaction_date)
            ),
            Decimal("0.00"),
        )

    def total_income_in_period(self, user_id, start_date, end_date) -> Decimal:
        return Decimal("0.00")

    def total_expense_in_period(self, user_id, start_date, end_date) -> Decimal:
        return Decimal("0.00")

    def recent_transactions_for_user(
        self,
        user_id: int,
        limit: int | None = None,
    ) -> list[Transaction]:
        owned = [t for owner, t in self._entries if owner == user_id]
        ordered = sorted(
            owned,
            key=lambda t: (t.transaction_date, t.created_at),
            reverse=True,
        )
        return ordered[:limit] if limit is not None else ordered


class FakeBudgetsRepository(BudgetsRepositoryPort):
    """In-memory budgets keyed by (user, category, month)."""

    def __init__(self, budgets: list[Budget]) -> None:
        self._budgets = budgets

    def list_for_user_and_month(self, user_id: int, month: YearMonth):
        return sorted(
            (
                budget
                for budget in self._budgets
                if budget.user_id == user_id and budget.budget_month == month
            ),
            key=lambda budget: budget.category.value,
        )


def _expense(category: Category, amount: str, day: date) -> Transaction:
    return Transaction(
        description=category.display_name,
        amount=Decimal(amount),
        transaction_type=TransactionType.EXPENSE,
        category=category,
        transaction_date=day,
    )


def test_budget_status_reads_spend_per_category_and_month() -> None:
    """Statuses reflect only matching expenses, ordered by category."""
    march = YearMonth(2024, 3)
    aggregation = FakeLedgerAggregation(
        [
            (1, _expense(Category.GROCERIES, "120.00", date(2024, 3, 2))),
            (1, _expense(Category.GROCERIES, "30.01", date(2024, 3, 20))),
            (1, _expense(Category.GROCERIES, "99.00", date(2024, 4, 1))),
            (2, _expense(Category.GROCERIES, "500.00", date(2024, 3, 2))),
        ]
    )
    budgets = FakeBudgetsRepository(
        [
            Budget(Category.TRAVEL, Decimal("400"), march, user_id=1),
            Budget(Category.GROCERIES, Decimal("150"), march, user_id=1),
        ]
    )
    logger = MagicMock()

    statuses = GetBudgetStatusUseCase(budgets, aggregation, logger).execute(
        1,
        march,
    )

    assert [s.budget.category for s in statuses] == [
        Category.GROCERIES,
        Category.TRAVEL,
    ]
    groceries, travel = statuses
    assert groceries.spent == Decimal("150.01")
    assert groceries.exceeded is True
    assert groceries.remaining == Decimal("-0.01")
    assert travel.spent == Decimal("0.00")
    assert travel.usage_percentage == Decimal("0.0000")
    logger.warning.assert_called_once()


def test_recent_transactions_break_same_day_ties_by_creation_time() -> None:
    first = _expense(Category.GROCERIES, "1.00", date(2024, 3, 5))
    first.created_at = datetime(2024, 3, 5, 9, 0)
    second = _expense(Category.DINING_OUT, "2.00", date(2024, 3, 5))
    second.created_at = datetime(2024, 3, 5, 18, 0)
    older = _expense(Category.TRAVEL, "3.00", date(2024, 3, 1))
    aggregation = FakeLedgerAggregation([(1, first), (1, older), (1, second)])

    recent = GetRecentTransactionsUseCase(aggregation).execute(1, limit=2)

    assert recent == [second, first]
