"""SQLAlchemy-backed aggregation queries over the ledger."""

from datetime import date
from decimal import Decimal

from sqlalchemy import func, select

from src.application.ports.aggregation import LedgerAggregationPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.constants import Category, TransactionType
from src.domain.models import Transaction, YearMonth
from src.infrastructure.records import transaction_from_row
from src.infrastructure.schema import accounts_table, transactions_table
from src.utils.decimal_utils import from_cents


class SqlAlchemyLedgerAggregation(LedgerAggregationPort):
    """Aggregation queries joining transactions to their owning accounts."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def total_balance_for_user(self, user_id: int) -> Decimal:
        query = select(
            func.coalesce(func.sum(accounts_table.c.current_balance_cents), 0)
        ).where(accounts_table.c.user_id == user_id)
        return self._scalar_amount(query)

    def spending_by_category_and_month(
        self,
        user_id: int,
        category: Category,
        year: int,
        month: int,
    ) -> Decimal:
        period = YearMonth(year, month)
        query = self._sum_query(
            user_id,
            TransactionType.EXPENSE,
            period.first_day,
            period.last_day,
        ).where(transactions_table.c.category == category.value)
        return self._scalar_amount(query)

    def total_income_in_period(
        self,
        user_id: int,
        start_date: date,
        end_date: date,
    ) -> Decimal:
        query = self._sum_query(
            user_id,
            TransactionType.INCOME,
            start_date,
            end_date,
        )
        return self._scalar_amount(query)

    def total_expense_in_period(
        self,
        user_id: int,
        start_date: date,
        end_date: date,
    ) -> Decimal:
        query = self._sum_query(
            user_id,
            TransactionType.EXPENSE,
            start_date,
            end_date,
        )
        return self._scalar_amount(query)

    def recent_transactions_for_user(
        self,
        user_id: int,
        limit: int | None = None,
    ) -> list[Transaction]:
        query = (
            select(transactions_table)
            .join(
                accounts_table,
                transactions_table.c.account_id == accounts_table.c.id,
            )
            .where(accounts_table.c.user_id == user_id)
            .order_by(
                transactions_table.c.transaction_date.desc(),
                transactions_table.c.created_at.desc(),
                transactions_table.c.id.desc(),
            )
        )
        if limit is not None:
            query = query.limit(limit)
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [transaction_from_row(row) for row in rows]

    @staticmethod
    def _sum_query(
        user_id: int,
        transaction_type: TransactionType,
        start_date: date,
        end_date: date,
    ):
        return (
            select(
                func.coalesce(func.sum(transactions_table.c.amount_cents), 0)
            )
            .select_from(
                transactions_table.join(
                    accounts_table,
                    transactions_table.c.account_id == accounts_table.c.id,
                )
            )
            .where(
                accounts_table.c.user_id == user_id,
                transactions_table.c.transaction_type == transaction_type.value,
                transactions_table.c.transaction_date.between(
                    start_date,
                    end_date,
                ),
            )
        )

    def _scalar_amount(self, query) -> Decimal:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            total = conn.execute(query).scalar_one()
        return from_cents(total)


__all__ = ["SqlAlchemyLedgerAggregation"]
