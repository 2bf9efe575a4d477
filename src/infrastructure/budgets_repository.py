"""SQLAlchemy-backed repository for budgets."""

from sqlalchemy import func, insert, select
from sqlalchemy.exc import IntegrityError

from src.application.ports.budgets_repository import BudgetsRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.constants import Category
from src.domain.errors import ConflictError
from src.domain.models import Budget, YearMonth
from src.infrastructure.records import budget_from_row, budget_to_values
from src.infrastructure.schema import budgets_table


class SqlAlchemyBudgetsRepository(BudgetsRepositoryPort):
    """Repository backed by SQLAlchemy for budgets.

    The (user_id, category, budget_month) unique constraint is the atomic
    guard against duplicate budgets created concurrently.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def add(self, budget: Budget) -> Budget:
        engine = self._db_port.get_engine()
        try:
            with engine.begin() as conn:
                result = conn.execute(
                    insert(budgets_table).values(**budget_to_values(budget))
                )
        except IntegrityError as exc:
            raise ConflictError(
                f"Budget already exists for {budget.category.value} "
                f"in {budget.budget_month}"
            ) from exc
        budget.id = result.inserted_primary_key[0]
        return budget

    def get(self, budget_id: int) -> Budget | None:
        query = select(budgets_table).where(budgets_table.c.id == budget_id)
        rows = self._fetch_all(query)
        return rows[0] if rows else None

    def list_for_user_and_month(
        self,
        user_id: int,
        month: YearMonth,
    ) -> list[Budget]:
        query = (
            select(budgets_table)
            .where(
                budgets_table.c.user_id == user_id,
                budgets_table.c.budget_month == str(month),
            )
            .order_by(budgets_table.c.category)
        )
        return self._fetch_all(query)

    def list_for_user(self, user_id: int) -> list[Budget]:
        query = (
            select(budgets_table)
            .where(budgets_table.c.user_id == user_id)
            .order_by(
                budgets_table.c.budget_month.desc(),
                budgets_table.c.category,
            )
        )
        return self._fetch_all(query)

    def find_for_user_category_month(
        self,
        user_id: int,
        category: Category,
        month: YearMonth,
    ) -> Budget | None:
        rows = self._fetch_all(self._key_query(user_id, category, month))
        return rows[0] if rows else None

    def exists_for_user_category_month(
        self,
        user_id: int,
        category: Category,
        month: YearMonth,
    ) -> bool:
        query = select(func.count()).select_from(
            self._key_query(user_id, category, month).subquery()
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            count = conn.execute(query).scalar_one()
        return count > 0

    @staticmethod
    def _key_query(user_id: int, category: Category, month: YearMonth):
        return select(budgets_table).where(
            budgets_table.c.user_id == user_id,
            budgets_table.c.category == category.value,
            budgets_table.c.budget_month == str(month),
        )

    def _fetch_all(self, query) -> list[Budget]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [budget_from_row(row) for row in rows]


__all__ = ["SqlAlchemyBudgetsRepository"]
