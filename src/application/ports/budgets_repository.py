"""Port for budget persistence."""

from typing import Protocol

from src.domain.constants import Category
from src.domain.models import Budget, YearMonth


class BudgetsRepositoryPort(Protocol):
    """Port exposing storage and lookup of budgets."""

    def add(self, budget: Budget) -> Budget:
        """Persist a new budget and return it with its id.

        Raises:
            ConflictError: If a budget already exists for the same user,
                category and month.
        """

    def get(self, budget_id: int) -> Budget | None:
        """Return the budget with the given id, if any."""

    def list_for_user_and_month(
        self,
        user_id: int,
        month: YearMonth,
    ) -> list[Budget]:
        """Return a user's budgets for a month ordered by category."""

    def list_for_user(self, user_id: int) -> list[Budget]:
        """Return all budgets, newest month first then by category."""

    def find_for_user_category_month(
        self,
        user_id: int,
        category: Category,
        month: YearMonth,
    ) -> Budget | None:
        """Return the budget for a (user, category, month) key, if any."""

    def exists_for_user_category_month(
        self,
        user_id: int,
        category: Category,
        month: YearMonth,
    ) -> bool:
        """Return True when the (user, category, month) key is taken."""


__all__ = ["BudgetsRepositoryPort"]
