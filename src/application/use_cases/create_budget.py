"""Use case to create a monthly budget for a category."""

from src.application.ports.budgets_repository import BudgetsRepositoryPort
from src.application.ports.users_repository import UsersRepositoryPort
from src.domain.constants import Category
from src.domain.errors import ConflictError, NotFoundError
from src.domain.models import Budget, YearMonth
from src.domain.services.validation import validate_budget_fields
from src.infrastructure.logging.logger import get_app_logger


class CreateBudgetUseCase:
    """Create a budget, rejecting a second one for the same key."""

    def __init__(
        self,
        users_repository: UsersRepositoryPort,
        budgets_repository: BudgetsRepositoryPort,
        logger=None,
    ) -> None:
        self._users_repository = users_repository
        self._budgets_repository = budgets_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: int,
        category: Category,
        budget_amount,
        budget_month: YearMonth,
    ) -> Budget:
        """Create the budget.

        Args:
            user_id: Owner of the budget.
            category: Category the cap applies to.
            budget_amount: Cap, at least 0.01.
            budget_month: Month the cap applies to.

        Returns:
            Budget: The stored budget.

        Raises:
            ValidationError: If a field is invalid.
            NotFoundError: If the user does not exist.
            ConflictError: If the (user, category, month) key is taken.
        """
        amount = validate_budget_fields(category, budget_amount, budget_month)
        user = self._users_repository.get(user_id)
        if user is None:
            raise NotFoundError(f"User not found: {user_id}")
        if self._budgets_repository.exists_for_user_category_month(
            user_id,
            category,
            budget_month,
        ):
            raise ConflictError(
                f"Budget already exists for {category.value} in {budget_month}"
            )

        budget = Budget(
            category=category,
            budget_amount=amount,
            budget_month=budget_month,
        )
        user.add_budget(budget)
        stored = self._budgets_repository.add(budget)
        self._logger.info(
            f"Created budget {stored.id} for user {user_id}, "
            f"{category.value} {budget_month}"
        )
        return stored


__all__ = ["CreateBudgetUseCase"]
