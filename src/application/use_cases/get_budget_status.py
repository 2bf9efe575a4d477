"""Use case to evaluate a user's budgets for a month."""

from src.application.ports.aggregation import LedgerAggregationPort
from src.application.ports.budgets_repository import BudgetsRepositoryPort
from src.domain.models import BudgetStatus, YearMonth
from src.domain.services.ledger import build_budget_status
from src.infrastructure.logging.logger import get_app_logger


class GetBudgetStatusUseCase:
    """Combine budgets with current spending from the aggregation port."""

    def __init__(
        self,
        budgets_repository: BudgetsRepositoryPort,
        aggregation: LedgerAggregationPort,
        logger=None,
    ) -> None:
        self._budgets_repository = budgets_repository
        self._aggregation = aggregation
        self._logger = logger or get_app_logger()

    def execute(self, user_id: int, month: YearMonth) -> list[BudgetStatus]:
        """Return one status per budget, ordered by category.

        Args:
            user_id: Owner of the budgets.
            month: Month to evaluate.

        Returns:
            list[BudgetStatus]: Spend, remaining, usage and overage flags.
        """
        budgets = self._budgets_repository.list_for_user_and_month(
            user_id,
            month,
        )
        statuses = []
        for budget in budgets:
            spent = self._aggregation.spending_by_category_and_month(
                user_id,
                budget.category,
                month.year,
                month.month,
            )
            statuses.append(build_budget_status(budget, spent))

        exceeded = sum(1 for status in statuses if status.exceeded)
        self._logger.info(
            f"Evaluated {len(statuses)} budgets for user {user_id} in {month}"
        )
        if exceeded:
            self._logger.warning(
                f"{exceeded} budgets exceeded for user {user_id} in {month}"
            )
        return statuses


__all__ = ["GetBudgetStatusUseCase"]
