"""Use case to total income and expenses over a date range."""

from datetime import date

from src.application.ports.aggregation import LedgerAggregationPort
from src.domain.models import PeriodSummary, YearMonth
from src.domain.services.finance import compute_period_summary, validate_period
from src.infrastructure.logging.logger import get_app_logger


class GetPeriodSummaryUseCase:
    """Compute income, expense and net for a user."""

    def __init__(self, aggregation: LedgerAggregationPort, logger=None) -> None:
        self._aggregation = aggregation
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: int,
        start_date: date,
        end_date: date,
    ) -> PeriodSummary:
        """Return totals between inclusive bounds.

        Raises:
            ValidationError: If the range is missing or inverted.
        """
        validate_period(start_date, end_date)
        income = self._aggregation.total_income_in_period(
            user_id,
            start_date,
            end_date,
        )
        expense = self._aggregation.total_expense_in_period(
            user_id,
            start_date,
            end_date,
        )
        summary = compute_period_summary(start_date, end_date, income, expense)
        self._logger.info(
            f"Period totals for user {user_id} ({start_date}..{end_date}): "
            f"income={summary.total_income}, expense={summary.total_expense}"
        )
        return summary

    def execute_for_month(self, user_id: int, month: YearMonth) -> PeriodSummary:
        """Return totals for a whole calendar month."""
        return self.execute(user_id, month.first_day, month.last_day)


__all__ = ["GetPeriodSummaryUseCase"]
