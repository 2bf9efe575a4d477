"""Domain services for period aggregates."""

from datetime import date

from src.domain.errors import ValidationError
from src.domain.models import PeriodSummary
from src.utils.decimal_utils import to_money


def validate_period(start_date: date, end_date: date) -> None:
    """Require an inclusive, non-inverted date range.

    Raises:
        ValidationError: If a bound is missing or start is after end.
    """
    if start_date is None or end_date is None:
        raise ValidationError("Both start and end dates are required")
    if start_date > end_date:
        raise ValidationError(
            f"Start date {start_date} is after end date {end_date}"
        )


def compute_period_summary(
    start_date: date,
    end_date: date,
    total_income,
    total_expense,
) -> PeriodSummary:
    """Build a period summary from aggregated totals.

    Args:
        start_date: Inclusive lower bound.
        end_date: Inclusive upper bound.
        total_income: Income total, None when no rows matched.
        total_expense: Expense total, None when no rows matched.

    Returns:
        PeriodSummary: Totals normalized to two decimals.
    """
    return PeriodSummary(
        start_date=start_date,
        end_date=end_date,
        total_income=to_money(total_income),
        total_expense=to_money(total_expense),
    )


__all__ = ["validate_period", "compute_period_summary"]
