"""CLI adapter printing a user's budgets and totals for one month."""

from datetime import date
import os
import sys

from src.application.use_cases.get_budget_status import GetBudgetStatusUseCase
from src.application.use_cases.get_period_summary import (
    GetPeriodSummaryUseCase,
)
from src.domain.errors import FinanceError
from src.domain.models import YearMonth
from src.infrastructure.container import (
    build_aggregation,
    build_budgets_repository,
    build_database_adapter,
    build_users_repository,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.utils.decimal_utils import format_money


def _parse_month(value: str | None, logger) -> YearMonth:
    """Parse a YYYY-MM string, falling back to the current month.

    Args:
        value: Month string from the environment.
        logger: Logger used for warnings.

    Returns:
        YearMonth: Parsed or current month.
    """
    if not value:
        return YearMonth.from_date(date.today())
    try:
        return YearMonth.parse(value)
    except FinanceError:
        logger.warning(f"Invalid month '{value}'. Expected format YYYY-MM.")
        return YearMonth.from_date(date.today())


def main() -> int:
    """Print budget status and income/expense totals for a user."""
    logger = get_app_logger()
    email = os.getenv("REPORT_USER_EMAIL", "").strip().lower()
    if not email:
        logger.error("REPORT_USER_EMAIL is required.")
        return 1
    month = _parse_month(os.getenv("REPORT_MONTH"), logger)

    db_adapter = build_database_adapter()
    user = build_users_repository(db_adapter).find_by_email(email)
    if user is None:
        logger.error(f"No user registered under {email}.")
        return 1

    aggregation = build_aggregation(db_adapter)
    statuses = GetBudgetStatusUseCase(
        build_budgets_repository(db_adapter),
        aggregation,
        logger=logger,
    ).execute(user.id, month)
    summary = GetPeriodSummaryUseCase(
        aggregation,
        logger=logger,
    ).execute_for_month(user.id, month)

    print(f"Report for {user.full_name} ({month})")
    print(
        f"Income: {format_money(summary.total_income)}  "
        f"Expense: {format_money(summary.total_expense)}  "
        f"Net: {format_money(summary.net)}"
    )
    for status in statuses:
        flag = "EXCEEDED" if status.exceeded else "ok"
        print(
            f"{status.budget.category.display_name}: "
            f"{format_money(status.spent)} of "
            f"{status.budget.formatted_amount} "
            f"({status.usage_percentage}%), "
            f"remaining {format_money(status.remaining)} [{flag}]"
        )
    get_usage_logger().info(f"monthly_report_cli run for {month}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
