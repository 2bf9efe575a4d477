"""Domain package for business rules and core models."""

from .constants import (
    AccountType,
    Category,
    TransactionType,
    categories_for,
    expense_categories,
    income_categories,
    is_expense_category,
    is_income_category,
)
from .errors import ConflictError, FinanceError, NotFoundError, ValidationError
from .models import (
    Account,
    AccountsOverview,
    Budget,
    BudgetStatus,
    PeriodSummary,
    Transaction,
    User,
    YearMonth,
)
from .policies import is_blank, is_valid_email, is_valid_person_name
from .services import (
    apply_transaction,
    build_budget_status,
    compute_period_summary,
    rebuild_balance,
)

__all__ = [
    "AccountType",
    "Category",
    "TransactionType",
    "categories_for",
    "expense_categories",
    "income_categories",
    "is_expense_category",
    "is_income_category",
    "ConflictError",
    "FinanceError",
    "NotFoundError",
    "ValidationError",
    "Account",
    "AccountsOverview",
    "Budget",
    "BudgetStatus",
    "PeriodSummary",
    "Transaction",
    "User",
    "YearMonth",
    "is_blank",
    "is_valid_email",
    "is_valid_person_name",
    "apply_transaction",
    "build_budget_status",
    "compute_period_summary",
    "rebuild_balance",
]
