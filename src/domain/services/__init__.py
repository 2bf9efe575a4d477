"""Domain services package."""

from .finance import compute_period_summary, validate_period
from .ledger import (
    apply_transaction,
    build_budget_status,
    is_budget_exceeded,
    rebuild_balance,
    remaining_budget,
    usage_percentage,
)
from .normalization import normalize_email, normalize_name
from .validation import (
    validate_account_fields,
    validate_budget_fields,
    validate_positive_amount,
    validate_transaction_fields,
    validate_user_fields,
)

__all__ = [
    "apply_transaction",
    "build_budget_status",
    "is_budget_exceeded",
    "rebuild_balance",
    "remaining_budget",
    "usage_percentage",
    "compute_period_summary",
    "validate_period",
    "normalize_email",
    "normalize_name",
    "validate_account_fields",
    "validate_budget_fields",
    "validate_positive_amount",
    "validate_transaction_fields",
    "validate_user_fields",
]
