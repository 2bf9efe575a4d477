"""Validation of user input before entities reach the ledger."""

from datetime import date
from decimal import Decimal, InvalidOperation

from src.domain.constants import AccountType, Category, TransactionType
from src.domain.errors import ValidationError
from src.domain.models.periods import YearMonth
from src.domain.policies.input_rules import (
    PERSON_NAME_MAX,
    PERSON_NAME_MIN,
    is_blank,
    is_valid_email,
    is_valid_person_name,
)
from src.utils.decimal_utils import MONEY_QUANT, to_money


def validate_positive_amount(value, field_name: str = "amount") -> Decimal:
    """Parse an amount and require it to be at least one cent.

    Args:
        value: Raw amount (Decimal, int or numeric string).
        field_name: Name used in error messages.

    Returns:
        Decimal: Amount quantized to two decimals.

    Raises:
        ValidationError: If missing, not numeric, float, or not positive.
    """
    if value is None:
        raise ValidationError(f"{field_name} is required")
    if isinstance(value, float):
        raise ValidationError(
            f"{field_name} must be a Decimal or string, not float"
        )
    try:
        amount = to_money(value)
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"{field_name} is not a number: {value}") from exc
    if not amount.is_finite() or amount < MONEY_QUANT:
        raise ValidationError(f"{field_name} must be greater than 0")
    return amount


def validate_user_fields(first_name: str, last_name: str, email: str) -> None:
    """Validate the fields needed to register a user.

    Raises:
        ValidationError: On blank or out-of-range names or a bad email.
    """
    for label, value in (("First name", first_name), ("Last name", last_name)):
        if is_blank(value):
            raise ValidationError(f"{label} is required")
        if not is_valid_person_name(value):
            raise ValidationError(
                f"{label} must be between {PERSON_NAME_MIN} and "
                f"{PERSON_NAME_MAX} characters"
            )
    if is_blank(email):
        raise ValidationError("Email is required")
    if not is_valid_email(email):
        raise ValidationError("Please provide a valid email address")


def validate_account_fields(
    name: str,
    account_type: AccountType | None,
    initial_balance,
) -> Decimal:
    """Validate account fields and return the parsed initial balance."""
    if is_blank(name):
        raise ValidationError("Account name is required")
    if not isinstance(account_type, AccountType):
        raise ValidationError("Account type is required")
    return validate_positive_amount(initial_balance, "Initial balance")


def validate_transaction_fields(
    description: str,
    amount,
    transaction_type: TransactionType | None,
    category: Category | None,
    transaction_date: date | None,
) -> Decimal:
    """Validate transaction fields and return the parsed amount.

    The category must belong to the subset of the transaction type, so an
    INCOME transaction cannot be filed under GROCERIES.
    """
    if is_blank(description):
        raise ValidationError("Description is required")
    parsed = validate_positive_amount(amount, "Amount")
    if not isinstance(transaction_type, TransactionType):
        raise ValidationError("Transaction type is required")
    if not isinstance(category, Category):
        raise ValidationError("Category is required")
    if category.transaction_type is not transaction_type:
        raise ValidationError(
            f"Category {category.value} is not a "
            f"{transaction_type.value.lower()} category"
        )
    if not isinstance(transaction_date, date):
        raise ValidationError("Transaction date is required")
    return parsed


def validate_budget_fields(
    category: Category | None,
    budget_amount,
    budget_month: YearMonth | None,
) -> Decimal:
    """Validate budget fields and return the parsed amount."""
    if not isinstance(category, Category):
        raise ValidationError("Category is required")
    if not isinstance(budget_month, YearMonth):
        raise ValidationError("Budget month is required")
    return validate_positive_amount(budget_amount, "Budget amount")


__all__ = [
    "validate_positive_amount",
    "validate_user_fields",
    "validate_account_fields",
    "validate_transaction_fields",
    "validate_budget_fields",
]
