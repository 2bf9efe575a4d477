"""Conversions between database rows and domain entities."""

from src.domain.constants import AccountType, Category, TransactionType
from src.domain.models import Account, Budget, Transaction, User, YearMonth
from src.utils.decimal_utils import from_cents, to_cents


def user_from_row(row) -> User:
    return User(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email,
        created_at=row.created_at,
    )


def user_to_values(user: User) -> dict:
    return {
        "first_name": user.first_name,
        "last_name": user.last_name,
        "email": user.email,
        "created_at": user.created_at,
    }


def account_from_row(row) -> Account:
    return Account(
        id=row.id,
        name=row.account_name,
        account_type=AccountType(row.account_type),
        initial_balance=from_cents(row.initial_balance_cents),
        current_balance=from_cents(row.current_balance_cents),
        user_id=row.user_id,
        created_at=row.created_at,
    )


def account_to_values(account: Account) -> dict:
    return {
        "account_name": account.name,
        "account_type": account.account_type.value,
        "initial_balance_cents": to_cents(account.initial_balance),
        "current_balance_cents": to_cents(account.current_balance),
        "created_at": account.created_at,
        "user_id": account.user_id,
    }


def transaction_from_row(row) -> Transaction:
    return Transaction(
        id=row.id,
        description=row.description,
        amount=from_cents(row.amount_cents),
        transaction_type=TransactionType(row.transaction_type),
        category=Category(row.category),
        transaction_date=row.transaction_date,
        created_at=row.created_at,
        account_id=row.account_id,
    )


def transaction_to_values(transaction: Transaction) -> dict:
    return {
        "description": transaction.description,
        "amount_cents": to_cents(transaction.amount),
        "transaction_type": transaction.transaction_type.value,
        "category": transaction.category.value,
        "transaction_date": transaction.transaction_date,
        "created_at": transaction.created_at,
        "account_id": transaction.account_id,
    }


def budget_from_row(row) -> Budget:
    return Budget(
        id=row.id,
        category=Category(row.category),
        budget_amount=from_cents(row.budget_amount_cents),
        budget_month=YearMonth.parse(row.budget_month),
        user_id=row.user_id,
        created_at=row.created_at,
    )


def budget_to_values(budget: Budget) -> dict:
    return {
        "category": budget.category.value,
        "budget_amount_cents": to_cents(budget.budget_amount),
        "budget_month": str(budget.budget_month),
        "created_at": budget.created_at,
        "user_id": budget.user_id,
    }


__all__ = [
    "user_from_row",
    "user_to_values",
    "account_from_row",
    "account_to_values",
    "transaction_from_row",
    "transaction_to_values",
    "budget_from_row",
    "budget_to_values",
]
