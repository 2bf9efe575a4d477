"""Ledger engine: balance maintenance and budget metrics.

Balances move incrementally as transactions are appended to an account.
Budget metrics are derived on demand from a spend figure supplied by the
aggregation layer and are never stored on the budget.
"""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models import Account, Budget, BudgetStatus, Transaction
from src.utils.decimal_utils import coerce_decimal, to_money


def apply_transaction(
    account: Account,
    transaction: Transaction,
    logger=None,
) -> Decimal:
    """Append a validated transaction to an account and update its balance.

    Args:
        account: Account receiving the transaction.
        transaction: Fully constructed, validated transaction.
        logger: Optional logger for debug tracing.

    Returns:
        Decimal: The account balance after the transaction.
    """
    previous = account.current_balance
    new_balance = account.add_transaction(transaction)
    if logger is not None:
        logger.debug(
            f"Applied {transaction.transaction_type.value} to account "
            f"{account.id}: {previous} -> {new_balance}"
        )
    return new_balance


def rebuild_balance(
    initial_balance,
    transactions: Iterable[Transaction],
) -> Decimal:
    """Recompute a balance from scratch.

    Args:
        initial_balance: Opening balance of the account.
        transactions: Every transaction recorded against the account.

    Returns:
        Decimal: Initial balance plus incomes minus expenses.
    """
    total = to_money(initial_balance)
    for transaction in transactions:
        total += transaction.signed_amount
    return total


def usage_percentage(budget: Budget, spent) -> Decimal:
    return budget.usage_percentage(spent)


def is_budget_exceeded(budget: Budget, spent) -> bool:
    return budget.is_exceeded(spent)


def remaining_budget(budget: Budget, spent) -> Decimal:
    return budget.remaining_amount(spent)


def build_budget_status(budget: Budget, spent) -> BudgetStatus:
    """Derive every budget metric for a given spend figure."""
    spent_amount = to_money(coerce_decimal(spent))
    return BudgetStatus(
        budget=budget,
        spent=spent_amount,
        remaining=remaining_budget(budget, spent_amount),
        usage_percentage=usage_percentage(budget, spent_amount),
        exceeded=is_budget_exceeded(budget, spent_amount),
    )


__all__ = [
    "apply_transaction",
    "rebuild_balance",
    "usage_percentage",
    "is_budget_exceeded",
    "remaining_budget",
    "build_budget_status",
]
