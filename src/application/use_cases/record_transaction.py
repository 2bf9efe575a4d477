"""Use case to record a transaction against an account.

The repository performs the write inside one database transaction: the
account row is locked, the ledger engine applies the transaction to the
rehydrated account, and both the new transaction row and the new balance
are committed together.
"""

from datetime import date

from src.application.ports.transactions_repository import (
    RecordedTransaction,
    TransactionsRepositoryPort,
)
from src.domain.constants import Category, TransactionType
from src.domain.models import Transaction
from src.domain.services.validation import validate_transaction_fields
from src.infrastructure.logging.logger import get_app_logger


class RecordTransactionUseCase:
    """Validate a transaction and hand it to the ledger-aware repository."""

    def __init__(
        self,
        transactions_repository: TransactionsRepositoryPort,
        logger=None,
    ) -> None:
        self._transactions_repository = transactions_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        account_id: int,
        description: str,
        amount,
        transaction_type: TransactionType,
        category: Category,
        transaction_date: date,
    ) -> RecordedTransaction:
        """Record the transaction.

        Args:
            account_id: Account receiving the transaction.
            description: Free text, non-blank.
            amount: Positive amount with at most two decimals.
            transaction_type: Income or expense.
            category: Category matching the transaction type.
            transaction_date: Day the money moved.

        Returns:
            RecordedTransaction: Stored transaction and the new balance.

        Raises:
            ValidationError: If a field is invalid.
            NotFoundError: If the account does not exist.
        """
        parsed_amount = validate_transaction_fields(
            description,
            amount,
            transaction_type,
            category,
            transaction_date,
        )
        transaction = Transaction(
            description=description.strip(),
            amount=parsed_amount,
            transaction_type=transaction_type,
            category=category,
            transaction_date=transaction_date,
        )
        result = self._transactions_repository.record(account_id, transaction)
        self._logger.info(
            f"Recorded {transaction_type.value} transaction "
            f"{result.transaction.id} on account {account_id}"
        )
        return result


__all__ = ["RecordTransactionUseCase"]
