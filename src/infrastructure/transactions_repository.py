"""SQLAlchemy-backed ledger writes and transaction listings."""

from datetime import date

from sqlalchemy import insert, select, update

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transactions_repository import (
    RecordedTransaction,
    TransactionsRepositoryPort,
)
from src.domain.constants import Category
from src.domain.errors import NotFoundError
from src.domain.models import Transaction
from src.domain.services.ledger import apply_transaction
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.records import (
    account_from_row,
    transaction_from_row,
    transaction_to_values,
)
from src.infrastructure.schema import accounts_table, transactions_table
from src.utils.decimal_utils import to_cents


class SqlAlchemyTransactionsRepository(TransactionsRepositoryPort):
    """Repository backed by SQLAlchemy for transactions."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def record(
        self,
        account_id: int,
        transaction: Transaction,
    ) -> RecordedTransaction:
        """Insert a transaction and move its account balance atomically.

        The account row is locked for the duration of the write on backends
        that support ``SELECT ... FOR UPDATE``; concurrent recordings against
        the same account are therefore applied one after the other.

        Args:
            account_id: Account receiving the transaction.
            transaction: Validated transaction without an id.

        Returns:
            RecordedTransaction: Stored transaction and the new balance.

        Raises:
            NotFoundError: If the account does not exist.
        """
        lock_query = (
            select(accounts_table)
            .where(accounts_table.c.id == account_id)
            .with_for_update()
        )
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            row = conn.execute(lock_query).first()
            if row is None:
                raise NotFoundError(f"Account not found: {account_id}")
            account = account_from_row(row)
            new_balance = apply_transaction(account, transaction, self._logger)
            result = conn.execute(
                insert(transactions_table).values(
                    **transaction_to_values(transaction)
                )
            )
            conn.execute(
                update(accounts_table)
                .where(accounts_table.c.id == account_id)
                .values(current_balance_cents=to_cents(new_balance))
            )
        transaction.id = result.inserted_primary_key[0]
        return RecordedTransaction(transaction=transaction, balance=new_balance)

    def list_for_account(self, account_id: int) -> list[Transaction]:
        query = (
            select(transactions_table)
            .where(transactions_table.c.account_id == account_id)
            .order_by(
                transactions_table.c.transaction_date.desc(),
                transactions_table.c.created_at.desc(),
                transactions_table.c.id.desc(),
            )
        )
        return self._fetch_all(query)

    def list_by_category_and_range(
        self,
        category: Category,
        start_date: date,
        end_date: date,
    ) -> list[Transaction]:
        query = (
            select(transactions_table)
            .where(
                transactions_table.c.category == category.value,
                transactions_table.c.transaction_date.between(
                    start_date,
                    end_date,
                ),
            )
            .order_by(
                transactions_table.c.transaction_date.desc(),
                transactions_table.c.id.desc(),
            )
        )
        return self._fetch_all(query)

    def _fetch_all(self, query) -> list[Transaction]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [transaction_from_row(row) for row in rows]


__all__ = ["SqlAlchemyTransactionsRepository"]
