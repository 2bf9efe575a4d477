"""SQLAlchemy-backed repository for accounts."""

from decimal import Decimal

from sqlalchemy import delete, func, insert, select
from sqlalchemy.exc import IntegrityError

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.constants import AccountType
from src.domain.errors import NotFoundError
from src.domain.models import Account
from src.infrastructure.records import account_from_row, account_to_values
from src.infrastructure.schema import accounts_table, transactions_table
from src.utils.decimal_utils import from_cents, to_cents


class SqlAlchemyAccountsRepository(AccountsRepositoryPort):
    """Repository backed by SQLAlchemy for accounts."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def add(self, account: Account) -> Account:
        engine = self._db_port.get_engine()
        try:
            with engine.begin() as conn:
                result = conn.execute(
                    insert(accounts_table).values(**account_to_values(account))
                )
        except IntegrityError as exc:
            raise NotFoundError(f"User not found: {account.user_id}") from exc
        account.id = result.inserted_primary_key[0]
        return account

    def get(self, account_id: int) -> Account | None:
        query = select(accounts_table).where(accounts_table.c.id == account_id)
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(query).first()
        return account_from_row(row) if row is not None else None

    def list_for_user(self, user_id: int) -> list[Account]:
        query = (
            select(accounts_table)
            .where(accounts_table.c.user_id == user_id)
            .order_by(accounts_table.c.account_name, accounts_table.c.id)
        )
        return self._fetch_all(query)

    def list_for_user_by_type(
        self,
        user_id: int,
        account_type: AccountType,
    ) -> list[Account]:
        query = (
            select(accounts_table)
            .where(
                accounts_table.c.user_id == user_id,
                accounts_table.c.account_type == account_type.value,
            )
            .order_by(accounts_table.c.account_name, accounts_table.c.id)
        )
        return self._fetch_all(query)

    def total_balance_for_user(self, user_id: int) -> Decimal:
        query = select(
            func.coalesce(func.sum(accounts_table.c.current_balance_cents), 0)
        ).where(accounts_table.c.user_id == user_id)
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            total = conn.execute(query).scalar_one()
        return from_cents(total)

    def list_above_balance(
        self,
        user_id: int,
        threshold: Decimal,
    ) -> list[Account]:
        query = (
            select(accounts_table)
            .where(
                accounts_table.c.user_id == user_id,
                accounts_table.c.current_balance_cents > to_cents(threshold),
            )
            .order_by(
                accounts_table.c.current_balance_cents.desc(),
                accounts_table.c.id,
            )
        )
        return self._fetch_all(query)

    def delete(self, account_id: int) -> bool:
        """Delete the account and its transactions in one transaction."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                delete(transactions_table).where(
                    transactions_table.c.account_id == account_id
                )
            )
            result = conn.execute(
                delete(accounts_table).where(accounts_table.c.id == account_id)
            )
        return result.rowcount > 0

    def _fetch_all(self, query) -> list[Account]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [account_from_row(row) for row in rows]


__all__ = ["SqlAlchemyAccountsRepository"]
