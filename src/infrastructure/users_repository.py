"""SQLAlchemy-backed repository for users."""

from sqlalchemy import delete, func, insert, select
from sqlalchemy.exc import IntegrityError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.users_repository import UsersRepositoryPort
from src.domain.errors import ConflictError
from src.domain.models import User
from src.infrastructure.records import user_from_row, user_to_values
from src.infrastructure.schema import (
    accounts_table,
    budgets_table,
    transactions_table,
    users_table,
)


class SqlAlchemyUsersRepository(UsersRepositoryPort):
    """Repository backed by SQLAlchemy for users."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def add(self, user: User) -> User:
        engine = self._db_port.get_engine()
        try:
            with engine.begin() as conn:
                result = conn.execute(
                    insert(users_table).values(**user_to_values(user))
                )
        except IntegrityError as exc:
            raise ConflictError(
                f"Email already registered: {user.email}"
            ) from exc
        user.id = result.inserted_primary_key[0]
        return user

    def get(self, user_id: int) -> User | None:
        query = select(users_table).where(users_table.c.id == user_id)
        return self._fetch_one(query)

    def find_by_email(self, email: str) -> User | None:
        query = select(users_table).where(users_table.c.email == email)
        return self._fetch_one(query)

    def exists_by_email(self, email: str) -> bool:
        query = select(func.count()).select_from(users_table).where(
            users_table.c.email == email
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            count = conn.execute(query).scalar_one()
        return count > 0

    def find_by_name(self, first_name: str, last_name: str) -> User | None:
        query = (
            select(users_table)
            .where(
                func.lower(users_table.c.first_name) == first_name.lower(),
                func.lower(users_table.c.last_name) == last_name.lower(),
            )
            .order_by(users_table.c.id)
        )
        return self._fetch_one(query)

    def delete(self, user_id: int) -> bool:
        """Delete the user and everything it owns in one transaction."""
        owned_accounts = select(accounts_table.c.id).where(
            accounts_table.c.user_id == user_id
        )
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                delete(transactions_table).where(
                    transactions_table.c.account_id.in_(owned_accounts)
                )
            )
            conn.execute(
                delete(accounts_table).where(
                    accounts_table.c.user_id == user_id
                )
            )
            conn.execute(
                delete(budgets_table).where(budgets_table.c.user_id == user_id)
            )
            result = conn.execute(
                delete(users_table).where(users_table.c.id == user_id)
            )
        return result.rowcount > 0

    def _fetch_one(self, query) -> User | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(query).first()
        return user_from_row(row) if row is not None else None


__all__ = ["SqlAlchemyUsersRepository"]
