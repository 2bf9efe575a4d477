"""Database infrastructure for the finance tracker.

This module exposes helpers to create and reuse the SQLAlchemy engine
connected to the finance database. It belongs to the infrastructure layer
because it deals with external systems (PostgreSQL or SQLite).
"""

from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.settings import FinanceSettings


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Server databases get a small connection pool with health checks. SQLite
    keeps SQLAlchemy's default pool; each connection enforces foreign keys
    and gets a Unicode-aware lower() for case-insensitive lookups.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance.
    """
    if make_url(db_url).get_backend_name() == "sqlite":
        engine = create_engine(db_url, future=True)
        event.listen(engine, "connect", _configure_sqlite_connection)
        return engine
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


def _configure_sqlite_connection(dbapi_connection, connection_record) -> None:
    # SQLite's built-in lower() only folds ASCII.
    dbapi_connection.create_function("lower", 1, _unicode_lower)
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _unicode_lower(value):
    if value is None:
        return None
    return str(value).lower()


_finance_engine: Optional[Engine] = None


def get_finance_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the finance database.

    Returns:
        Engine: Lazily initialized engine connected to the finance store.
    """
    global _finance_engine
    if _finance_engine is None:
        settings = FinanceSettings.from_env()
        _finance_engine = _create_engine(settings.database_url)
    return _finance_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port. An explicit engine can be injected, which tests use to
    point repositories at a temporary database.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine

    def get_engine(self) -> Engine:
        """Get the engine for the finance database.

        Returns:
            Engine: SQLAlchemy engine connected to the finance store.
        """
        if self._engine is not None:
            return self._engine
        return get_finance_engine()


__all__ = [
    "get_finance_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
