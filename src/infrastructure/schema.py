"""Relational schema of the finance store.

Money columns hold integer cents so that sums are exact on every backend.
Budget months are stored as ``YYYY-MM`` strings, which sort chronologically.
"""

from sqlalchemy import (
    BigInteger,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.engine import Engine

metadata = MetaData()

users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("first_name", String(50), nullable=False),
    Column("last_name", String(50), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("created_at", DateTime, nullable=False),
)

accounts_table = Table(
    "accounts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("account_name", String(100), nullable=False),
    Column("account_type", String(20), nullable=False),
    Column("initial_balance_cents", BigInteger, nullable=False),
    Column("current_balance_cents", BigInteger, nullable=False),
    Column("created_at", DateTime, nullable=False),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
)

transactions_table = Table(
    "transactions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("description", String(255), nullable=False),
    Column("amount_cents", BigInteger, nullable=False),
    Column("transaction_type", String(10), nullable=False),
    Column("category", String(20), nullable=False),
    Column("transaction_date", Date, nullable=False, index=True),
    Column("created_at", DateTime, nullable=False),
    Column(
        "account_id",
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
)

budgets_table = Table(
    "budgets",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("category", String(20), nullable=False),
    Column("budget_amount_cents", BigInteger, nullable=False),
    Column("budget_month", String(7), nullable=False),
    Column("created_at", DateTime, nullable=False),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    UniqueConstraint(
        "user_id",
        "category",
        "budget_month",
        name="uq_budgets_user_category_month",
    ),
)


def create_schema(engine: Engine) -> None:
    """Create every finance table that does not exist yet."""
    metadata.create_all(engine)


__all__ = [
    "metadata",
    "users_table",
    "accounts_table",
    "transactions_table",
    "budgets_table",
    "create_schema",
]
