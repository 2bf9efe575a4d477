"""Tests for the monthly_report_cli adapter."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.adapters import monthly_report_cli
from src.domain.constants import AccountType, Category, TransactionType
from src.domain.models import Account, Budget, Transaction, User, YearMonth
from src.infrastructure import container
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter, _create_engine
from src.infrastructure.schema import create_schema


@pytest.fixture()
def report_env(monkeypatch, tmp_path):
    engine = _create_engine(f"sqlite:///{tmp_path / 'report.db'}")
    create_schema(engine)
    db_port = SqlAlchemyDatabaseEngineAdapter(engine)
    logger = MagicMock()
    monkeypatch.setattr(
        monthly_report_cli,
        "build_database_adapter",
        lambda: db_port,
    )
    monkeypatch.setattr(monthly_report_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(
        monthly_report_cli,
        "get_usage_logger",
        lambda: MagicMock(),
    )
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    monkeypatch.delenv("REPORT_USER_EMAIL", raising=False)
    monkeypatch.delenv("REPORT_MONTH", raising=False)
    yield {"db_port": db_port, "logger": logger}
    engine.dispose()


def _seed(db_port) -> User:
    user = container.build_users_repository(db_port).add(
        User("Grace", "Hopper", "grace@example.com")
    )
    account = container.build_accounts_repository(db_port).add(
        Account("Checking", AccountType.CHECKING, Decimal("1000"), user_id=user.id)
    )
    ledger = container.build_transactions_repository(db_port)
    for amount, kind, category in (
        ("3000.00", TransactionType.INCOME, Category.SALARY),
        ("250.00", TransactionType.EXPENSE, Category.DINING_OUT),
    ):
        ledger.record(
            account.id,
            Transaction(
                description=category.display_name,
                amount=Decimal(amount),
                transaction_type=kind,
                category=category,
                transaction_date=date(2024, 3, 15),
            ),
        )
    container.build_budgets_repository(db_port).add(
        Budget(
            Category.DINING_OUT,
            Decimal("200.00"),
            YearMonth(2024, 3),
            user_id=user.id,
        )
    )
    return user


def test_main_requires_email(report_env, capsys):
    assert monthly_report_cli.main() == 1
    report_env["logger"].error.assert_called_once_with(
        "REPORT_USER_EMAIL is required."
    )
    assert capsys.readouterr().out == ""


def test_main_rejects_unknown_user(report_env, monkeypatch):
    monkeypatch.setenv("REPORT_USER_EMAIL", "nobody@example.com")

    assert monthly_report_cli.main() == 1
    report_env["logger"].error.assert_called_once_with(
        "No user registered under nobody@example.com."
    )


def test_main_prints_budget_report(report_env, monkeypatch, capsys):
    _seed(report_env["db_port"])
    monkeypatch.setenv("REPORT_USER_EMAIL", " Grace@Example.com ")
    monkeypatch.setenv("REPORT_MONTH", "2024-03")

    assert monthly_report_cli.main() == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Report for Grace Hopper (2024-03)"
    assert lines[1] == (
        "Income: $3000.00  Expense: $250.00  Net: $2750.00"
    )
    assert lines[2] == (
        "Dining Out: $250.00 of $200.00 (125.0000%), "
        "remaining -$50.00 [EXCEEDED]"
    )


def test_parse_month_falls_back_to_current_month():
    logger = MagicMock()

    month = monthly_report_cli._parse_month("March", logger)

    assert month == YearMonth.from_date(date.today())
    logger.warning.assert_called_once()
    assert monthly_report_cli._parse_month("2023-11", logger) == YearMonth(
        2023, 11
    )
