"""Integration tests for the SQLAlchemy repositories on SQLite."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.create_budget import CreateBudgetUseCase
from src.domain.constants import AccountType, Category, TransactionType
from src.domain.errors import ConflictError, NotFoundError
from src.domain.models import Account, Budget, Transaction, User, YearMonth
from src.infrastructure import transactions_repository as transactions_module
from src.infrastructure.accounts_repository import SqlAlchemyAccountsRepository
from src.infrastructure.budgets_repository import SqlAlchemyBudgetsRepository
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter, _create_engine
from src.infrastructure.schema import create_schema
from src.infrastructure.transactions_repository import (
    SqlAlchemyTransactionsRepository,
)
from src.infrastructure.users_repository import SqlAlchemyUsersRepository


@pytest.fixture()
def db_port(tmp_path):
    engine = _create_engine(f"sqlite:///{tmp_path / 'finance.db'}")
    create_schema(engine)
    yield SqlAlchemyDatabaseEngineAdapter(engine)
    engine.dispose()


@pytest.fixture()
def repos(db_port):
    return {
        "users": SqlAlchemyUsersRepository(db_port),
        "accounts": SqlAlchemyAccountsRepository(db_port),
        "budgets": SqlAlchemyBudgetsRepository(db_port),
        "transactions": SqlAlchemyTransactionsRepository(
            db_port,
            logger=MagicMock(),
        ),
    }


def _user(repos, email: str = "ada@example.com") -> User:
    return repos["users"].add(User("Ada", "Lovelace", email))


def _account(repos, user: User, name: str, balance: str, kind=AccountType.CHECKING):
    return repos["accounts"].add(
        Account(name, kind, Decimal(balance), user_id=user.id)
    )


def _transaction(
    amount: str,
    transaction_type: TransactionType,
    category: Category,
    day: date,
    created_at: datetime | None = None,
) -> Transaction:
    transaction = Transaction(
        description=category.display_name,
        amount=Decimal(amount),
        transaction_type=transaction_type,
        category=category,
        transaction_date=day,
    )
    if created_at is not None:
        transaction.created_at = created_at
    return transaction


def test_users_lookup_by_email_and_name(repos) -> None:
    user = _user(repos)

    assert user.id is not None
    assert repos["users"].get(user.id) == user
    assert repos["users"].find_by_email("ada@example.com").id == user.id
    assert repos["users"].exists_by_email("ada@example.com") is True
    assert repos["users"].exists_by_email("bob@example.com") is False
    assert repos["users"].find_by_name("ADA", "lovelace").id == user.id
    assert repos["users"].find_by_name("Ada", "Byron") is None


def test_users_lookup_by_name_folds_non_ascii(repos) -> None:
    user = repos["users"].add(User("Élodie", "Müller", "elodie@example.com"))

    found = repos["users"].find_by_name("élodie", "MÜLLER")

    assert found is not None
    assert found.id == user.id
    assert repos["users"].find_by_name("ELODIE", "muller") is None


def test_duplicate_email_is_a_conflict(repos) -> None:
    _user(repos)

    with pytest.raises(ConflictError):
        _user(repos)


def test_scenario_balance_is_persisted(repos) -> None:
    """1000.00 - 200.00 groceries + 50.00 other income = 850.00."""
    user = _user(repos)
    checking = _account(repos, user, "Checking", "1000.00")

    first = repos["transactions"].record(
        checking.id,
        _transaction(
            "200.00",
            TransactionType.EXPENSE,
            Category.GROCERIES,
            date(2024, 3, 5),
        ),
    )
    assert first.balance == Decimal("800.00")
    assert repos["accounts"].get(checking.id).current_balance == Decimal("800.00")

    second = repos["transactions"].record(
        checking.id,
        _transaction(
            "50.00",
            TransactionType.INCOME,
            Category.OTHER_INCOME,
            date(2024, 3, 6),
        ),
    )
    stored = repos["accounts"].get(checking.id)

    assert second.balance == Decimal("850.00")
    assert second.transaction.id is not None
    assert second.transaction.account_id == checking.id
    assert stored.current_balance == Decimal("850.00")
    assert stored.initial_balance == Decimal("1000.00")


def test_record_on_missing_account_raises_not_found(repos) -> None:
    with pytest.raises(NotFoundError):
        repos["transactions"].record(
            404,
            _transaction(
                "1.00",
                TransactionType.EXPENSE,
                Category.TRAVEL,
                date(2024, 3, 5),
            ),
        )


def test_failed_insert_leaves_balance_untouched(repos, monkeypatch) -> None:
    """A rejected transaction row never leaves a moved balance behind."""
    user = _user(repos)
    checking = _account(repos, user, "Checking", "100.00")
    original = transactions_module.transaction_to_values
    monkeypatch.setattr(
        transactions_module,
        "transaction_to_values",
        lambda transaction: {**original(transaction), "description": None},
    )

    with pytest.raises(Exception):
        repos["transactions"].record(
            checking.id,
            _transaction(
                "40.00",
                TransactionType.EXPENSE,
                Category.SHOPPING,
                date(2024, 3, 5),
            ),
        )

    assert repos["accounts"].get(checking.id).current_balance == Decimal("100.00")
    assert repos["transactions"].list_for_account(checking.id) == []


def test_account_listings_and_totals(repos) -> None:
    user = _user(repos)
    other = _user(repos, "bob@example.com")
    _account(repos, user, "Savings", "300.00", AccountType.SAVINGS)
    _account(repos, user, "Checking", "1000.00")
    _account(repos, user, "Card", "50.25", AccountType.CREDIT_CARD)
    _account(repos, other, "Bob checking", "9999.00")

    names = [a.name for a in repos["accounts"].list_for_user(user.id)]
    savings = repos["accounts"].list_for_user_by_type(user.id, AccountType.SAVINGS)
    above = repos["accounts"].list_above_balance(user.id, Decimal("100"))

    assert names == ["Card", "Checking", "Savings"]
    assert [a.name for a in savings] == ["Savings"]
    assert [a.name for a in above] == ["Checking", "Savings"]
    assert repos["accounts"].total_balance_for_user(user.id) == Decimal("1350.25")
    assert repos["accounts"].total_balance_for_user(12345) == Decimal("0.00")


def test_account_requires_existing_user(repos) -> None:
    with pytest.raises(NotFoundError):
        repos["accounts"].add(
            Account("Orphan", AccountType.CHECKING, Decimal("1"), user_id=777)
        )


def test_transactions_for_account_order_by_date_then_creation(repos) -> None:
    user = _user(repos)
    checking = _account(repos, user, "Checking", "500.00")
    ledger = repos["transactions"]
    morning = ledger.record(
        checking.id,
        _transaction(
            "1.00",
            TransactionType.EXPENSE,
            Category.DINING_OUT,
            date(2024, 3, 5),
            datetime(2024, 3, 5, 8, 0),
        ),
    ).transaction
    older = ledger.record(
        checking.id,
        _transaction(
            "2.00",
            TransactionType.EXPENSE,
            Category.TRAVEL,
            date(2024, 3, 1),
        ),
    ).transaction
    evening = ledger.record(
        checking.id,
        _transaction(
            "3.00",
            TransactionType.EXPENSE,
            Category.DINING_OUT,
            date(2024, 3, 5),
            datetime(2024, 3, 5, 20, 0),
        ),
    ).transaction

    listed = ledger.list_for_account(checking.id)
    dining = ledger.list_by_category_and_range(
        Category.DINING_OUT,
        date(2024, 3, 1),
        date(2024, 3, 5),
    )

    assert [t.id for t in listed] == [evening.id, morning.id, older.id]
    assert {t.id for t in dining} == {evening.id, morning.id}
    assert listed[0].amount == Decimal("3.00")
    assert listed[0].transaction_type is TransactionType.EXPENSE


def test_budgets_unique_per_user_category_month(repos) -> None:
    user = _user(repos)
    march = YearMonth(2024, 3)
    budgets = repos["budgets"]
    budgets.add(Budget(Category.TRAVEL, Decimal("100"), march, user_id=user.id))
    budgets.add(Budget(Category.GROCERIES, Decimal("300"), march, user_id=user.id))
    budgets.add(
        Budget(Category.GROCERIES, Decimal("250"), YearMonth(2024, 2), user_id=user.id)
    )

    with pytest.raises(ConflictError):
        budgets.add(
            Budget(Category.GROCERIES, Decimal("1"), march, user_id=user.id)
        )

    assert [b.category for b in budgets.list_for_user_and_month(user.id, march)] == [
        Category.GROCERIES,
        Category.TRAVEL,
    ]
    assert [
        (str(b.budget_month), b.category) for b in budgets.list_for_user(user.id)
    ] == [
        ("2024-03", Category.GROCERIES),
        ("2024-03", Category.TRAVEL),
        ("2024-02", Category.GROCERIES),
    ]
    found = budgets.find_for_user_category_month(user.id, Category.GROCERIES, march)
    assert found.budget_amount == Decimal("300.00")
    assert budgets.get(found.id) == found
    assert budgets.exists_for_user_category_month(
        user.id, Category.GROCERIES, march
    ) is True
    assert budgets.exists_for_user_category_month(
        user.id, Category.HEALTHCARE, march
    ) is False
    assert budgets.find_for_user_category_month(
        user.id, Category.HEALTHCARE, march
    ) is None


def test_second_budget_through_use_case_is_a_conflict(repos) -> None:
    user = _user(repos)
    use_case = CreateBudgetUseCase(repos["users"], repos["budgets"], MagicMock())
    use_case.execute(user.id, Category.GROCERIES, "300", YearMonth(2024, 3))

    with pytest.raises(ConflictError):
        use_case.execute(user.id, Category.GROCERIES, "100", YearMonth(2024, 3))


def test_deleting_user_cascades_to_owned_records(repos) -> None:
    user = _user(repos)
    keeper = _user(repos, "bob@example.com")
    checking = _account(repos, user, "Checking", "100.00")
    kept_account = _account(repos, keeper, "Bob checking", "10.00")
    repos["transactions"].record(
        checking.id,
        _transaction("5.00", TransactionType.EXPENSE, Category.TRAVEL, date(2024, 3, 1)),
    )
    repos["budgets"].add(
        Budget(Category.TRAVEL, Decimal("50"), YearMonth(2024, 3), user_id=user.id)
    )

    assert repos["users"].delete(user.id) is True

    assert repos["users"].get(user.id) is None
    assert repos["accounts"].get(checking.id) is None
    assert repos["transactions"].list_for_account(checking.id) == []
    assert repos["budgets"].list_for_user(user.id) == []
    assert repos["accounts"].get(kept_account.id) is not None
    assert repos["users"].delete(user.id) is False


def test_deleting_account_removes_its_transactions(repos) -> None:
    user = _user(repos)
    checking = _account(repos, user, "Checking", "100.00")
    repos["transactions"].record(
        checking.id,
        _transaction("5.00", TransactionType.EXPENSE, Category.TRAVEL, date(2024, 3, 1)),
    )

    assert repos["accounts"].delete(checking.id) is True
    assert repos["transactions"].list_for_account(checking.id) == []
    assert repos["accounts"].delete(checking.id) is False
