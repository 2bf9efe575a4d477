"""Tests for the RegisterUserUseCase."""

from unittest.mock import MagicMock

import pytest

from src.application.use_cases.register_user import RegisterUserUseCase
from src.domain.errors import ConflictError, ValidationError
from src.domain.models import User


def _build_repository(exists: bool = False) -> MagicMock:
    repository = MagicMock()
    repository.exists_by_email.return_value = exists

    def _add(user: User) -> User:
        user.id = 11
        return user

    repository.add.side_effect = _add
    return repository


def test_execute_normalizes_and_persists_user() -> None:
    repository = _build_repository()
    use_case = RegisterUserUseCase(repository, logger=MagicMock())

    user = use_case.execute("  Ada ", "Lovelace", " Ada@Example.com ")

    assert user.id == 11
    assert user.first_name == "Ada"
    assert user.email == "ada@example.com"
    repository.exists_by_email.assert_called_once_with("ada@example.com")


def test_execute_rejects_existing_email_as_conflict() -> None:
    repository = _build_repository(exists=True)
    use_case = RegisterUserUseCase(repository, logger=MagicMock())

    with pytest.raises(ConflictError):
        use_case.execute("Ada", "Lovelace", "ada@example.com")

    repository.add.assert_not_called()


def test_execute_validates_before_touching_storage() -> None:
    repository = _build_repository()
    use_case = RegisterUserUseCase(repository, logger=MagicMock())

    with pytest.raises(ValidationError):
        use_case.execute("Ada", "Lovelace", "bad-email")

    repository.exists_by_email.assert_not_called()
