"""Port for user persistence."""

from typing import Protocol

from src.domain.models import User


class UsersRepositoryPort(Protocol):
    """Port exposing storage of users."""

    def add(self, user: User) -> User:
        """Persist a new user and return it with its id.

        Raises:
            ConflictError: If the email is already registered.
        """

    def get(self, user_id: int) -> User | None:
        """Return the user with the given id, if any."""

    def find_by_email(self, email: str) -> User | None:
        """Return the user registered under an email, if any."""

    def exists_by_email(self, email: str) -> bool:
        """Return True when the email is already registered."""

    def find_by_name(self, first_name: str, last_name: str) -> User | None:
        """Return a user matching both names, ignoring case."""

    def delete(self, user_id: int) -> bool:
        """Delete a user with its budgets, accounts and transactions."""


__all__ = ["UsersRepositoryPort"]
