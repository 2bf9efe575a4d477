"""Port for account persistence."""

from decimal import Decimal
from typing import Protocol

from src.domain.constants import AccountType
from src.domain.models import Account


class AccountsRepositoryPort(Protocol):
    """Port exposing storage and listing of accounts."""

    def add(self, account: Account) -> Account:
        """Persist a new account and return it with its id."""

    def get(self, account_id: int) -> Account | None:
        """Return the account with the given id, if any."""

    def list_for_user(self, user_id: int) -> list[Account]:
        """Return a user's accounts ordered by name ascending."""

    def list_for_user_by_type(
        self,
        user_id: int,
        account_type: AccountType,
    ) -> list[Account]:
        """Return a user's accounts of one type ordered by name ascending."""

    def total_balance_for_user(self, user_id: int) -> Decimal:
        """Return the sum of current balances, 0 when there are none."""

    def list_above_balance(
        self,
        user_id: int,
        threshold: Decimal,
    ) -> list[Account]:
        """Return accounts with balance above threshold, highest first."""

    def delete(self, account_id: int) -> bool:
        """Delete an account and its transactions."""


__all__ = ["AccountsRepositoryPort"]
