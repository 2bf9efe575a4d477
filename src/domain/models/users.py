"""User entity."""

from dataclasses import dataclass, field
from datetime import datetime

from src.domain.models.accounts import Account
from src.domain.models.budgets import Budget


@dataclass
class User:
    """Person owning accounts and budgets.

    Attributes:
        first_name: Given name.
        last_name: Family name.
        email: Unique contact address.
        id: Identifier assigned by persistence.
        created_at: Creation timestamp.
        accounts: Accounts loaded for this user, if any.
        budgets: Budgets loaded for this user, if any.
    """

    first_name: str
    last_name: str
    email: str
    id: int | None = None
    created_at: datetime = field(default_factory=datetime.now)
    accounts: list[Account] = field(
        default_factory=list, repr=False, compare=False
    )
    budgets: list[Budget] = field(
        default_factory=list, repr=False, compare=False
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def add_account(self, account: Account) -> None:
        self.accounts.append(account)
        account.user_id = self.id

    def add_budget(self, budget: Budget) -> None:
        self.budgets.append(budget)
        budget.user_id = self.id


__all__ = ["User"]
