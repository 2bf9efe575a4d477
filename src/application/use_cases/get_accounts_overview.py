"""Use case to list a user's accounts with their total balance."""

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.domain.constants import AccountType
from src.domain.models import AccountsOverview
from src.utils.decimal_utils import to_money


class GetAccountsOverviewUseCase:
    """Fetch accounts ordered by name and the user's total balance."""

    def __init__(self, accounts_repository: AccountsRepositoryPort) -> None:
        self._accounts_repository = accounts_repository

    def execute(
        self,
        user_id: int,
        account_type: AccountType | None = None,
    ) -> AccountsOverview:
        """Return the overview, optionally restricted to one account type.

        The total balance always covers every account of the user.
        """
        if account_type is None:
            accounts = self._accounts_repository.list_for_user(user_id)
        else:
            accounts = self._accounts_repository.list_for_user_by_type(
                user_id,
                account_type,
            )
        total = self._accounts_repository.total_balance_for_user(user_id)
        return AccountsOverview(accounts=accounts, total_balance=to_money(total))


__all__ = ["GetAccountsOverviewUseCase"]
