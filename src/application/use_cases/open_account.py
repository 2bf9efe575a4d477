"""Use case to open an account for an existing user."""

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.users_repository import UsersRepositoryPort
from src.domain.constants import AccountType
from src.domain.errors import NotFoundError
from src.domain.models import Account
from src.domain.services.normalization import normalize_name
from src.domain.services.validation import validate_account_fields
from src.infrastructure.logging.logger import get_app_logger


class OpenAccountUseCase:
    """Create an account whose balance starts at its initial balance."""

    def __init__(
        self,
        users_repository: UsersRepositoryPort,
        accounts_repository: AccountsRepositoryPort,
        logger=None,
    ) -> None:
        self._users_repository = users_repository
        self._accounts_repository = accounts_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: int,
        name: str,
        account_type: AccountType,
        initial_balance,
    ) -> Account:
        """Open the account.

        Args:
            user_id: Owner of the account.
            name: Display name, non-blank.
            account_type: Checking, savings or credit card.
            initial_balance: Opening balance, strictly positive.

        Returns:
            Account: The stored account.

        Raises:
            ValidationError: If a field is invalid.
            NotFoundError: If the user does not exist.
        """
        balance = validate_account_fields(name, account_type, initial_balance)
        user = self._users_repository.get(user_id)
        if user is None:
            raise NotFoundError(f"User not found: {user_id}")

        account = Account(
            name=normalize_name(name),
            account_type=account_type,
            initial_balance=balance,
        )
        user.add_account(account)
        stored = self._accounts_repository.add(account)
        self._logger.info(
            f"Opened {account_type.value} account {stored.id} for user {user_id}"
        )
        return stored


__all__ = ["OpenAccountUseCase"]
