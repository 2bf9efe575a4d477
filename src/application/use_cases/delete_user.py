"""Use case to delete a user and everything the user owns."""

from src.application.ports.users_repository import UsersRepositoryPort
from src.domain.errors import NotFoundError
from src.infrastructure.logging.logger import get_app_logger


class DeleteUserUseCase:
    """Remove a user with its budgets, accounts and transactions."""

    def __init__(self, users_repository: UsersRepositoryPort, logger=None) -> None:
        self._users_repository = users_repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: int) -> None:
        """Delete the user.

        Raises:
            NotFoundError: If the user does not exist.
        """
        if not self._users_repository.delete(user_id):
            raise NotFoundError(f"User not found: {user_id}")
        self._logger.info(f"Deleted user {user_id} and owned records")


__all__ = ["DeleteUserUseCase"]
