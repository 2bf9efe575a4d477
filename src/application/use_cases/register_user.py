"""Use case to register a new user."""

from src.application.ports.users_repository import UsersRepositoryPort
from src.domain.errors import ConflictError
from src.domain.models import User
from src.domain.services.normalization import normalize_email, normalize_name
from src.domain.services.validation import validate_user_fields
from src.infrastructure.logging.logger import get_app_logger


class RegisterUserUseCase:
    """Validate and persist a user with a unique email."""

    def __init__(self, users_repository: UsersRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            users_repository: Port storing users.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._users_repository = users_repository
        self._logger = logger or get_app_logger()

    def execute(self, first_name: str, last_name: str, email: str) -> User:
        """Register the user.

        Args:
            first_name: Given name, 2 to 50 characters.
            last_name: Family name, 2 to 50 characters.
            email: Contact address, unique across users.

        Returns:
            User: The stored user with its id.

        Raises:
            ValidationError: If a field is missing or malformed.
            ConflictError: If the email is already registered.
        """
        validate_user_fields(first_name, last_name, email)
        normalized_email = normalize_email(email)
        if self._users_repository.exists_by_email(normalized_email):
            raise ConflictError(f"Email already registered: {normalized_email}")

        user = self._users_repository.add(
            User(
                first_name=normalize_name(first_name),
                last_name=normalize_name(last_name),
                email=normalized_email,
            )
        )
        self._logger.info(f"Registered user {user.id}")
        return user


__all__ = ["RegisterUserUseCase"]
