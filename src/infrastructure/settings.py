"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

DEFAULT_RECENT_LIMIT = 10


@dataclass(frozen=True)
class FinanceSettings:
    """Settings for the finance tracker.

    Attributes:
        database_url: SQLAlchemy URL of the finance database.
        recent_limit: Default number of recent transactions to show.
    """

    database_url: str
    recent_limit: int = DEFAULT_RECENT_LIMIT

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables and a local .env file.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        database_url = os.getenv("FINANCE_DB_URL", "").strip()
        if not database_url:
            database_url = cls._default_database_url()
        recent_limit = cls._parse_limit(
            os.getenv("FINANCE_RECENT_LIMIT"),
            logger=logger,
        )
        return cls(database_url=database_url, recent_limit=recent_limit)

    @staticmethod
    def _default_database_url() -> str:
        """Return a SQLite URL under the project's data/ directory."""
        data_dir = get_project_root() / "data"
        data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite:///{data_dir / 'finance.db'}"

    @staticmethod
    def _parse_limit(raw_value: str | None, logger) -> int:
        """Parse the recent transactions limit.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Positive limit, or the default when unset or invalid.
        """
        if not raw_value:
            return DEFAULT_RECENT_LIMIT
        try:
            value = int(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid FINANCE_RECENT_LIMIT '{raw_value}', "
                f"using {DEFAULT_RECENT_LIMIT}"
            )
            return DEFAULT_RECENT_LIMIT
        if value < 1:
            logger.warning(
                f"FINANCE_RECENT_LIMIT must be positive, "
                f"using {DEFAULT_RECENT_LIMIT}"
            )
            return DEFAULT_RECENT_LIMIT
        return value


__all__ = ["FinanceSettings", "DEFAULT_RECENT_LIMIT"]
