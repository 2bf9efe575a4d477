"""Calendar value objects."""

import calendar
from dataclasses import dataclass
from datetime import date

from src.domain.errors import ValidationError


@dataclass(frozen=True, order=True)
class YearMonth:
    """A calendar month, the granularity of budgets."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValidationError(f"Month must be between 1 and 12: {self.month}")
        if not 1 <= self.year <= 9999:
            raise ValidationError(f"Year out of range: {self.year}")

    @classmethod
    def parse(cls, raw: str) -> "YearMonth":
        """Parse a ``YYYY-MM`` string.

        Args:
            raw: Month string such as ``2024-03``.

        Returns:
            YearMonth: Parsed month.

        Raises:
            ValidationError: If the string is not a valid month.
        """
        parts = (raw or "").strip().split("-")
        if len(parts) != 2 or not all(part.isdigit() for part in parts):
            raise ValidationError(f"Expected YYYY-MM, got '{raw}'")
        return cls(int(parts[0]), int(parts[1]))

    @classmethod
    def from_date(cls, value: date) -> "YearMonth":
        return cls(value.year, value.month)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        _, days = calendar.monthrange(self.year, self.month)
        return date(self.year, self.month, days)

    def contains(self, value: date) -> bool:
        return value.year == self.year and value.month == self.month

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


__all__ = ["YearMonth"]
