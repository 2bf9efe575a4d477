"""Input acceptance rules shared by validation and adapters."""

import re


_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

PERSON_NAME_MIN = 2
PERSON_NAME_MAX = 50


def is_blank(value: str | None) -> bool:
    """Return True when the value is missing or only whitespace."""
    return value is None or not value.strip()


def is_valid_person_name(name: str | None) -> bool:
    """Return True for a non-blank name of 2 to 50 characters.

    Args:
        name: First or last name to evaluate.

    Returns:
        bool: True when the name is acceptable.
    """
    if is_blank(name):
        return False
    return PERSON_NAME_MIN <= len(name.strip()) <= PERSON_NAME_MAX


def is_valid_email(email: str | None) -> bool:
    if is_blank(email):
        return False
    return bool(_EMAIL_PATTERN.match(email.strip()))


__all__ = [
    "PERSON_NAME_MIN",
    "PERSON_NAME_MAX",
    "is_blank",
    "is_valid_person_name",
    "is_valid_email",
]
