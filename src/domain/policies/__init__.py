"""Domain policies package."""

from .input_rules import is_blank, is_valid_email, is_valid_person_name

__all__ = ["is_blank", "is_valid_email", "is_valid_person_name"]
