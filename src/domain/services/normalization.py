"""Domain normalization helpers."""


def normalize_email(email: str | None) -> str | None:
    """Normalize email addresses for storage and lookup.

    Args:
        email: Raw email value from a caller.

    Returns:
        str | None: Trimmed, lower-cased email.
    """
    if not email:
        return None
    cleaned = email.strip()
    return cleaned.lower() if cleaned else None


def normalize_name(name: str | None) -> str | None:
    """Collapse surrounding and repeated inner whitespace in a name.

    Args:
        name: Raw name value from a caller.

    Returns:
        str | None: Normalized name.
    """
    if not name:
        return None
    cleaned = " ".join(name.split())
    return cleaned or None


__all__ = ["normalize_email", "normalize_name"]
