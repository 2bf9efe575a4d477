"""Helpers for Decimal normalization and money arithmetic."""

from decimal import ROUND_HALF_UP, Decimal

MONEY_QUANT = Decimal("0.01")
CENTS_PER_UNIT = 100


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_money(value) -> Decimal:
    """Return the value as a two-decimal amount rounded half-up."""
    return coerce_decimal(value).quantize(MONEY_QUANT, rounding=ROUND_HALF_UP)


def to_cents(value) -> int:
    """Convert a money amount to integer minor units.

    Args:
        value: Amount in major units.

    Returns:
        int: Amount in cents.
    """
    return int(to_money(value) * CENTS_PER_UNIT)


def from_cents(value) -> Decimal:
    """Convert integer minor units (or None) back to a money amount."""
    if value is None:
        return to_money(0)
    return to_money(Decimal(int(value)) / CENTS_PER_UNIT)


def format_money(value) -> str:
    """Format an amount for display, e.g. ``$1234.50``."""
    amount = to_money(value)
    if amount < 0:
        return f"-${abs(amount)}"
    return f"${amount}"


__all__ = [
    "MONEY_QUANT",
    "coerce_decimal",
    "to_money",
    "to_cents",
    "from_cents",
    "format_money",
]
