"""Error kinds raised by the finance domain and its collaborators."""


class FinanceError(Exception):
    """Base class for finance tracker errors."""


class ValidationError(FinanceError, ValueError):
    """Input rejected before it reaches the ledger (400-style)."""


class NotFoundError(FinanceError, LookupError):
    """Referenced entity does not exist (404-style)."""


class ConflictError(FinanceError):
    """Uniqueness rule violated, e.g. duplicate email or budget key."""


__all__ = [
    "FinanceError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
]
