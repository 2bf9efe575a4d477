"""Use case to read the latest transactions across a user's accounts."""

from src.application.ports.aggregation import LedgerAggregationPort
from src.domain.errors import ValidationError
from src.domain.models import Transaction


class GetRecentTransactionsUseCase:
    """Return transactions newest first, by date then creation time."""

    def __init__(
        self,
        aggregation: LedgerAggregationPort,
        default_limit: int | None = None,
    ) -> None:
        self._aggregation = aggregation
        self._default_limit = default_limit

    def execute(
        self,
        user_id: int,
        limit: int | None = None,
    ) -> list[Transaction]:
        resolved = limit if limit is not None else self._default_limit
        if resolved is not None and resolved < 1:
            raise ValidationError(f"Limit must be positive: {resolved}")
        return self._aggregation.recent_transactions_for_user(
            user_id,
            limit=resolved,
        )


__all__ = ["GetRecentTransactionsUseCase"]
