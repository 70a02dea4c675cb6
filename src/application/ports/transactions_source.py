"""Port for reading ledger movements."""

from typing import Protocol

from src.domain.models import TransactionCollection


class TransactionsSourcePort(Protocol):
    """Port exposing the decoded movements of a ledger screen."""

    def fetch_transactions(self) -> TransactionCollection:
        """Return the movements in display order."""


__all__ = ["TransactionsSourcePort"]
