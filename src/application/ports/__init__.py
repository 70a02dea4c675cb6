"""Application ports package."""

from .transactions_source import TransactionsSourcePort

__all__ = ["TransactionsSourcePort"]
