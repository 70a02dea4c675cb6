"""Domain models package."""

from .presentation import (
    AmountStatus,
    BalanceDisplay,
    BalanceStatus,
    LedgerRow,
    PresentationModel,
)
from .transactions import (
    Transaction,
    TransactionCollection,
    TransactionKind,
    classify_kind,
)

__all__ = [
    "AmountStatus",
    "BalanceDisplay",
    "BalanceStatus",
    "LedgerRow",
    "PresentationModel",
    "Transaction",
    "TransactionCollection",
    "TransactionKind",
    "classify_kind",
]
