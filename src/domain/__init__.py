"""Domain package for ledger rules and core models."""

from .constants import BALANCE_TITLE, COLUMN_HEADERS
from .errors import MalformedInputError
from .models import (
    AmountStatus,
    BalanceDisplay,
    BalanceStatus,
    LedgerRow,
    PresentationModel,
    Transaction,
    TransactionCollection,
    TransactionKind,
    classify_kind,
)
from .services import (
    build_balance_display,
    build_ledger_row,
    compute_balance,
    format_amount,
    present,
    truncate_date,
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
    "BALANCE_TITLE",
    "COLUMN_HEADERS",
    "MalformedInputError",
    "build_balance_display",
    "build_ledger_row",
    "classify_kind",
    "compute_balance",
    "format_amount",
    "present",
    "truncate_date",
]
