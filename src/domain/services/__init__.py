"""Domain services package."""

from .formatting import format_amount, truncate_date
from .ledger import compute_balance
from .presentation import build_balance_display, build_ledger_row, present

__all__ = [
    "build_balance_display",
    "build_ledger_row",
    "compute_balance",
    "format_amount",
    "present",
    "truncate_date",
]
