"""Domain models consumed by rendering surfaces."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class BalanceStatus(str, Enum):
    """Visual status of the balance header."""

    NON_NEGATIVE = "non-negative"
    NEGATIVE = "negative"


class AmountStatus(str, Enum):
    """Visual status of a row amount."""

    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class BalanceDisplay:
    """Balance ready for display.

    Attributes:
        value: Unrounded signed balance.
        text: Grouped, two-decimal representation of the value.
        status: Whether the balance is negative.
        color: Hex color matching the status.
    """

    value: Decimal
    text: str
    status: BalanceStatus
    color: str


@dataclass(frozen=True)
class LedgerRow:
    """One table row derived from a movement."""

    key: int
    date: str
    description: str
    amount: Decimal
    amount_text: str
    status: AmountStatus
    color: str
    owner: str


@dataclass(frozen=True)
class PresentationModel:
    """Balance header and table rows for a movements screen."""

    balance: BalanceDisplay
    rows: tuple[LedgerRow, ...]

    @property
    def rows_by_key(self) -> dict[int, LedgerRow]:
        """Return rows keyed by movement id; the last duplicate wins."""
        return {row.key: row for row in self.rows}


__all__ = [
    "BalanceStatus",
    "AmountStatus",
    "BalanceDisplay",
    "LedgerRow",
    "PresentationModel",
]
