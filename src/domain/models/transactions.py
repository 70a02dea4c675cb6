"""Domain models for ledger movements."""

from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from src.domain.constants import EXPENSE_TAG, INCOME_TAG


class TransactionKind(str, Enum):
    """Known movement kinds plus a catch-all for unrecognized tags."""

    INCOME = "income"
    EXPENSE = "expense"
    OTHER = "other"


def classify_kind(raw_kind: str) -> TransactionKind:
    """Map a raw movement tag to a TransactionKind.

    Args:
        raw_kind: Tag as found in the payload, any casing.

    Returns:
        TransactionKind: INCOME or EXPENSE for known tags, OTHER otherwise.
    """
    lowered = raw_kind.lower()
    if lowered == INCOME_TAG:
        return TransactionKind.INCOME
    if lowered == EXPENSE_TAG:
        return TransactionKind.EXPENSE
    return TransactionKind.OTHER


@dataclass(frozen=True)
class Transaction:
    """A single ledger movement.

    Attributes:
        id: Identifier used as the display key; not required to be unique.
        kind: Raw kind tag from the payload.
        amount: Movement amount, passed through unchanged.
        date: ISO-8601 timestamp string.
        description: Free text description.
        owner: User associated with the movement.
    """

    id: int
    kind: str
    amount: Decimal
    date: str
    description: str
    owner: str

    @property
    def kind_tag(self) -> TransactionKind:
        """Return the classified kind of the movement."""
        return classify_kind(self.kind)

    @property
    def is_income(self) -> bool:
        """Return True when the movement adds to the balance."""
        return self.kind_tag is TransactionKind.INCOME


@dataclass(frozen=True)
class TransactionCollection:
    """Ordered, immutable sequence of movements in payload order."""

    transactions: tuple[Transaction, ...] = ()

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.transactions)

    def __len__(self) -> int:
        return len(self.transactions)


__all__ = [
    "TransactionKind",
    "classify_kind",
    "Transaction",
    "TransactionCollection",
]
