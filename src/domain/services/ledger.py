"""Domain services for ledger aggregates."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models import Transaction, TransactionKind


def compute_balance(transactions: Iterable[Transaction]) -> Decimal:
    """Compute the signed balance of a sequence of movements.

    Income movements add their amount; expenses and unrecognized kinds
    subtract it. No rounding is applied.

    Args:
        transactions: Movements to aggregate.

    Returns:
        Decimal: Signed balance, zero for an empty sequence.
    """
    total = Decimal("0")
    for transaction in transactions:
        if transaction.kind_tag is TransactionKind.INCOME:
            total += transaction.amount
        else:
            total -= transaction.amount
    return total


__all__ = ["compute_balance"]
