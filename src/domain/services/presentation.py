"""Domain services projecting movements into display models."""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from src.domain.constants import (
    BALANCE_NEGATIVE_COLOR,
    BALANCE_NON_NEGATIVE_COLOR,
    EXPENSE_AMOUNT_COLOR,
    INCOME_AMOUNT_COLOR,
)
from src.domain.models import (
    AmountStatus,
    BalanceDisplay,
    BalanceStatus,
    LedgerRow,
    PresentationModel,
    Transaction,
)
from src.domain.services.formatting import format_amount, truncate_date
from src.domain.services.ledger import compute_balance


def build_balance_display(balance: Decimal) -> BalanceDisplay:
    """Build the balance header from an aggregated balance.

    Args:
        balance: Signed balance as returned by compute_balance.

    Returns:
        BalanceDisplay: Formatted text with its status and color.
    """
    if balance >= 0:
        status = BalanceStatus.NON_NEGATIVE
        color = BALANCE_NON_NEGATIVE_COLOR
    else:
        status = BalanceStatus.NEGATIVE
        color = BALANCE_NEGATIVE_COLOR
    return BalanceDisplay(
        value=balance,
        text=format_amount(balance),
        status=status,
        color=color,
    )


def build_ledger_row(transaction: Transaction) -> LedgerRow:
    """Project a movement into a table row.

    Args:
        transaction: Movement to project.

    Returns:
        LedgerRow: Display fields for the movement.
    """
    if transaction.is_income:
        status = AmountStatus.INCOME
        color = INCOME_AMOUNT_COLOR
    else:
        status = AmountStatus.EXPENSE
        color = EXPENSE_AMOUNT_COLOR
    return LedgerRow(
        key=transaction.id,
        date=truncate_date(transaction.date),
        description=transaction.description,
        amount=transaction.amount,
        amount_text=format_amount(transaction.amount),
        status=status,
        color=color,
        owner=transaction.owner,
    )


def present(transactions: Iterable[Transaction]) -> PresentationModel:
    """Build the balance header and rows for a movements screen.

    Args:
        transactions: Movements in display order.

    Returns:
        PresentationModel: Balance display and one row per movement.
    """
    ordered: Sequence[Transaction] = tuple(transactions)
    return PresentationModel(
        balance=build_balance_display(compute_balance(ordered)),
        rows=tuple(build_ledger_row(item) for item in ordered),
    )


__all__ = ["build_balance_display", "build_ledger_row", "present"]
