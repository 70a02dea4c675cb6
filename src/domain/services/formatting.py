"""Domain formatting helpers for display values."""

from decimal import ROUND_HALF_UP, Decimal, localcontext

from src.domain.constants import DATE_DISPLAY_LENGTH

_CENTS = Decimal("0.01")


def format_amount(value: Decimal) -> str:
    """Format an amount with grouped thousands and two decimals.

    Args:
        value: Amount to format.

    Returns:
        str: Text such as ``4,900.50``; negatives keep their own sign.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        rounded = value.quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{rounded:,.2f}"


def truncate_date(raw_date: str) -> str:
    """Return the ``YYYY-MM-DD`` prefix of an ISO-8601 timestamp."""
    return raw_date[:DATE_DISPLAY_LENGTH]


__all__ = ["format_amount", "truncate_date"]
