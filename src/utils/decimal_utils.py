"""Helpers for Decimal normalization."""

from decimal import Decimal


def coerce_decimal(value: int | float | Decimal) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats go through their shortest text form so ``2500.5`` becomes
    ``Decimal("2500.5")`` rather than its binary expansion.

    Args:
        value: Raw numeric value from a decoded payload.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value is not finite. The movements decoder
            reports this as MalformedInputError.
    """
    if isinstance(value, Decimal):
        result = value
    else:
        result = Decimal(str(value))
    if not result.is_finite():
        raise ValueError(f"Non-finite amount: {value}")
    return result


__all__ = ["coerce_decimal"]
