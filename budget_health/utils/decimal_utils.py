"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def finite_amount(value) -> Decimal | None:
    """Return a non-negative finite Decimal, or None for unusable amounts.

    Args:
        value: Raw amount from a record.

    Returns:
        Decimal | None: Normalized amount, None when it is non-numeric,
        non-finite, or negative.
    """
    try:
        amount = coerce_decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not amount.is_finite() or amount < 0:
        return None
    return amount


__all__ = ["coerce_decimal", "finite_amount"]
