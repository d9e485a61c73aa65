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


def parse_amount(raw) -> Decimal:
    """Parse a user-entered amount, treating malformed input as zero.

    Args:
        raw: Text or numeric value typed at an entry boundary.

    Returns:
        Decimal: Parsed amount, or zero when the input is not a finite number.
    """
    if raw is None:
        return Decimal("0")
    text = str(raw).strip().replace(",", "")
    if not text:
        return Decimal("0")
    try:
        value = Decimal(text)
    except InvalidOperation:
        return Decimal("0")
    if not value.is_finite():
        return Decimal("0")
    return value


__all__ = ["coerce_decimal", "parse_amount"]
