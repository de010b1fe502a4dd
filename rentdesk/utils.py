from decimal import Decimal, InvalidOperation

CENTS = Decimal("0.01")


def to_decimal(value):
    """Coerce a number or numeric string to a two-place Decimal (None passes through)."""
    if value is None:
        return None
    if isinstance(value, float):
        value = repr(value)
    try:
        return Decimal(value).quantize(CENTS)
    except (InvalidOperation, TypeError, ValueError):
        raise ValueError(f"{value!r} is not a valid amount")


def money(value):
    """Render a money value as a fixed two-decimal string for JSON."""
    if value is None:
        return None
    return str(to_decimal(value))


def iso(value):
    return value.isoformat() if value else None
