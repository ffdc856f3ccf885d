"""Integer arithmetic utilities for cents-based payment amounts.

All order values, limits, discounts and totals inside the domain are int
cents. Decimal is used only to parse and render amounts at the boundary.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_CENT = Decimal("0.01")


def to_cents(amount: Decimal | str | int) -> int:
    """Convert a decimal amount to cents, rounding half-up: '12.345' -> 1235."""
    try:
        value = Decimal(str(amount))
    except InvalidOperation as exc:
        raise ValueError(f"Not a decimal amount: {amount!r}") from exc
    if not value.is_finite():
        raise ValueError(f"Not a finite amount: {amount!r}")
    return int(value.quantize(_CENT, rounding=ROUND_HALF_UP) * 100)


def cents_to_decimal(cents: int) -> Decimal:
    """1650 -> Decimal('16.50')."""
    return (Decimal(cents) / 100).quantize(_CENT)


def format_cents(cents: int) -> str:
    """Render cents as a plain 2-digit amount: 16500 -> '165.00', -5 -> '-0.05'."""
    sign = "-" if cents < 0 else ""
    abs_cents = abs(cents)
    return f"{sign}{abs_cents // 100}.{abs_cents % 100:02d}"


def percent_of(cents: int, percent: int) -> int:
    """Return percent% of cents, rounded half-up to a whole cent.

    Both arguments are non-negative, so half-up is (a * p + 50) // 100.
    """
    if cents < 0 or percent < 0:
        raise ValueError(f"percent_of expects non-negative inputs, got {cents}, {percent}")
    return (cents * percent + 50) // 100
