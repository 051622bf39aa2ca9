"""Currency conversion between major units (dollars) and minor units (cents).

Amounts are carried as :class:`~decimal.Decimal` until they are converted
to integer minor units; no currency value passes through a binary float.
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal, InvalidOperation

from invoicectl.domain.types import Rounding

MINOR_UNITS_PER_MAJOR = 100

_ROUNDING_MODES: dict[Rounding, str] = {
    Rounding.HALF_UP: ROUND_HALF_UP,
    Rounding.HALF_EVEN: ROUND_HALF_EVEN,
}


def to_minor_units(amount: Decimal, rounding: Rounding = Rounding.HALF_UP) -> int:
    """Convert a major-unit *amount* to integer minor units.

    Examples:
        >>> to_minor_units(Decimal("15.50"))
        1550
        >>> to_minor_units(Decimal("0.005"))
        1
        >>> to_minor_units(Decimal("0.005"), Rounding.HALF_EVEN)
        0

    Raises:
        ValueError: If *amount* is NaN, infinite, or too large to quantize
            at the current decimal context precision.
    """
    if not amount.is_finite():
        msg = f"Cannot convert non-finite amount to minor units: {amount}"
        raise ValueError(msg)
    scaled = amount * MINOR_UNITS_PER_MAJOR
    try:
        minor = scaled.quantize(Decimal(1), rounding=_ROUNDING_MODES[Rounding(rounding)])
    except InvalidOperation as exc:
        msg = f"Amount out of range: {amount}"
        raise ValueError(msg) from exc
    return int(minor)


def to_major_units(minor: int) -> Decimal:
    """Convert integer minor units back to a two-place major-unit Decimal."""
    return (Decimal(minor) / MINOR_UNITS_PER_MAJOR).quantize(Decimal("0.01"))
