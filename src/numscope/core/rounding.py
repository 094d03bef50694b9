"""Decimal coercion and rounding shared by the pipeline and the engine.

Rounding mode is pinned to ROUND_HALF_UP, which in the decimal module means
half away from zero (0.125 -> 0.13, -0.125 -> -0.13). Babel's own
quantization is half-even; every value reaches Babel already rounded so its
mode never applies.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import TypeAlias

__all__ = ["NumericInput", "round_half_away", "to_decimal"]

NumericInput: TypeAlias = int | float | Decimal


def to_decimal(value: object) -> Decimal | None:
    """Coerce a numeric input to Decimal.

    Floats go through their shortest repr, so 0.1 becomes Decimal('0.1')
    rather than the exact binary expansion.

    Args:
        value: int, float, or Decimal

    Returns:
        Decimal, or None if value is not a supported number (bool included)

    Example:
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal("12") is None
        True
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    return None


def round_half_away(value: Decimal, places: int) -> Decimal:
    """Round to a fixed number of fraction digits, half away from zero.

    The decimal context precision is widened for the duration of the call so
    that large magnitudes keep every integer digit.

    Args:
        value: Value to round
        places: Fraction digits to keep (>= 0)

    Returns:
        Rounded value with exactly ``places`` fraction digits. Non-finite
        values are returned unchanged.

    Raises:
        InvalidOperation: If the rounded value exceeds the context exponent
            range (e.g. Decimal("1E+2000000"))

    Example:
        >>> round_half_away(Decimal("0.125"), 2)
        Decimal('0.13')
        >>> round_half_away(Decimal("-0.125"), 2)
        Decimal('-0.13')
    """
    if not value.is_finite():
        return value
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return value.quantize(quantum, rounding=ROUND_HALF_UP)
