"""Narrowing helpers for values coming back from the read path.

NumberFormatter.parse() and NumberEngine.parse() return ``Decimal | None``;
parse_decimal() and parse_number() return a ``(value, errors)`` pair. A
display string that parses to NaN or an infinity is as useless to a caller as
one that fails, so both guards reject those too.

Example:
    >>> from numscope import NumberFormatter
    >>> usd = NumberFormatter.currency("en_US", "USD")
    >>> amount = usd.parse("-$1,432.99")
    >>> if is_valid_decimal(amount):
    ...     total = amount + 1
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TypeIs

__all__ = [
    "is_valid_decimal",
    "is_valid_number",
]


def is_valid_decimal(value: Decimal | None) -> TypeIs[Decimal]:
    """True when a parsed amount can take part in arithmetic.

    The engine's read path calls this after stripping affixes, so "$NaN"
    reads back as None rather than Decimal('NaN').
    """
    return value is not None and value.is_finite()


def is_valid_number(value: float | None) -> TypeIs[float]:
    """Float counterpart of is_valid_decimal() for parse_number() results."""
    return value is not None and math.isfinite(value)
