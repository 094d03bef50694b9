"""Enumerations for numscope type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class NumberStyle(StrEnum):
    """Number style an engine is bound to at construction.

    StrEnum provides automatic string conversion: str(NumberStyle.DECIMAL) == "decimal"
    """

    DECIMAL = "decimal"
    """Plain grouped decimal: 1,234.5"""

    PERCENT = "percent"
    """Percent with a multiplier of 1: 12.5 -> 12.5%"""

    CURRENCY = "currency"
    """Currency using the CLDR standard pattern: $1,234.50"""


class SignStyleKind(StrEnum):
    """How a sign slot (plus, minus, zero) is rendered.

    StrEnum provides automatic string conversion: str(SignStyleKind.CUSTOM) == "custom"
    """

    NONE = "none"
    """No marker at all."""

    LOCALIZED = "localized"
    """The locale's own plus or minus glyph."""

    CUSTOM = "custom"
    """A caller-supplied literal such as an arrow."""


__all__ = [
    "NumberStyle",
    "SignStyleKind",
]
