"""Fraction-digit precision policy.

A Precision bounds how many fraction digits a formatted number shows:
``minimum`` pads with trailing zeros, ``maximum`` rounds and caps. Either
bound may be left open with None.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from numscope.constants import DEFAULT_MAXIMUM_FRACTION_DIGITS, DEFAULT_MINIMUM_FRACTION_DIGITS
from numscope.diagnostics import ErrorTemplate, PolicyError

__all__ = ["Precision", "resolve_precision"]


@dataclass(frozen=True, slots=True)
class Precision:
    """Immutable minimum/maximum fraction-digit bounds.

    ``Precision()`` is the unbounded range: no padding, no rounding (the
    formatter still caps output at its maximum_allowed_fraction_digits).

    Presets:
        Precision.DEFAULT: 0..2 digits
        Precision.MAXIMUM: unbounded
        Precision.constant(n): exactly n digits
        Precision.at_least(n), Precision.at_most(n), Precision.between(lo, hi)

    Attributes:
        minimum: Minimum fraction digits, or None for no padding
        maximum: Maximum fraction digits, or None for no rounding

    Raises:
        PolicyError: If a bound is negative or minimum exceeds maximum

    Example:
        >>> Precision.constant(4)
        Precision(minimum=4, maximum=4)
        >>> Precision.at_least(3)
        Precision(minimum=3, maximum=None)
    """

    minimum: int | None = None
    maximum: int | None = None

    DEFAULT: ClassVar[Precision]
    MAXIMUM: ClassVar[Precision]

    def __post_init__(self) -> None:
        """Validate bounds at construction time.

        Raises:
            PolicyError: If a bound is negative or minimum > maximum.
        """
        if self.minimum is not None and self.minimum < 0:
            raise PolicyError(ErrorTemplate.precision_negative("minimum", self.minimum))
        if self.maximum is not None and self.maximum < 0:
            raise PolicyError(ErrorTemplate.precision_negative("maximum", self.maximum))
        if (
            self.minimum is not None
            and self.maximum is not None
            and self.minimum > self.maximum
        ):
            raise PolicyError(
                ErrorTemplate.precision_bounds_inverted(self.minimum, self.maximum)
            )

    @classmethod
    def constant(cls, digits: int) -> Precision:
        """Exactly ``digits`` fraction digits (rounds and pads)."""
        return cls(minimum=digits, maximum=digits)

    @classmethod
    def at_least(cls, digits: int) -> Precision:
        """Pad to ``digits`` fraction digits, never round."""
        return cls(minimum=digits, maximum=None)

    @classmethod
    def at_most(cls, digits: int) -> Precision:
        """Round to ``digits`` fraction digits, never pad."""
        return cls(minimum=None, maximum=digits)

    @classmethod
    def between(cls, minimum: int, maximum: int) -> Precision:
        """Pad to ``minimum`` and round to ``maximum`` fraction digits."""
        return cls(minimum=minimum, maximum=maximum)

    def resolve(self, ceiling: int) -> tuple[int, int]:
        """Resolve open bounds to concrete engine digit settings.

        Args:
            ceiling: Fraction-digit cap used when maximum is open

        Returns:
            Tuple of (minimum_fraction_digits, maximum_fraction_digits)
        """
        minimum = self.minimum if self.minimum is not None else 0
        maximum = self.maximum if self.maximum is not None else ceiling
        return minimum, max(minimum, maximum)


Precision.DEFAULT = Precision(
    minimum=DEFAULT_MINIMUM_FRACTION_DIGITS,
    maximum=DEFAULT_MAXIMUM_FRACTION_DIGITS,
)
Precision.MAXIMUM = Precision()


def resolve_precision(
    precision: Precision | None,
    default: Precision,
    ceiling: int,
) -> tuple[int, int]:
    """Resolve a call-site precision against the formatter default.

    Args:
        precision: Call-site precision, or None to use ``default``
        default: Formatter's default precision
        ceiling: Fraction-digit cap for open maximums

    Returns:
        Tuple of (minimum_fraction_digits, maximum_fraction_digits)

    Example:
        >>> resolve_precision(None, Precision.DEFAULT, 16)
        (0, 2)
        >>> resolve_precision(Precision.at_least(3), Precision.DEFAULT, 16)
        (3, 16)
    """
    return (precision if precision is not None else default).resolve(ceiling)
