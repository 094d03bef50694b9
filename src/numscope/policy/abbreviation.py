"""Magnitude abbreviation policy.

An Abbreviation is an ordered table of (magnitude, suffix) thresholds used
to compress large numbers: 48729432 -> 48.73m. Thresholds are validated to be
strictly descending at construction, which makes selection a single
deterministic scan and guarantees a divided value never re-qualifies.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

from numscope.diagnostics import ErrorTemplate, PolicyError

__all__ = ["Abbreviation", "Threshold"]


@dataclass(frozen=True, slots=True)
class Threshold:
    """One magnitude/suffix pair.

    Attributes:
        magnitude: Positive divisor, e.g. Decimal(1000)
        suffix: Label appended after the digits, e.g. "k"
    """

    magnitude: Decimal
    suffix: str

    def __post_init__(self) -> None:
        """Coerce int magnitudes and reject non-positive ones.

        Raises:
            PolicyError: If magnitude is not a positive finite number.
        """
        magnitude = self.magnitude
        if isinstance(magnitude, int) and not isinstance(magnitude, bool):
            magnitude = Decimal(magnitude)
            object.__setattr__(self, "magnitude", magnitude)
        if not isinstance(magnitude, Decimal) or not magnitude.is_finite() or magnitude <= 0:
            raise PolicyError(
                ErrorTemplate.abbreviation_magnitude_invalid(self.suffix, self.magnitude)
            )


@dataclass(frozen=True, slots=True)
class Abbreviation:
    """Immutable descending threshold table.

    Presets:
        Abbreviation.NONE: never abbreviates
        Abbreviation.DEFAULT: t, b, m, k
        Abbreviation.CAPITALIZED: T, B, M, K

    Attributes:
        thresholds: Thresholds ordered from largest to smallest magnitude

    Raises:
        PolicyError: If magnitudes are not strictly descending

    Example:
        >>> Abbreviation.DEFAULT.select(Decimal("48729432")).suffix
        'm'
        >>> Abbreviation.DEFAULT.select(Decimal("999")) is None
        True
    """

    thresholds: tuple[Threshold, ...] = ()

    NONE: ClassVar[Abbreviation]
    DEFAULT: ClassVar[Abbreviation]
    CAPITALIZED: ClassVar[Abbreviation]

    def __post_init__(self) -> None:
        """Validate threshold ordering.

        Raises:
            PolicyError: If any threshold is not smaller than its predecessor.
        """
        thresholds = tuple(self.thresholds)
        object.__setattr__(self, "thresholds", thresholds)
        for previous, current in zip(thresholds, thresholds[1:], strict=False):
            if current.magnitude >= previous.magnitude:
                raise PolicyError(
                    ErrorTemplate.abbreviation_not_descending(previous.suffix, current.suffix)
                )

    @classmethod
    def from_suffixes(cls, suffixes: dict[str, int | Decimal]) -> Abbreviation:
        """Build a table from a suffix -> magnitude mapping in any order.

        Example:
            >>> Abbreviation.from_suffixes({"k": 1000, "M": 10**6}).thresholds[0].suffix
            'M'
        """
        pairs = sorted(
            (Threshold(Decimal(magnitude), suffix) for suffix, magnitude in suffixes.items()),
            key=lambda threshold: threshold.magnitude,
            reverse=True,
        )
        return cls(tuple(pairs))

    def select(self, value: Decimal) -> Threshold | None:
        """First threshold whose magnitude is <= |value|.

        Args:
            value: Finite value to classify

        Returns:
            Matching threshold, or None if the value is below every magnitude
        """
        magnitude = abs(value)
        for threshold in self.thresholds:
            if threshold.magnitude <= magnitude:
                return threshold
        return None

    def __bool__(self) -> bool:
        return bool(self.thresholds)


def _table(*suffixes: str) -> Abbreviation:
    """Thousand-based table: suffixes listed from 10^12 down to 10^3."""
    exponents = range(3 * len(suffixes), 0, -3)
    return Abbreviation(
        tuple(
            Threshold(Decimal(10) ** exponent, suffix)
            for exponent, suffix in zip(exponents, suffixes, strict=True)
        )
    )


Abbreviation.NONE = Abbreviation()
Abbreviation.DEFAULT = _table("t", "b", "m", "k")
Abbreviation.CAPITALIZED = _table("T", "B", "M", "K")
