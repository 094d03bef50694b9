"""Formatter configuration snapshot.

FormatterConfig carries every pipeline-level setting of a NumberFormatter in
one immutable, validated value. NumberFormatter.config reads the current
settings as a FormatterConfig; NumberFormatter.apply_config() writes one back.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from numscope.constants import DEFAULT_INVALID_VALUE_STRING, MAX_ALLOWED_FRACTION_DIGITS
from numscope.diagnostics import ErrorTemplate, PolicyError
from numscope.policy import Precision

__all__ = ["FormatterConfig"]


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Immutable pipeline settings.

    Attributes:
        default_precision: Precision used when a call passes none
        maximum_allowed_fraction_digits: Fraction-digit cap for open maximums
        uses_sign_for_zero: Render the sign policy's zero marker on zero
        uses_grouping_separator: Group integer digits (written to the engine)
        invalid_value_string: Output when a value cannot be formatted

    Raises:
        PolicyError: If maximum_allowed_fraction_digits is negative
    """

    default_precision: Precision = Precision.DEFAULT
    maximum_allowed_fraction_digits: int = MAX_ALLOWED_FRACTION_DIGITS
    uses_sign_for_zero: bool = False
    uses_grouping_separator: bool = True
    invalid_value_string: str = DEFAULT_INVALID_VALUE_STRING

    def __post_init__(self) -> None:
        if self.maximum_allowed_fraction_digits < 0:
            raise PolicyError(
                ErrorTemplate.fraction_ceiling_negative(self.maximum_allowed_fraction_digits)
            )
