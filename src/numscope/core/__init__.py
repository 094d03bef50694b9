"""Core utilities shared across policy and runtime layers.

Exports:
    NumericInput: Type alias for values accepted by the formatter
    round_half_away: Fixed-place rounding, half away from zero
    to_decimal: Coerce int/float/Decimal input to Decimal

Python 3.13+.
"""

from .rounding import NumericInput, round_half_away, to_decimal

__all__ = ["NumericInput", "round_half_away", "to_decimal"]
