"""Formatting policies: precision, sign, and abbreviation.

All policies are immutable value objects validated at construction, so a
policy that reaches the formatting pipeline is always well-formed.

Public API:
    Precision - Minimum/maximum fraction digits
    Sign, SignStyle - Plus/minus/zero markers
    Abbreviation, Threshold - Magnitude suffix tables

Python 3.13+. Zero external dependencies.
"""

from .abbreviation import Abbreviation, Threshold
from .precision import Precision, resolve_precision
from .sign import Sign, SignStyle

__all__ = [
    "Abbreviation",
    "Precision",
    "Sign",
    "SignStyle",
    "Threshold",
    "resolve_precision",
]
