"""Hypothesis strategies for numscope property-based testing.

Usage:
    from tests.strategies import display_amounts, precisions, signs
    from tests.strategies.numbers import FORMATTING_LOCALES

Event-Emitting Strategies (HypoFuzz-Optimized):
    - display_amounts, precisions, signs
"""

from .numbers import (
    CURRENCY_CODES,
    FORMATTING_LOCALES,
    abbreviations,
    display_amounts,
    precisions,
    signs,
)

__all__ = [
    "CURRENCY_CODES",
    "FORMATTING_LOCALES",
    "abbreviations",
    "display_amounts",
    "precisions",
    "signs",
]
