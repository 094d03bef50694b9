"""Bi-directional formatting: parse locale-aware display strings back to numbers.

- Functions NEVER raise exceptions - errors are returned in tuple
- Consistent with NumberFormatter.format() "never raise" philosophy

This module provides the inverse operations to numscope.runtime.formatter:
- Formatting: Python number -> locale-aware display string
- Parsing: Locale-aware display string -> Python number

Abbreviated strings ("1.43k") are display-only and do not parse back.

Public API:
    Parsing Functions:
        parse_number - Returns tuple[float | None, tuple[ParseError, ...]]
        parse_decimal - Returns tuple[Decimal | None, tuple[ParseError, ...]]

    Type Guards:
        is_valid_decimal - TypeIs guard for finite Decimal
        is_valid_number - TypeIs guard for finite float

Python 3.13+. Uses Babel CLDR data for all parsing.
"""

from .guards import is_valid_decimal, is_valid_number
from .numbers import parse_decimal, parse_number

__all__ = [
    # Type guards
    "is_valid_decimal",
    "is_valid_number",
    # Parsing functions
    "parse_decimal",
    "parse_number",
]
