"""Number parsing functions with locale awareness.

- parse_decimal() returns tuple[Decimal | None, tuple[ParseError, ...]]
- parse_number() returns tuple[float | None, tuple[ParseError, ...]]
- Functions NEVER raise; errors are returned in the tuple

These parse bare locale numbers ("1 234,56" in lv_LV). Currency and percent
affixes are the engine's concern: NumberEngine.parse strips its own affixes
and then calls parse_decimal().

Thread-safe. Uses Babel for CLDR-compliant parsing.

Python 3.13+.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from babel import UnknownLocaleError
from babel import numbers as babel_numbers

from numscope.diagnostics import ErrorTemplate, FrozenErrorContext, ParseError
from numscope.locale_utils import get_babel_locale

__all__ = ["parse_decimal", "parse_number"]

logger = logging.getLogger(__name__)


def _failure(error: ParseError) -> tuple[None, tuple[ParseError, ...]]:
    logger.debug(
        "Parse %s failed for %r (%s)", error.parse_type, error.input_value, error.locale_code
    )
    return (None, (error,))


def parse_decimal(
    value: str,
    locale_code: str,
) -> tuple[Decimal | None, tuple[ParseError, ...]]:
    """Parse locale-aware number string to Decimal (financial precision).

    Args:
        value: Number string (e.g., "1 234,56" for lv_LV)
        locale_code: BCP 47 or POSIX locale identifier

    Returns:
        Tuple of (result, errors):
        - result: Parsed Decimal, or None if parsing failed
        - errors: Tuple of ParseError (empty tuple on success)

    Examples:
        >>> result, errors = parse_decimal("1,234.56", "en_US")
        >>> result
        Decimal('1234.56')
        >>> errors
        ()

        >>> result, errors = parse_decimal("1 234,56", "lv_LV")
        >>> result
        Decimal('1234.56')

        >>> result, errors = parse_decimal("invalid", "en_US")
        >>> result is None, len(errors)
        (True, 1)

    Thread Safety:
        Thread-safe. Uses Babel (no global state).
    """
    context = FrozenErrorContext(
        input_value=str(value),
        locale_code=locale_code,
        parse_type="decimal",
    )

    if not isinstance(value, str):
        error = ParseError(ErrorTemplate.parse_input_type(value), context=context)
        return _failure(error)

    try:
        locale = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError):
        error = ParseError(ErrorTemplate.parse_locale_unknown(locale_code), context=context)
        return _failure(error)

    try:
        return (babel_numbers.parse_decimal(value.strip(), locale=locale), ())
    except (
        babel_numbers.NumberFormatError, InvalidOperation, ValueError, AttributeError, TypeError,
    ) as e:
        error = ParseError(
            ErrorTemplate.parse_decimal_failed(value, locale_code, str(e)), context=context
        )
        return _failure(error)


def parse_number(
    value: str,
    locale_code: str,
) -> tuple[float | None, tuple[ParseError, ...]]:
    """Parse locale-aware number string to float.

    Convenience wrapper over parse_decimal() for display-only values where
    float precision is acceptable.

    Args:
        value: Number string (e.g., "1.234,5" for de_DE)
        locale_code: BCP 47 or POSIX locale identifier

    Returns:
        Tuple of (result, errors) as for parse_decimal(), with parse_type
        "number" on any returned error.

    Example:
        >>> parse_number("1.234,5", "de_DE")
        (1234.5, ())
    """
    result, errors = parse_decimal(value, locale_code)
    if result is None:
        renamed = tuple(
            ParseError(
                error.diagnostic if error.diagnostic is not None else str(error),
                context=FrozenErrorContext(
                    input_value=error.input_value,
                    locale_code=error.locale_code,
                    parse_type="number",
                ),
            )
            for error in errors
        )
        return (None, renamed)
    return (float(result), ())
