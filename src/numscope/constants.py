"""Shared constants for numscope.

This module provides centralized configuration defaults used across the
policy, runtime, and parsing packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Precision limits: Fraction-digit ceiling for unbounded precision
- Fallbacks: Sentinel output and locale/currency fallbacks
- Cache limits: Memory bounds for cached locale lookups

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Precision limits
    "MAX_ALLOWED_FRACTION_DIGITS",
    "DEFAULT_MINIMUM_FRACTION_DIGITS",
    "DEFAULT_MAXIMUM_FRACTION_DIGITS",
    # Fallbacks
    "DEFAULT_INVALID_VALUE_STRING",
    "FALLBACK_LOCALE",
    "FALLBACK_CURRENCY",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Glyphs
    "ARROW_UP",
    "ARROW_DOWN",
]

# ============================================================================
# PRECISION LIMITS
# ============================================================================

# Ceiling applied when a Precision leaves its maximum open.
# Decimal128-style values rarely carry more than 16 meaningful fraction digits;
# anything beyond that is noise from binary float conversion.
MAX_ALLOWED_FRACTION_DIGITS: int = 16

# Bounds of Precision.DEFAULT (0..2 fraction digits).
DEFAULT_MINIMUM_FRACTION_DIGITS: int = 0
DEFAULT_MAXIMUM_FRACTION_DIGITS: int = 2

# ============================================================================
# FALLBACKS
# ============================================================================

# Rendered when the engine cannot represent a value (NaN, Infinity, bad input).
DEFAULT_INVALID_VALUE_STRING: str = "--"

# Locale used when a requested locale is unknown to CLDR.
FALLBACK_LOCALE: str = "en_US"

# Currency used when neither the caller nor the locale territory provides one.
FALLBACK_CURRENCY: str = "USD"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# GLYPHS
# ============================================================================

ARROW_UP: str = "\u25b2"
ARROW_DOWN: str = "\u25bc"
