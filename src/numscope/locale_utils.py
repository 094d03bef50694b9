"""Locale utilities for BCP-47 to POSIX conversion and currency lookup.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling so engines, parsers, and caches agree on
one spelling of every locale.

Locale codes may carry ICU-style keyword modifiers, e.g.
``"en_US@currency=PLN"``. They are split off before Babel sees the code and
are available to callers through split_locale_modifiers().

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from babel import Locale
from babel import numbers as babel_numbers

from numscope.constants import FALLBACK_CURRENCY, FALLBACK_LOCALE, MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = [
    "default_currency",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
    "split_locale_modifiers",
]

logger = logging.getLogger(__name__)

# POSIX pseudo-locales carry no CLDR data.
_PSEUDO_LOCALES: frozenset[str] = frozenset({"", "C", "POSIX"})


def split_locale_modifiers(locale_code: str) -> tuple[str, Mapping[str, str]]:
    """Separate a locale code from its ICU keyword modifiers.

    Args:
        locale_code: Locale code, optionally with ``@key=value;key=value``

    Returns:
        Tuple of (bare locale code, modifiers). Keys are lowercased.

    Example:
        >>> split_locale_modifiers("en_US@currency=PLN")
        ('en_US', {'currency': 'PLN'})
        >>> split_locale_modifiers("de-DE")
        ('de-DE', {})
    """
    base, _, raw_modifiers = locale_code.partition("@")
    modifiers: dict[str, str] = {}
    for item in raw_modifiers.split(";"):
        key, sep, value = item.partition("=")
        if sep and key.strip():
            modifiers[key.strip().lower()] = value.strip()
    return base, modifiers


def normalize_locale(locale_code: str) -> str:
    """Convert a locale code to the POSIX form Babel expects.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Encoding suffixes (``.UTF-8``) and ``@`` modifiers are dropped.

    This is the canonical normalization function. All locale handling should
    normalize at the system boundary (entry point) using this function, then
    use the normalized form for cache keys and lookups.

    Args:
        locale_code: Locale code (e.g., "en-US", "pl_PL.UTF-8", "en_US@currency=PLN")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pl_PL")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("pl_PL.UTF-8")
        'pl_PL'
        >>> normalize_locale("en_US@currency=PLN")
        'en_US'
    """
    base, _ = split_locale_modifiers(locale_code.strip())
    base = base.split(".", 1)[0]
    return base.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. Engines for the same
    locale share one Locale instance.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.language
        'en'
        >>> locale.territory
        'US'
    """
    return Locale.parse(normalize_locale(locale_code))


def default_currency(locale: Locale) -> str:
    """Return the currency a locale's territory currently uses.

    Args:
        locale: Babel Locale

    Returns:
        ISO 4217 code of the first tender currency for the territory,
        or FALLBACK_CURRENCY if the locale has no territory or CLDR lists none.

    Example:
        >>> default_currency(get_babel_locale("pl_PL"))
        'PLN'
        >>> default_currency(get_babel_locale("en"))
        'USD'
    """
    if not locale.territory:
        return FALLBACK_CURRENCY
    currencies = babel_numbers.get_territory_currencies(locale.territory)
    if not currencies:
        logger.debug("No CLDR currency for territory %s", locale.territory)
        return FALLBACK_CURRENCY
    return str(currencies[0])


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_NUMERIC environment variable (number formatting category)
    4. LANG environment variable (default locale)

    Normalizes the result to POSIX format for Babel compatibility.
    Filters out "C" and "POSIX" pseudo-locales.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return FALLBACK_LOCALE.

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de_DE'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale:
            code = normalize_locale(system_locale)
            if code not in _PSEUDO_LOCALES:
                return code
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_NUMERIC", "LANG"):
        value = os.environ.get(var)
        if value:
            code = normalize_locale(value)
            if code not in _PSEUDO_LOCALES:
                return code

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_NUMERIC, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return FALLBACK_LOCALE
