"""Locale-aware numeric engine backed by Babel.

NumberEngine is the locale-bound primitive the formatting pipeline drives.
It is bound at construction to one locale, one NumberStyle, and (for
currency) one currency code, and it exposes the same mutable slots a
platform number formatter does:

    positive_prefix / negative_prefix / positive_suffix / negative_suffix
    minimum_fraction_digits / maximum_fraction_digits
    uses_grouping_separator

Affixes start out as the CLDR pattern's affixes with placeholders resolved
(currency sign, percent sign, plus/minus glyphs). Digits are produced by
Babel's format_decimal() from a pattern built out of the locale's grouping
sizes and the current fraction-digit bounds, so grouping and decimal symbols
always come from CLDR.

Architecture:
    - Engine slots are plain mutable attributes; the pipeline changes them
      only through the scopes in numscope.runtime.scopes, which restore them
      on every exit path.
    - snapshot()/restore() capture every mutable slot at once.
    - Percent style uses a multiplier of 1: 12.5 renders as "12.5%".

Thread Safety:
    NOT thread-safe. A scope's mutation is visible on the shared instance for
    its duration. Use one engine per thread, or NumberFormatter(thread_safe=True).

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext
from typing import TYPE_CHECKING

from babel import UnknownLocaleError
from babel import numbers as babel_numbers

from numscope.constants import FALLBACK_LOCALE
from numscope.core import round_half_away, to_decimal
from numscope.diagnostics import ErrorTemplate, FormattingError, LocaleError
from numscope.enums import NumberStyle
from numscope.locale_utils import default_currency, get_babel_locale, split_locale_modifiers
from numscope.parsing import is_valid_decimal, parse_decimal

if TYPE_CHECKING:
    from babel import Locale
    from babel.numbers import NumberPattern

__all__ = ["EngineState", "NumberEngine"]

logger = logging.getLogger(__name__)

_CURRENCY_SIGN = "\xa4"

# Babel reports "no grouping" as a group size of 1000.
_NO_GROUPING = 1000


@dataclass(frozen=True, slots=True)
class EngineState:
    """Snapshot of every mutable NumberEngine slot."""

    positive_prefix: str
    negative_prefix: str
    positive_suffix: str
    negative_suffix: str
    minimum_fraction_digits: int
    maximum_fraction_digits: int
    uses_grouping_separator: bool


def _style_pattern(locale: Locale, style: NumberStyle) -> NumberPattern:
    match style:
        case NumberStyle.DECIMAL:
            return locale.decimal_formats[None]
        case NumberStyle.PERCENT:
            return locale.percent_formats[None]
        case NumberStyle.CURRENCY:
            return locale.currency_formats["standard"]


def _integer_pattern(grouping: tuple[int, int]) -> str:
    """Integer part of a digits pattern for the locale's group sizes.

    (3, 3) -> "#,##0"; (3, 2) -> "#,##,##0"; no grouping -> "0".
    """
    primary, secondary = grouping
    if primary <= 0 or primary >= _NO_GROUPING:
        return "0"
    tail = "#" * (primary - 1) + "0"
    if secondary == primary or secondary <= 0 or secondary >= _NO_GROUPING:
        return f"#,{tail}"
    return f"#,{'#' * secondary},{tail}"


class NumberEngine:
    """Babel-backed number formatter with mutable affix and digit slots.

    Use NumberEngine.create() to construct instances with locale validation
    and fallback. Direct construction expects an already-resolved Babel Locale.

    Examples:
        >>> engine = NumberEngine.create("en_US", NumberStyle.CURRENCY, currency="USD")
        >>> engine.negative_prefix
        '-$'
        >>> engine.format(Decimal("-1234.5"))
        '-$1,234.50'
        >>> engine.parse("-$1,234.50")
        Decimal('-1234.50')
    """

    __slots__ = (
        "_babel_code",
        "_currency",
        "_currency_symbol",
        "_decimal_separator",
        "_integer_pattern",
        "_is_fallback",
        "_locale",
        "_locale_code",
        "_minus_sign",
        "_percent_sign",
        "_plus_sign",
        "_style",
        "maximum_fraction_digits",
        "minimum_fraction_digits",
        "negative_prefix",
        "negative_suffix",
        "positive_prefix",
        "positive_suffix",
        "uses_grouping_separator",
    )

    def __init__(
        self,
        locale: Locale,
        style: NumberStyle = NumberStyle.DECIMAL,
        *,
        currency: str | None = None,
        locale_code: str | None = None,
        is_fallback: bool = False,
    ) -> None:
        """Bind the engine to a locale and style.

        Args:
            locale: Resolved Babel Locale
            style: Number style (decimal, percent, currency)
            currency: ISO 4217 code; required for currency style
            locale_code: Locale code as requested by the caller (for debugging)
            is_fallback: True when ``locale`` replaced an unknown requested locale

        Raises:
            LocaleError: If style is currency and no currency code is given
        """
        if style is NumberStyle.CURRENCY and not currency:
            raise LocaleError(ErrorTemplate.currency_code_invalid(str(currency)))

        self._locale = locale
        self._babel_code = str(locale)
        self._locale_code = locale_code if locale_code is not None else self._babel_code
        self._style = style
        self._currency = currency if style is NumberStyle.CURRENCY else None
        self._is_fallback = is_fallback

        self._plus_sign = str(babel_numbers.get_plus_sign_symbol(locale))
        self._minus_sign = str(babel_numbers.get_minus_sign_symbol(locale))
        self._decimal_separator = str(babel_numbers.get_decimal_symbol(locale))
        self._percent_sign = str(babel_numbers.get_percent_symbol(locale))
        self._currency_symbol = (
            str(babel_numbers.get_currency_symbol(self._currency, locale))
            if self._currency is not None
            else ""
        )

        pattern = _style_pattern(locale, style)
        self._integer_pattern = _integer_pattern(pattern.grouping)
        self.positive_prefix = self._localize_affix(pattern.prefix[0])
        self.negative_prefix = self._localize_affix(pattern.prefix[1])
        self.positive_suffix = self._localize_affix(pattern.suffix[0])
        self.negative_suffix = self._localize_affix(pattern.suffix[1])
        self.minimum_fraction_digits, self.maximum_fraction_digits = pattern.frac_prec
        self.uses_grouping_separator = True

    @classmethod
    def create(
        cls,
        locale_code: str,
        style: NumberStyle = NumberStyle.DECIMAL,
        *,
        currency: str | None = None,
        strict: bool = False,
    ) -> NumberEngine:
        """Create an engine with graceful fallback for invalid locales.

        For unknown or invalid locales, logs a warning and falls back to
        en_US (``is_fallback`` is then True). With ``strict=True`` a
        LocaleError is raised instead.

        For currency style the code is taken from ``currency``, then from an
        ``@currency=`` modifier on the locale code, then from the locale's
        territory.

        Args:
            locale_code: BCP 47 / POSIX locale identifier, optionally with
                ICU modifiers (e.g. 'en_US@currency=PLN')
            style: Number style
            currency: ISO 4217 currency code (currency style only)
            strict: Raise instead of falling back on unknown locales

        Returns:
            NumberEngine bound to the resolved locale

        Raises:
            LocaleError: If strict and the locale is unknown, or if the
                currency code is not three ASCII letters
        """
        base_code, modifiers = split_locale_modifiers(locale_code)
        used_fallback = False
        try:
            locale = get_babel_locale(base_code)
        except (UnknownLocaleError, ValueError, TypeError) as e:
            if strict:
                raise LocaleError(ErrorTemplate.locale_unknown(locale_code, str(e))) from None
            logger.warning("Unknown locale '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE)
            locale = get_babel_locale(FALLBACK_LOCALE)
            used_fallback = True

        resolved_currency: str | None = None
        if style is NumberStyle.CURRENCY:
            resolved_currency = cls._validate_currency(
                currency or modifiers.get("currency") or default_currency(locale)
            )

        return cls(
            locale,
            style,
            currency=resolved_currency,
            locale_code=locale_code,
            is_fallback=used_fallback,
        )

    @staticmethod
    def _validate_currency(currency_code: str) -> str:
        """Normalize and check an ISO 4217 code.

        Raises:
            LocaleError: If the code is not three ASCII letters
        """
        code = currency_code.strip().upper()
        if len(code) != 3 or not code.isascii() or not code.isalpha():
            raise LocaleError(ErrorTemplate.currency_code_invalid(currency_code))
        if not babel_numbers.is_currency(code):
            logger.warning("Currency code '%s' is not in CLDR; rendering the code as symbol", code)
        return code

    def _localize_affix(self, affix: str) -> str:
        """Resolve CLDR pattern placeholders in a prefix or suffix.

        ¤ -> currency symbol, ¤¤ -> ISO code, % -> percent sign,
        - -> minus sign, + -> plus sign. Quoted text is literal and ''
        is an escaped quote.
        """
        out: list[str] = []
        quoted = False
        i = 0
        while i < len(affix):
            char = affix[i]
            if char == "'":
                if affix[i + 1 : i + 2] == "'":
                    out.append("'")
                    i += 2
                    continue
                quoted = not quoted
                i += 1
                continue
            if quoted:
                out.append(char)
            elif char == _CURRENCY_SIGN:
                run = 1
                while affix[i + run : i + run + 1] == _CURRENCY_SIGN:
                    run += 1
                out.append(self._currency if run >= 2 and self._currency else self._currency_symbol)
                i += run
                continue
            elif char == "%":
                out.append(self._percent_sign)
            elif char == "-":
                out.append(self._minus_sign)
            elif char == "+":
                out.append(self._plus_sign)
            else:
                out.append(char)
            i += 1
        return "".join(out)

    # ------------------------------------------------------------------
    # Read-only locale data
    # ------------------------------------------------------------------

    @property
    def locale_code(self) -> str:
        """Locale code as requested at construction."""
        return self._locale_code

    @property
    def babel_locale(self) -> Locale:
        """Resolved Babel Locale (en_US when is_fallback is True)."""
        return self._locale

    @property
    def style(self) -> NumberStyle:
        """Number style bound at construction."""
        return self._style

    @property
    def currency(self) -> str | None:
        """ISO 4217 code for currency engines, None otherwise."""
        return self._currency

    @property
    def is_fallback(self) -> bool:
        """True when the requested locale was unknown and en_US is used."""
        return self._is_fallback

    @property
    def plus_sign(self) -> str:
        """Locale plus glyph."""
        return self._plus_sign

    @property
    def minus_sign(self) -> str:
        """Locale minus glyph."""
        return self._minus_sign

    @property
    def decimal_separator(self) -> str:
        """Locale decimal separator."""
        return self._decimal_separator

    # ------------------------------------------------------------------
    # State capture
    # ------------------------------------------------------------------

    def snapshot(self) -> EngineState:
        """Capture every mutable slot."""
        return EngineState(
            positive_prefix=self.positive_prefix,
            negative_prefix=self.negative_prefix,
            positive_suffix=self.positive_suffix,
            negative_suffix=self.negative_suffix,
            minimum_fraction_digits=self.minimum_fraction_digits,
            maximum_fraction_digits=self.maximum_fraction_digits,
            uses_grouping_separator=self.uses_grouping_separator,
        )

    def restore(self, state: EngineState) -> None:
        """Write a snapshot back into the mutable slots."""
        self.positive_prefix = state.positive_prefix
        self.negative_prefix = state.negative_prefix
        self.positive_suffix = state.positive_suffix
        self.negative_suffix = state.negative_suffix
        self.minimum_fraction_digits = state.minimum_fraction_digits
        self.maximum_fraction_digits = state.maximum_fraction_digits
        self.uses_grouping_separator = state.uses_grouping_separator

    # ------------------------------------------------------------------
    # Write path
    # ------------------------------------------------------------------

    def _digits_pattern(self) -> str:
        integer_part = self._integer_pattern if self.uses_grouping_separator else "0"
        minimum = max(self.minimum_fraction_digits, 0)
        maximum = max(self.maximum_fraction_digits, minimum)
        if maximum == 0:
            return integer_part
        return f"{integer_part}.{'0' * minimum}{'#' * (maximum - minimum)}"

    def format_or_raise(self, value: object) -> str:
        """Format a number with the current slots.

        The value is rounded half away from zero to maximum_fraction_digits,
        padded to minimum_fraction_digits, and wrapped in the positive or
        negative affixes. A value that rounds to zero uses the positive affixes.

        Args:
            value: int, float, or Decimal

        Returns:
            Formatted string

        Raises:
            FormattingError: If the value is not a finite number or Babel
                rejects it. ``fallback_value`` holds str(value).
        """
        number = to_decimal(value)
        if number is None:
            raise FormattingError(ErrorTemplate.format_input_type(value), fallback_value=str(value))
        if not number.is_finite():
            raise FormattingError(
                ErrorTemplate.format_value_not_finite(number), fallback_value=str(number)
            )

        places = max(self.maximum_fraction_digits, 0)
        try:
            rounded = round_half_away(number, places)
            # Babel quantizes in the active context; keep every digit of large values.
            with localcontext() as ctx:
                ctx.prec = max(ctx.prec, rounded.adjusted() + places + 2)
                digits = babel_numbers.format_decimal(
                    abs(rounded),
                    format=self._digits_pattern(),
                    locale=self._locale,
                )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            diagnostic = ErrorTemplate.format_engine_failed(number, self._babel_code, str(e))
            raise FormattingError(diagnostic, fallback_value=str(number)) from e

        if rounded < 0:
            return f"{self.negative_prefix}{digits}{self.negative_suffix}"
        return f"{self.positive_prefix}{digits}{self.positive_suffix}"

    def format(self, value: object) -> str | None:
        """Format a number, returning None if the engine cannot represent it.

        Args:
            value: int, float, or Decimal

        Returns:
            Formatted string, or None for NaN, infinities, or engine failures
        """
        try:
            return self.format_or_raise(value)
        except FormattingError as e:
            logger.debug("Engine format failed: %s", e)
            return None

    # ------------------------------------------------------------------
    # Read path
    # ------------------------------------------------------------------

    def _strip_affixes(self, text: str) -> tuple[str, bool]:
        """Remove this engine's own affixes from a display string.

        Returns:
            Tuple of (core digits text, True if negative affixes matched)
        """
        candidates = sorted(
            (
                (self.negative_prefix, self.negative_suffix, True),
                (self.positive_prefix, self.positive_suffix, False),
            ),
            key=lambda affixes: len(affixes[0]) + len(affixes[1]),
            reverse=True,
        )
        for prefix, suffix, negative in candidates:
            if (
                len(text) > len(prefix) + len(suffix)
                and text.startswith(prefix)
                and text.endswith(suffix)
            ):
                return text[len(prefix) : len(text) - len(suffix)].strip(), negative
        return text, False

    def parse(self, text: str) -> Decimal | None:
        """Parse a display string produced under this engine's locale and style.

        The engine's negative or positive prefix/suffix is recognized and
        stripped; the remaining digits are parsed with Babel. No rounding,
        and abbreviation suffixes are not understood.

        Args:
            text: Display string (e.g. "-$1,234.50" for an en_US USD engine)

        Returns:
            Parsed Decimal, or None if the text is not a finite number
        """
        if not isinstance(text, str):
            return None
        core, negative = self._strip_affixes(text.strip())
        result, _errors = parse_decimal(core, self._babel_code)
        if not is_valid_decimal(result):
            return None
        return -result if negative else result

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"NumberEngine(locale={self._babel_code!r}, style={self._style.value!r}, "
            f"currency={self._currency!r})"
        )
