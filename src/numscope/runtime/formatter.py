"""NumberFormatter - abbreviation, sign, and precision pipeline over a NumberEngine.

The formatter owns one NumberEngine and composes per-call policies on top of
it through scoped engine mutation:

    value -> round to places -> zero branch    -> precision -> zero sign -> engine
                             -> nonzero branch -> sign -> precision -> abbreviation -> engine

Every scope restores the engine on exit, so a format call never leaks
state into the next one, even when it fails.

Architecture:
    - Policies (Precision, Sign, Abbreviation) are immutable and validated at
      construction; the pipeline never sees a malformed policy.
    - Rounding is half away from zero (0.125 -> 0.13) and happens once at the
      original scale; the abbreviation threshold is picked from the rounded
      value so 999.999 with two places renders "1k", not "1000".
    - format() never raises; unformattable values render invalid_value_string.

Thread Safety:
    Default (thread_safe=False): not safe for concurrent use, because scopes
    mutate the shared engine. With thread_safe=True every format/parse call
    holds an RLock.

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
import threading
from contextlib import nullcontext
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from babel import numbers as babel_numbers

from numscope.core import round_half_away, to_decimal
from numscope.diagnostics import ErrorTemplate, PolicyError
from numscope.enums import NumberStyle
from numscope.locale_utils import get_system_locale
from numscope.policy import Abbreviation, Precision, Sign, resolve_precision

from .config import FormatterConfig
from .engine import NumberEngine
from .scopes import precision_scope, sign_scope, suffix_scope, zero_sign_scope

if TYPE_CHECKING:
    from contextlib import AbstractContextManager

    from numscope.core import NumericInput

__all__ = ["NumberFormatter"]

logger = logging.getLogger(__name__)


class NumberFormatter:
    """Locale-aware number formatter with abbreviation, sign, and precision policies.

    Construct through the style factories:

        >>> fmt = NumberFormatter.currency("en_US", "USD")
        >>> fmt.format(1432.99, abbreviation=Abbreviation.DEFAULT)
        '$1.43k'
        >>> fmt.format(123.456, sign=Sign.ARROW)
        '▲$123.46'

        >>> fmt = NumberFormatter.decimal("en_US")
        >>> fmt.format(0.123456789, precision=Precision.constant(4))
        '0.1235'
        >>> fmt.parse("-1,234.5")
        Decimal('-1234.5')

    Configuration:
        default_precision: Precision used when a call passes none
        maximum_allowed_fraction_digits: Cap for open precision maximums (>= 0)
        uses_sign_for_zero: Render Sign.zero for values that round to zero
        uses_grouping_separator: Group integer digits (engine setting)
        invalid_value_string: Output for values that cannot be formatted

    Thread Safety:
        Pass thread_safe=True to serialize all calls on an RLock.
    """

    __slots__ = (
        "_engine",
        "_lock",
        "_maximum_allowed_fraction_digits",
        "_thread_safe",
        "default_precision",
        "invalid_value_string",
        "uses_sign_for_zero",
    )

    def __init__(
        self,
        engine: NumberEngine,
        /,
        *,
        config: FormatterConfig | None = None,
        thread_safe: bool = False,
    ) -> None:
        """Wrap an engine with pipeline settings.

        Args:
            engine: Locale-bound engine; the formatter takes ownership of it
            config: Initial settings (default: FormatterConfig())
            thread_safe: Serialize format/parse calls on an RLock
        """
        self._engine = engine
        self._thread_safe = thread_safe
        self._lock: threading.RLock | None = threading.RLock() if thread_safe else None
        self.apply_config(config if config is not None else FormatterConfig())

        logger.info(
            "NumberFormatter initialized for locale: %s (style=%s, currency=%s, thread_safe=%s)",
            engine.locale_code,
            engine.style.value,
            engine.currency,
            thread_safe,
        )

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def decimal(
        cls,
        locale: str | None = None,
        *,
        strict: bool = False,
        thread_safe: bool = False,
    ) -> NumberFormatter:
        """Decimal-style formatter (grouped digits, locale minus sign).

        Args:
            locale: Locale code (default: system locale)
            strict: Raise LocaleError for unknown locales instead of falling back
            thread_safe: Serialize calls on an RLock

        Example:
            >>> NumberFormatter.decimal("en_US").format(-1234.5)
            '-1,234.5'
        """
        engine = NumberEngine.create(
            locale if locale is not None else get_system_locale(),
            NumberStyle.DECIMAL,
            strict=strict,
        )
        return cls(engine, thread_safe=thread_safe)

    @classmethod
    def percent(
        cls,
        locale: str | None = None,
        *,
        strict: bool = False,
        thread_safe: bool = False,
    ) -> NumberFormatter:
        """Percent-style formatter; values are percentages already (12.5 -> "12.5%").

        Args:
            locale: Locale code (default: system locale)
            strict: Raise LocaleError for unknown locales instead of falling back
            thread_safe: Serialize calls on an RLock
        """
        engine = NumberEngine.create(
            locale if locale is not None else get_system_locale(),
            NumberStyle.PERCENT,
            strict=strict,
        )
        return cls(engine, thread_safe=thread_safe)

    @classmethod
    def currency(
        cls,
        locale: str | None = None,
        currency_code: str | None = None,
        *,
        strict: bool = False,
        thread_safe: bool = False,
    ) -> NumberFormatter:
        """Currency-style formatter.

        The default precision is fixed to the currency's CLDR minor units
        (2 for USD, 0 for JPY).

        Args:
            locale: Locale code, may carry '@currency=XXX' (default: system locale)
            currency_code: ISO 4217 code (default: locale modifier, then territory)
            strict: Raise LocaleError for unknown locales instead of falling back
            thread_safe: Serialize calls on an RLock

        Raises:
            LocaleError: If the currency code is not three ASCII letters

        Example:
            >>> NumberFormatter.currency("en_US", "PLN").format(-1)
            '-PLN1.00'
        """
        engine = NumberEngine.create(
            locale if locale is not None else get_system_locale(),
            NumberStyle.CURRENCY,
            currency=currency_code,
            strict=strict,
        )
        digits = babel_numbers.get_currency_precision(engine.currency)
        config = FormatterConfig(default_precision=Precision.constant(digits))
        return cls(engine, config=config, thread_safe=thread_safe)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def engine(self) -> NumberEngine:
        """Underlying engine (read-only reference)."""
        return self._engine

    @property
    def locale_code(self) -> str:
        """Locale code as requested at construction."""
        return self._engine.locale_code

    @property
    def decimal_separator(self) -> str:
        """Locale decimal separator, e.g. "." for en_US or "," for de_DE."""
        return self._engine.decimal_separator

    @property
    def is_thread_safe(self) -> bool:
        """True when calls are serialized on an RLock."""
        return self._thread_safe

    @property
    def uses_grouping_separator(self) -> bool:
        """Whether integer digits are grouped; reads and writes the engine setting."""
        return self._engine.uses_grouping_separator

    @uses_grouping_separator.setter
    def uses_grouping_separator(self, value: bool) -> None:
        self._engine.uses_grouping_separator = value

    @property
    def maximum_allowed_fraction_digits(self) -> int:
        """Fraction-digit cap used when a precision leaves its maximum open."""
        return self._maximum_allowed_fraction_digits

    @maximum_allowed_fraction_digits.setter
    def maximum_allowed_fraction_digits(self, value: int) -> None:
        if value < 0:
            raise PolicyError(ErrorTemplate.fraction_ceiling_negative(value))
        self._maximum_allowed_fraction_digits = value

    @property
    def config(self) -> FormatterConfig:
        """Current settings as an immutable snapshot."""
        return FormatterConfig(
            default_precision=self.default_precision,
            maximum_allowed_fraction_digits=self._maximum_allowed_fraction_digits,
            uses_sign_for_zero=self.uses_sign_for_zero,
            uses_grouping_separator=self._engine.uses_grouping_separator,
            invalid_value_string=self.invalid_value_string,
        )

    def apply_config(self, config: FormatterConfig) -> None:
        """Replace every setting with the values in ``config``."""
        with self._locked():
            self.default_precision = config.default_precision
            self._maximum_allowed_fraction_digits = config.maximum_allowed_fraction_digits
            self.uses_sign_for_zero = config.uses_sign_for_zero
            self._engine.uses_grouping_separator = config.uses_grouping_separator
            self.invalid_value_string = config.invalid_value_string

    def _locked(self) -> AbstractContextManager[object]:
        return self._lock if self._lock is not None else nullcontext()

    # ------------------------------------------------------------------
    # Write path
    # ------------------------------------------------------------------

    def format(
        self,
        value: NumericInput,
        /,
        *,
        abbreviation: Abbreviation = Abbreviation.NONE,
        sign: Sign = Sign.DEFAULT,
        precision: Precision | None = None,
    ) -> str:
        """Format a number for display.

        Args:
            value: int, float, or Decimal [positional-only]
            abbreviation: Magnitude suffix table (default: none)
            sign: Plus/minus/zero markers (default: localized minus only)
            precision: Fraction digits (default: default_precision)

        Returns:
            Display string; invalid_value_string for NaN, infinities, and
            non-numeric input. Never raises.

        Examples:
            >>> fmt = NumberFormatter.decimal("en_US")
            >>> fmt.format(48729432, abbreviation=Abbreviation.CAPITALIZED)
            '48.73M'
            >>> fmt.format(-0.001)
            '0'
            >>> fmt.format(float("nan"))
            '--'
        """
        if self._lock is not None:
            with self._lock:
                return self._format_impl(value, abbreviation, sign, precision)
        return self._format_impl(value, abbreviation, sign, precision)

    def _format_impl(
        self,
        value: NumericInput,
        abbreviation: Abbreviation,
        sign: Sign,
        precision: Precision | None,
    ) -> str:
        """Internal implementation of format (no locking)."""
        number = to_decimal(value)
        if number is None:
            logger.warning("%s", ErrorTemplate.format_input_type(value))
            return self.invalid_value_string

        # sNaN cannot be compared or quantized; the engine reports it as invalid.
        if not number.is_finite():
            return self._render(number)

        places = (
            precision.maximum
            if precision is not None and precision.maximum is not None
            else self.default_precision.maximum
        )
        try:
            rounded = round_half_away(number, places) if places is not None else number
        except InvalidOperation as e:
            logger.warning(
                "%s",
                ErrorTemplate.format_engine_failed(number, self._engine.locale_code, str(e)),
            )
            return self.invalid_value_string
        bounds = resolve_precision(
            precision, self.default_precision, self._maximum_allowed_fraction_digits
        )

        # -0 compares equal to zero.
        if rounded == 0:
            if not self.uses_sign_for_zero:
                with precision_scope(self._engine, bounds):
                    return self._render(rounded)
            with precision_scope(self._engine, bounds), zero_sign_scope(self._engine, sign.zero):
                return self._render(rounded)

        with sign_scope(self._engine, sign), precision_scope(self._engine, bounds):
            return self._render_abbreviated(number, rounded, abbreviation)

    def _render_abbreviated(
        self, number: Decimal, rounded: Decimal, abbreviation: Abbreviation
    ) -> str:
        if not abbreviation:
            return self._render(number)
        threshold = abbreviation.select(rounded)
        if threshold is None:
            return self._render(number)
        with suffix_scope(self._engine, threshold.suffix):
            return self._render(number / threshold.magnitude)

    def _render(self, value: Decimal) -> str:
        result = self._engine.format(value)
        return result if result is not None else self.invalid_value_string

    # ------------------------------------------------------------------
    # Read path
    # ------------------------------------------------------------------

    def parse(self, text: str, /) -> Decimal | None:
        """Parse a display string in this formatter's locale and style.

        Affixes the engine itself produces (currency symbol, percent sign,
        locale minus) are recognized. Abbreviated strings ("1.43k") and
        custom sign markers do not parse back.

        Args:
            text: Display string [positional-only]

        Returns:
            Parsed Decimal, or None if the text is not a number

        Example:
            >>> NumberFormatter.currency("en_US", "USD").parse("-$1,432.99")
            Decimal('-1432.99')
        """
        if self._lock is not None:
            with self._lock:
                return self._engine.parse(text)
        return self._engine.parse(text)

    def parse_number(self, text: str, /) -> int | float | None:
        """Parse a display string to int when integral, float otherwise.

        Example:
            >>> NumberFormatter.decimal("en_US").parse_number("1,234")
            1234
        """
        result = self.parse(text)
        if result is None:
            return None
        if result == result.to_integral_value():
            return int(result)
        return float(result)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"NumberFormatter(locale={self._engine.locale_code!r}, "
            f"style={self._engine.style.value!r}, currency={self._engine.currency!r})"
        )

