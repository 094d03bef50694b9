"""Tests for NumberEngine - Babel-backed engine with mutable affix and digit slots.

Expected strings for non-English locales are computed through Babel where the
CLDR data decides the exact whitespace, so the tests track CLDR updates.
"""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest
from babel import numbers as babel_numbers

from numscope.diagnostics import DiagnosticCode, FormattingError, LocaleError
from numscope.enums import NumberStyle
from numscope.runtime import EngineState, NumberEngine

# ============================================================================
# Construction
# ============================================================================


class TestEngineCreate:
    """NumberEngine.create() locale resolution and currency selection."""

    def test_decimal_affixes(self) -> None:
        engine = NumberEngine.create("en_US")
        assert engine.positive_prefix == ""
        assert engine.negative_prefix == "-"
        assert engine.positive_suffix == ""
        assert engine.negative_suffix == ""
        assert engine.style is NumberStyle.DECIMAL
        assert engine.currency is None

    def test_currency_affixes(self) -> None:
        engine = NumberEngine.create("en_US", NumberStyle.CURRENCY, currency="USD")
        assert engine.positive_prefix == "$"
        assert engine.negative_prefix == "-$"
        assert engine.currency == "USD"
        assert (engine.minimum_fraction_digits, engine.maximum_fraction_digits) == (2, 2)

    def test_percent_affixes(self) -> None:
        engine = NumberEngine.create("en_US", NumberStyle.PERCENT)
        assert engine.positive_suffix == "%"
        assert engine.negative_suffix == "%"

    def test_locale_glyphs(self) -> None:
        engine = NumberEngine.create("de_DE")
        assert engine.decimal_separator == ","
        assert engine.plus_sign == babel_numbers.get_plus_sign_symbol("de_DE")
        assert engine.minus_sign == babel_numbers.get_minus_sign_symbol("de_DE")

    def test_bcp47_code_accepted(self) -> None:
        engine = NumberEngine.create("en-GB")
        assert engine.locale_code == "en-GB"
        assert str(engine.babel_locale) == "en_GB"
        assert not engine.is_fallback

    def test_currency_from_locale_modifier(self) -> None:
        engine = NumberEngine.create("en_US@currency=PLN", NumberStyle.CURRENCY)
        assert engine.currency == "PLN"
        assert engine.negative_prefix == "-PLN"

    def test_currency_from_territory(self) -> None:
        engine = NumberEngine.create("pl_PL", NumberStyle.CURRENCY)
        assert engine.currency == "PLN"

    def test_explicit_currency_wins_over_modifier(self) -> None:
        engine = NumberEngine.create("en_US@currency=PLN", NumberStyle.CURRENCY, currency="eur")
        assert engine.currency == "EUR"

    def test_currency_ignored_for_decimal_style(self) -> None:
        engine = NumberEngine.create("en_US", NumberStyle.DECIMAL, currency="EUR")
        assert engine.currency is None

    @pytest.mark.parametrize("code", ["US", "USDX", "12$", "ÜSD"])
    def test_malformed_currency_rejected(self, code: str) -> None:
        with pytest.raises(LocaleError) as exc_info:
            NumberEngine.create("en_US", NumberStyle.CURRENCY, currency=code)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CURRENCY_CODE_INVALID

    def test_unknown_currency_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="numscope.runtime.engine"):
            engine = NumberEngine.create("en_US", NumberStyle.CURRENCY, currency="XYZ")
        assert engine.currency == "XYZ"
        assert any("XYZ" in record.getMessage() for record in caplog.records)

    def test_unknown_locale_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="numscope.runtime.engine"):
            engine = NumberEngine.create("xx_INVALID")
        assert engine.is_fallback
        assert engine.locale_code == "xx_INVALID"
        assert str(engine.babel_locale) == "en_US"
        assert any("xx_INVALID" in record.getMessage() for record in caplog.records)

    def test_unknown_locale_strict_raises(self) -> None:
        with pytest.raises(LocaleError) as exc_info:
            NumberEngine.create("xx_INVALID", strict=True)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.LOCALE_UNKNOWN

    def test_direct_currency_construction_requires_code(self) -> None:
        engine = NumberEngine.create("en_US")
        with pytest.raises(LocaleError):
            NumberEngine(engine.babel_locale, NumberStyle.CURRENCY)

    def test_repr(self) -> None:
        engine = NumberEngine.create("en_US", NumberStyle.CURRENCY, currency="USD")
        assert repr(engine) == "NumberEngine(locale='en_US', style='currency', currency='USD')"


# ============================================================================
# Formatting
# ============================================================================


class TestEngineFormat:
    """format() / format_or_raise() with the current slots."""

    def test_decimal(self) -> None:
        engine = NumberEngine.create("en_US")
        assert engine.format(Decimal("-1234.5")) == "-1,234.5"

    def test_currency_pads_minimum_digits(self) -> None:
        engine = NumberEngine.create("en_US", NumberStyle.CURRENCY, currency="USD")
        assert engine.format(-1234.5) == "-$1,234.50"

    def test_percent_uses_multiplier_of_one(self) -> None:
        engine = NumberEngine.create("en_US", NumberStyle.PERCENT)
        engine.maximum_fraction_digits = 1
        assert engine.format(12.5) == "12.5%"

    def test_rounds_half_away_from_zero(self) -> None:
        engine = NumberEngine.create("en_US")
        engine.maximum_fraction_digits = 2
        assert engine.format(Decimal("0.125")) == "0.13"
        assert engine.format(Decimal("-0.125")) == "-0.13"

    def test_value_rounding_to_zero_uses_positive_affixes(self) -> None:
        engine = NumberEngine.create("en_US")
        engine.maximum_fraction_digits = 2
        assert engine.format(Decimal("-0.001")) == "0"

    def test_minimum_and_maximum_digits(self) -> None:
        engine = NumberEngine.create("en_US")
        engine.minimum_fraction_digits = 3
        engine.maximum_fraction_digits = 5
        assert engine.format(Decimal("1.5")) == "1.500"
        assert engine.format(Decimal("1.123456")) == "1.12346"

    def test_zero_maximum_digits(self) -> None:
        engine = NumberEngine.create("en_US")
        engine.minimum_fraction_digits = 0
        engine.maximum_fraction_digits = 0
        assert engine.format(Decimal("1234.5")) == "1,235"

    def test_grouping_disabled(self) -> None:
        engine = NumberEngine.create("en_US")
        engine.uses_grouping_separator = False
        assert engine.format(Decimal("1234567.5")) == "1234567.5"

    def test_secondary_grouping(self) -> None:
        engine = NumberEngine.create("hi_IN")
        assert engine.format(Decimal("12345678")) == "1,23,45,678"

    def test_locale_separators(self) -> None:
        engine = NumberEngine.create("de_DE")
        assert engine.format(Decimal("1234.5")) == "1.234,5"

    def test_currency_suffix_layout_matches_babel(self) -> None:
        engine = NumberEngine.create("de_DE", NumberStyle.CURRENCY, currency="EUR")
        expected = babel_numbers.format_currency(Decimal("1234.5"), "EUR", locale="de_DE")
        assert engine.format(Decimal("1234.5")) == expected

    def test_large_value(self) -> None:
        engine = NumberEngine.create("en_US")
        assert engine.format(Decimal("123456789012345678901234567890")) == (
            "123,456,789,012,345,678,901,234,567,890"
        )

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), Decimal("-Infinity")])
    def test_non_finite_returns_none(self, value: float | Decimal) -> None:
        assert NumberEngine.create("en_US").format(value) is None

    def test_non_finite_raises_with_fallback(self) -> None:
        engine = NumberEngine.create("en_US")
        with pytest.raises(FormattingError) as exc_info:
            engine.format_or_raise(Decimal("NaN"))
        assert exc_info.value.fallback_value == "NaN"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.FORMAT_VALUE_NOT_FINITE

    def test_wrong_type(self) -> None:
        engine = NumberEngine.create("en_US")
        assert engine.format("12") is None
        with pytest.raises(FormattingError) as exc_info:
            engine.format_or_raise(True)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.FORMAT_INPUT_TYPE

    def test_babel_failure_wrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def boom(*_args: object, **_kwargs: object) -> str:
            msg = "pattern rejected"
            raise ValueError(msg)

        monkeypatch.setattr(babel_numbers, "format_decimal", boom)
        engine = NumberEngine.create("en_US")
        with pytest.raises(FormattingError) as exc_info:
            engine.format_or_raise(Decimal(1))
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.FORMAT_ENGINE_FAILED
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert engine.format(Decimal(1)) is None


class TestLocalizeAffix:
    """CLDR placeholder substitution in affixes."""

    @pytest.fixture
    def engine(self) -> NumberEngine:
        return NumberEngine.create("en_US", NumberStyle.CURRENCY, currency="EUR")

    @pytest.mark.parametrize(
        ("affix", "expected"),
        [
            ("\xa4", "€"),
            ("\xa4\xa4", "EUR"),
            ("-\xa4", "-€"),
            ("%", "%"),
            ("+", "+"),
            ("'%'", "%"),
            ("'-'x", "-x"),
            ("''", "'"),
            ("'it''s'", "it's"),
        ],
    )
    def test_placeholders(self, engine: NumberEngine, affix: str, expected: str) -> None:
        assert engine._localize_affix(affix) == expected


# ============================================================================
# State and parsing
# ============================================================================


class TestEngineState:
    """snapshot() / restore()."""

    def test_snapshot_captures_every_slot(self) -> None:
        engine = NumberEngine.create("en_US", NumberStyle.CURRENCY, currency="USD")
        assert engine.snapshot() == EngineState(
            positive_prefix="$",
            negative_prefix="-$",
            positive_suffix="",
            negative_suffix="",
            minimum_fraction_digits=2,
            maximum_fraction_digits=2,
            uses_grouping_separator=True,
        )

    def test_restore(self) -> None:
        engine = NumberEngine.create("en_US")
        saved = engine.snapshot()
        engine.positive_prefix = "X"
        engine.negative_suffix = "Y"
        engine.maximum_fraction_digits = 9
        engine.uses_grouping_separator = False
        engine.restore(saved)
        assert engine.snapshot() == saved


class TestEngineParse:
    """parse() strips the engine's own affixes."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("-$1,234.50", "-1234.50"),
            ("$1,234.50", "1234.50"),
            ("$0.00", "0.00"),
            ("  $5  ", "5"),
        ],
    )
    def test_currency(self, text: str, expected: str) -> None:
        engine = NumberEngine.create("en_US", NumberStyle.CURRENCY, currency="USD")
        assert engine.parse(text) == Decimal(expected)

    def test_decimal_negative(self) -> None:
        assert NumberEngine.create("en_US").parse("-1,234.5") == Decimal("-1234.5")

    def test_percent(self) -> None:
        assert NumberEngine.create("en_US", NumberStyle.PERCENT).parse("12.5%") == Decimal("12.5")

    @pytest.mark.parametrize("text", ["", "abc", "1.43k", "$", "NaN", "$NaN", "-$Infinity"])
    def test_unparseable(self, text: str) -> None:
        engine = NumberEngine.create("en_US", NumberStyle.CURRENCY, currency="USD")
        assert engine.parse(text) is None

    def test_non_string(self) -> None:
        assert NumberEngine.create("en_US").parse(12) is None  # type: ignore[arg-type]

    @pytest.mark.parametrize("locale", ["de_DE", "fr_FR", "sv_SE", "pl_PL", "nl_NL"])
    def test_own_output_roundtrips(self, locale: str) -> None:
        engine = NumberEngine.create(locale, NumberStyle.CURRENCY)
        for value in (Decimal("-1234.56"), Decimal("1234.56")):
            assert engine.parse(engine.format(value) or "") == value
