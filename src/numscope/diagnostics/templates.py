"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # ------------------------------------------------------------------
    # Policy errors
    # ------------------------------------------------------------------

    @staticmethod
    def precision_negative(field_name: str, value: int) -> Diagnostic:
        """Precision bound below zero.

        Args:
            field_name: "minimum" or "maximum"
            value: The rejected bound

        Returns:
            Diagnostic for PRECISION_NEGATIVE
        """
        msg = f"Precision {field_name} must be >= 0, got {value}"
        return Diagnostic(
            code=DiagnosticCode.PRECISION_NEGATIVE,
            message=msg,
            hint="Fraction-digit counts are non-negative; use None for an open bound",
        )

    @staticmethod
    def precision_bounds_inverted(minimum: int, maximum: int) -> Diagnostic:
        """Precision minimum greater than maximum.

        Args:
            minimum: Requested minimum fraction digits
            maximum: Requested maximum fraction digits

        Returns:
            Diagnostic for PRECISION_BOUNDS_INVERTED
        """
        msg = f"Precision minimum {minimum} exceeds maximum {maximum}"
        return Diagnostic(
            code=DiagnosticCode.PRECISION_BOUNDS_INVERTED,
            message=msg,
            hint="Use Precision.constant(n) for a fixed number of digits",
        )

    @staticmethod
    def sign_zero_localized() -> Diagnostic:
        """Zero sign style set to localized.

        Returns:
            Diagnostic for SIGN_ZERO_LOCALIZED
        """
        return Diagnostic(
            code=DiagnosticCode.SIGN_ZERO_LOCALIZED,
            message="Zero sign style cannot be localized",
            hint="Locales define no zero marker; use SignStyle.none() or SignStyle.custom()",
        )

    @staticmethod
    def sign_custom_empty() -> Diagnostic:
        """Custom sign style with empty text.

        Returns:
            Diagnostic for SIGN_CUSTOM_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.SIGN_CUSTOM_EMPTY,
            message="Custom sign text cannot be empty",
            hint="Use SignStyle.none() to render no marker",
        )

    @staticmethod
    def abbreviation_magnitude_invalid(suffix: str, magnitude: object) -> Diagnostic:
        """Abbreviation threshold magnitude not a positive finite number.

        Args:
            suffix: Suffix of the offending threshold
            magnitude: The rejected magnitude

        Returns:
            Diagnostic for ABBREVIATION_MAGNITUDE_INVALID
        """
        msg = f"Abbreviation threshold '{suffix}' has invalid magnitude {magnitude!r}"
        return Diagnostic(
            code=DiagnosticCode.ABBREVIATION_MAGNITUDE_INVALID,
            message=msg,
            hint="Magnitudes must be positive finite numbers such as Decimal(1000)",
        )

    @staticmethod
    def abbreviation_not_descending(previous: str, current: str) -> Diagnostic:
        """Abbreviation thresholds out of order.

        Args:
            previous: Suffix of the earlier threshold
            current: Suffix of the threshold that breaks the ordering

        Returns:
            Diagnostic for ABBREVIATION_NOT_DESCENDING
        """
        msg = (
            f"Abbreviation threshold '{current}' is not smaller than "
            f"preceding threshold '{previous}'"
        )
        return Diagnostic(
            code=DiagnosticCode.ABBREVIATION_NOT_DESCENDING,
            message=msg,
            hint="List thresholds from the largest magnitude to the smallest",
        )

    @staticmethod
    def fraction_ceiling_negative(value: int) -> Diagnostic:
        """Fraction-digit ceiling below zero.

        Args:
            value: The rejected ceiling

        Returns:
            Diagnostic for FRACTION_CEILING_NEGATIVE
        """
        msg = f"maximum_allowed_fraction_digits must be >= 0, got {value}"
        return Diagnostic(
            code=DiagnosticCode.FRACTION_CEILING_NEGATIVE,
            message=msg,
        )

    # ------------------------------------------------------------------
    # Locale errors
    # ------------------------------------------------------------------

    @staticmethod
    def locale_unknown(locale_code: str, reason: str) -> Diagnostic:
        """Locale not known to CLDR.

        Args:
            locale_code: The requested locale code
            reason: Babel's explanation

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale identifier '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use BCP 47 or POSIX locale codes (e.g., 'en-US', 'de_DE', 'pl_PL')",
        )

    @staticmethod
    def currency_code_invalid(currency_code: str) -> Diagnostic:
        """Currency code not shaped like ISO 4217.

        Args:
            currency_code: The rejected code

        Returns:
            Diagnostic for CURRENCY_CODE_INVALID
        """
        msg = f"Invalid currency code '{currency_code}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_CODE_INVALID,
            message=msg,
            hint="Currency codes are three ASCII letters (ISO 4217), e.g. 'USD'",
        )

    # ------------------------------------------------------------------
    # Formatting errors
    # ------------------------------------------------------------------

    @staticmethod
    def format_value_not_finite(value: object) -> Diagnostic:
        """Value is NaN or infinite.

        Args:
            value: The value that cannot be rendered

        Returns:
            Diagnostic for FORMAT_VALUE_NOT_FINITE
        """
        msg = f"Cannot format non-finite value {value}"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_VALUE_NOT_FINITE,
            message=msg,
        )

    @staticmethod
    def format_engine_failed(value: object, locale_code: str, reason: str) -> Diagnostic:
        """Babel rejected the value or pattern.

        Args:
            value: The value being formatted
            locale_code: Engine locale
            reason: Underlying exception text

        Returns:
            Diagnostic for FORMAT_ENGINE_FAILED
        """
        msg = f"Number formatting failed for '{value}' in locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_ENGINE_FAILED,
            message=msg,
        )

    @staticmethod
    def format_input_type(value: object) -> Diagnostic:
        """Value is not an int, float, or Decimal.

        Args:
            value: The rejected value

        Returns:
            Diagnostic for FORMAT_INPUT_TYPE
        """
        msg = f"Cannot format value of type {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_INPUT_TYPE,
            message=msg,
            hint="Pass an int, float, or decimal.Decimal",
            severity="warning",
        )

    # ------------------------------------------------------------------
    # Parsing errors
    # ------------------------------------------------------------------

    @staticmethod
    def parse_decimal_failed(value: str, locale_code: str, reason: str) -> Diagnostic:
        """Decimal parsing failed.

        Args:
            value: The input string that failed to parse
            locale_code: The locale used for parsing
            reason: The reason parsing failed

        Returns:
            Diagnostic for PARSE_DECIMAL_FAILED
        """
        msg = f"Failed to parse decimal '{value}' for locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_DECIMAL_FAILED,
            message=msg,
            hint="Check that the number format matches the locale's conventions",
        )

    @staticmethod
    def parse_locale_unknown(locale_code: str) -> Diagnostic:
        """Unknown locale for parsing.

        Args:
            locale_code: The unknown locale code

        Returns:
            Diagnostic for PARSE_LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_LOCALE_UNKNOWN,
            message=msg,
            hint="Use BCP 47 locale codes (e.g., 'en_US', 'de_DE', 'lv_LV')",
        )

    @staticmethod
    def parse_input_type(value: object) -> Diagnostic:
        """Non-string input to a parse function.

        Args:
            value: The rejected value

        Returns:
            Diagnostic for PARSE_INPUT_TYPE
        """
        msg = f"Expected str to parse, got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INPUT_TYPE,
            message=msg,
        )
