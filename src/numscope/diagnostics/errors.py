"""numscope exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Configuration errors also subclass ValueError so callers that only know the
standard library can still catch them.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory, FrozenErrorContext

__all__ = [
    "FormattingError",
    "LocaleError",
    "NumScopeError",
    "ParseError",
    "PolicyError",
]


class NumScopeError(Exception):
    """Base exception for all numscope errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        category: Error category for log aggregation
    """

    category: ErrorCategory = ErrorCategory.POLICY

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize NumScopeError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class PolicyError(NumScopeError, ValueError):
    """Invalid Precision, Sign, Abbreviation, or formatter configuration.

    Raised at construction time so that a malformed policy never reaches
    the formatting pipeline.
    """

    category = ErrorCategory.POLICY


class LocaleError(NumScopeError, ValueError):
    """Unknown locale (strict mode) or malformed currency code."""

    category = ErrorCategory.LOCALE


class FormattingError(NumScopeError):
    """Raised when the engine cannot render a value.

    The formatting pipeline never lets this escape: it substitutes the
    formatter's invalid_value_string. Direct engine users calling
    NumberEngine.format_or_raise() receive it with a usable fallback.

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    category = ErrorCategory.FORMATTING

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value


class ParseError(NumScopeError):
    """Error during parsing of a locale-formatted number string.

    Never raised by the parsing API: instances are returned in the errors
    tuple of parse_decimal() / parse_number().

    Attributes:
        input_value: The string that failed to parse
        locale_code: The locale used for parsing
        parse_type: Type of parsing attempted ('number', 'decimal')

    Example:
        >>> result, errors = parse_decimal("invalid", "en_US")
        >>> for error in errors:
        ...     print(f"{error.input_value} ({error.parse_type})")
        invalid (decimal)
    """

    category = ErrorCategory.PARSE

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        context: FrozenErrorContext | None = None,
    ) -> None:
        """Initialize ParseError.

        Args:
            message: Error message string OR Diagnostic object
            context: Input value, locale, and parse type of the failed call
        """
        super().__init__(message)
        self.context = context if context is not None else FrozenErrorContext()

    @property
    def input_value(self) -> str:
        """The string that failed to parse."""
        return self.context.input_value

    @property
    def locale_code(self) -> str:
        """The locale used for parsing."""
        return self.context.locale_code

    @property
    def parse_type(self) -> str:
        """Type of parsing attempted."""
        return self.context.parse_type
