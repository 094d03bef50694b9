"""Diagnostic codes and data structures.

Defines error codes, categories, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "FrozenErrorContext",
]


class ErrorCategory(StrEnum):
    """Error categorization for numscope errors.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``; log aggregation receives
    plain strings (``"parse"``, ``"policy"``) rather than the
    ``"ErrorCategory.X"`` repr that a plain ``Enum`` would produce.

    Categories:
        POLICY: Invalid precision, sign, or abbreviation configuration
        LOCALE: Unknown locale or invalid currency code
        FORMATTING: Engine could not render a value
        PARSE: Display string could not be read back into a number
    """

    POLICY = "policy"
    LOCALE = "locale"
    FORMATTING = "formatting"
    PARSE = "parse"


@dataclass(frozen=True, slots=True)
class FrozenErrorContext:
    """Immutable context for parse/formatting errors.

    Attributes:
        input_value: String that failed to parse (empty if not applicable)
        locale_code: Locale used for parsing/formatting (empty if not applicable)
        parse_type: Type of parsing attempted (number, decimal)
    """

    input_value: str = ""
    locale_code: str = ""
    parse_type: str = ""


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Policy errors (precision, sign, abbreviation)
        2000-2999: Locale errors (locale lookup, currency codes)
        3000-3999: Formatting errors (engine rendering failures)
        4000-4999: Parsing errors (display string -> number)
    """

    # Policy errors (1000-1999)
    PRECISION_NEGATIVE = 1001
    PRECISION_BOUNDS_INVERTED = 1002
    SIGN_ZERO_LOCALIZED = 1003
    SIGN_CUSTOM_EMPTY = 1004
    ABBREVIATION_MAGNITUDE_INVALID = 1005
    ABBREVIATION_NOT_DESCENDING = 1006
    FRACTION_CEILING_NEGATIVE = 1007

    # Locale errors (2000-2999)
    LOCALE_UNKNOWN = 2001
    CURRENCY_CODE_INVALID = 2002

    # Formatting errors (3000-3999)
    FORMAT_VALUE_NOT_FINITE = 3001
    FORMAT_ENGINE_FAILED = 3002
    FORMAT_INPUT_TYPE = 3003

    # Parsing errors (4000-4999)
    PARSE_DECIMAL_FAILED = 4001
    PARSE_LOCALE_UNKNOWN = 4002
    PARSE_INPUT_TYPE = 4003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Control characters in the message are escaped so that values echoed
        from user input cannot forge extra log lines.

        Example output:
            error[PRECISION_BOUNDS_INVERTED]: Precision minimum 4 exceeds maximum 2
              = help: Use Precision.constant(n) for a fixed number of digits

        Returns:
            Formatted error message
        """
        message = self.message.replace("\r", "\\r").replace("\n", "\\n")
        lines = [f"{self.severity}[{self.code.name}]: {message}"]
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
