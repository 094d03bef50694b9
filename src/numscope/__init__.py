"""numscope - locale-aware number display with abbreviation, sign, and precision policies.

Formats numbers for display the way dashboards and financial UIs need them
(48.73M, -$4.24k, ▲$123.46) on top of CLDR locale data, and parses display
strings back to Decimal.

Public API:
    NumberFormatter - Formatting pipeline (decimal, percent, currency factories)
    FormatterConfig - Immutable formatter settings
    Precision - Fraction-digit bounds
    Sign, SignStyle - Plus/minus/zero markers
    Abbreviation, Threshold - Magnitude suffix tables
    NumberStyle - Engine style enum

Exceptions:
    NumScopeError - Base exception class
    PolicyError - Invalid policy construction
    LocaleError - Unknown locale (strict mode) or malformed currency code
    FormattingError - Engine-level formatting failure
    ParseError - Parse failure (returned, never raised, by parse functions)

Submodules:
    numscope.runtime - NumberEngine, EngineState, and scoped mutation helpers
    numscope.parsing - parse_decimal, parse_number, and type guards
    numscope.diagnostics - Diagnostic codes and error templates
"""

from .diagnostics import (
    FormattingError,
    LocaleError,
    NumScopeError,
    ParseError,
    PolicyError,
)
from .enums import NumberStyle
from .policy import Abbreviation, Precision, Sign, SignStyle, Threshold
from .runtime import FormatterConfig, NumberFormatter

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("numscope")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Abbreviation",
    "FormatterConfig",
    "FormattingError",
    "LocaleError",
    "NumScopeError",
    "NumberFormatter",
    "NumberStyle",
    "ParseError",
    "PolicyError",
    "Precision",
    "Sign",
    "SignStyle",
    "Threshold",
    "__version__",
]
