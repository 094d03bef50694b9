"""Diagnostic system for numscope errors.

Provides structured error diagnostics with codes, categories, and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, FrozenErrorContext
from .errors import (
    FormattingError,
    LocaleError,
    NumScopeError,
    ParseError,
    PolicyError,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "ErrorTemplate",
    "FormattingError",
    "FrozenErrorContext",
    "LocaleError",
    "NumScopeError",
    "ParseError",
    "PolicyError",
]
