"""Formatting runtime: the Babel-backed engine and the policy pipeline over it.

Public API:
    NumberFormatter - abbreviation/sign/precision pipeline (main entry point)
    FormatterConfig - immutable formatter settings
    NumberEngine, EngineState - locale-bound engine and its state snapshot
    precision_scope, sign_scope, suffix_scope, zero_sign_scope - scoped mutation

Python 3.13+. Uses Babel for i18n.
"""

from .config import FormatterConfig
from .engine import EngineState, NumberEngine
from .formatter import NumberFormatter
from .scopes import precision_scope, sign_scope, suffix_scope, zero_sign_scope

__all__ = [
    "EngineState",
    "FormatterConfig",
    "NumberEngine",
    "NumberFormatter",
    "precision_scope",
    "sign_scope",
    "suffix_scope",
    "zero_sign_scope",
]
