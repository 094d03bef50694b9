"""Scoped engine mutation.

Each scope saves the engine slots it touches, applies a temporary change,
and restores the saved values when the block exits, whether normally or by
exception. Scopes nest: an inner scope saves the outer scope's values and
hands them back on exit.

    with sign_scope(engine, Sign.ARROW), precision_scope(engine, (2, 2)):
        engine.format(Decimal("-4.2"))   # "▼4.20"

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

    from numscope.policy import Sign, SignStyle

    from .engine import NumberEngine

__all__ = ["precision_scope", "sign_scope", "suffix_scope", "zero_sign_scope"]


def _apply_marker(prefix: str, glyph: str, marker: str) -> str:
    """Swap every occurrence of the locale glyph in a prefix for ``marker``.

    A prefix without the glyph (e.g. "$" for positive values) gets the marker
    prepended instead.
    """
    if glyph and glyph in prefix:
        return prefix.replace(glyph, marker)
    return f"{marker}{prefix}"


@contextmanager
def sign_scope(engine: NumberEngine, sign: Sign) -> Generator[None]:
    """Render the plus/minus markers of ``sign`` for the duration of the block.

    Only the glyph portion of each prefix changes; currency symbols and other
    affix text stay in place: "-$" becomes "▼$" under Sign.ARROW.
    """
    saved_positive = engine.positive_prefix
    saved_negative = engine.negative_prefix
    try:
        engine.positive_prefix = _apply_marker(
            saved_positive, engine.plus_sign, sign.plus.render(engine.plus_sign)
        )
        engine.negative_prefix = _apply_marker(
            saved_negative, engine.minus_sign, sign.minus.render(engine.minus_sign)
        )
        yield
    finally:
        engine.positive_prefix = saved_positive
        engine.negative_prefix = saved_negative


@contextmanager
def zero_sign_scope(engine: NumberEngine, style: SignStyle) -> Generator[None]:
    """Prepend the zero marker to the positive prefix for the duration of the block."""
    saved = engine.positive_prefix
    try:
        engine.positive_prefix = f"{style.render('')}{saved}"
        yield
    finally:
        engine.positive_prefix = saved


@contextmanager
def precision_scope(engine: NumberEngine, bounds: tuple[int, int]) -> Generator[None]:
    """Set (minimum, maximum) fraction digits for the duration of the block.

    ``bounds`` is usually the result of numscope.policy.resolve_precision().
    """
    saved = (engine.minimum_fraction_digits, engine.maximum_fraction_digits)
    try:
        engine.minimum_fraction_digits, engine.maximum_fraction_digits = bounds
        yield
    finally:
        engine.minimum_fraction_digits, engine.maximum_fraction_digits = saved


@contextmanager
def suffix_scope(engine: NumberEngine, suffix: str) -> Generator[None]:
    """Prepend an abbreviation suffix to both engine suffixes.

    Prepending keeps any locale suffix outermost: "12,5 %" style layouts
    become "1,43k %" rather than "1,43 %k".
    """
    saved_positive = engine.positive_suffix
    saved_negative = engine.negative_suffix
    try:
        engine.positive_suffix = f"{suffix}{saved_positive}"
        engine.negative_suffix = f"{suffix}{saved_negative}"
        yield
    finally:
        engine.positive_suffix = saved_positive
        engine.negative_suffix = saved_negative
