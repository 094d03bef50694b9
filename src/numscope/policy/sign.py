"""Sign display policy.

A Sign picks what marks positive, negative, and zero values:
nothing, the locale's own glyph, or a custom literal such as an arrow.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from numscope.constants import ARROW_DOWN, ARROW_UP
from numscope.diagnostics import ErrorTemplate, PolicyError
from numscope.enums import SignStyleKind

__all__ = ["Sign", "SignStyle"]


@dataclass(frozen=True, slots=True)
class SignStyle:
    """Rendering of one sign slot.

    Use the constructors rather than building instances by hand.

    Attributes:
        kind: none, localized, or custom
        text: Literal marker for custom styles (empty otherwise)

    Example:
        >>> SignStyle.custom("=").text
        '='
    """

    kind: SignStyleKind
    text: str = ""

    def __post_init__(self) -> None:
        """Validate custom text.

        Raises:
            PolicyError: If a custom style has empty text.
        """
        if self.kind is SignStyleKind.CUSTOM and not self.text:
            raise PolicyError(ErrorTemplate.sign_custom_empty())

    @classmethod
    def none(cls) -> SignStyle:
        """No marker."""
        return cls(SignStyleKind.NONE)

    @classmethod
    def localized(cls) -> SignStyle:
        """The locale's plus or minus glyph."""
        return cls(SignStyleKind.LOCALIZED)

    @classmethod
    def custom(cls, text: str) -> SignStyle:
        """A literal marker such as ``"▲"``."""
        return cls(SignStyleKind.CUSTOM, text)

    def render(self, localized_glyph: str) -> str:
        """Text this style puts into a prefix slot.

        Args:
            localized_glyph: The engine's plus or minus sign for this slot

        Returns:
            "" for none, the glyph for localized, the literal for custom
        """
        match self.kind:
            case SignStyleKind.NONE:
                return ""
            case SignStyleKind.LOCALIZED:
                return localized_glyph
            case SignStyleKind.CUSTOM:
                return self.text


@dataclass(frozen=True, slots=True)
class Sign:
    """Immutable plus/minus/zero sign policy.

    The zero style is only consulted when the formatter has
    ``uses_sign_for_zero`` enabled; otherwise zero renders unsigned.

    Presets:
        Sign.DEFAULT: minus only, localized
        Sign.BOTH: plus and minus, localized
        Sign.ARROW: ▲ / ▼
        Sign.SPACED_ARROW: "▲ " / "▼ "
        Sign.NONE: no markers

    Attributes:
        plus: Style for positive values
        minus: Style for negative values
        zero: Style for zero (none or custom only)

    Raises:
        PolicyError: If zero is localized

    Example:
        >>> Sign(plus=SignStyle.custom("+"), minus=SignStyle.custom("-"),
        ...      zero=SignStyle.custom("=")).zero.text
        '='
    """

    plus: SignStyle = field(default_factory=SignStyle.none)
    minus: SignStyle = field(default_factory=SignStyle.localized)
    zero: SignStyle = field(default_factory=SignStyle.none)

    DEFAULT: ClassVar[Sign]
    BOTH: ClassVar[Sign]
    ARROW: ClassVar[Sign]
    SPACED_ARROW: ClassVar[Sign]
    NONE: ClassVar[Sign]

    def __post_init__(self) -> None:
        """Validate the zero style.

        Raises:
            PolicyError: If zero uses the localized style.
        """
        if self.zero.kind is SignStyleKind.LOCALIZED:
            raise PolicyError(ErrorTemplate.sign_zero_localized())


Sign.DEFAULT = Sign()
Sign.BOTH = Sign(plus=SignStyle.localized(), minus=SignStyle.localized())
Sign.ARROW = Sign(plus=SignStyle.custom(ARROW_UP), minus=SignStyle.custom(ARROW_DOWN))
Sign.SPACED_ARROW = Sign(
    plus=SignStyle.custom(f"{ARROW_UP} "),
    minus=SignStyle.custom(f"{ARROW_DOWN} "),
)
Sign.NONE = Sign(plus=SignStyle.none(), minus=SignStyle.none())
