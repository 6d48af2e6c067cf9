"""
Text style records and the operations used to combine them.

A TextStyle holds optional typographic attributes.  An attribute set to None is
unspecified and is inherited from the style it is merged onto.
"""

from dataclasses import dataclass, fields
from enum import Enum, IntEnum, auto

from richtext.text_color import BLACK, TRANSPARENT, TextColor


class FontWeight(IntEnum):
    """Font weights, using the usual 100..900 numeric scale."""
    THIN = 100
    EXTRA_LIGHT = 200
    LIGHT = 300
    NORMAL = 400
    MEDIUM = 500
    SEMI_BOLD = 600
    BOLD = 700
    EXTRA_BOLD = 800
    BLACK = 900


class FontStyle(Enum):
    """Font slant."""
    NORMAL = auto()
    ITALIC = auto()


class TextDecoration(Enum):
    """Line decorations drawn with the text."""
    NONE = auto()
    UNDERLINE = auto()
    LINE_THROUGH = auto()


class LayoutDirection(Enum):
    """Direction in which content is laid out."""
    LTR = auto()
    RTL = auto()


@dataclass(frozen=True)
class TextStyle:
    """
    Typographic attributes for a run of text.

    Attributes:
        color: Foreground color
        font_size: Font size in sp
        font_weight: Font weight
        font_style: Font slant
        font_family: Font family name
        letter_spacing: Extra spacing between letters in sp
        background: Background color
        text_decoration: Line decoration
        text_direction: Direction for bidirectional text
    """
    color: TextColor | None = None
    font_size: float | None = None
    font_weight: FontWeight | None = None
    font_style: FontStyle | None = None
    font_family: str | None = None
    letter_spacing: float | None = None
    background: TextColor | None = None
    text_decoration: TextDecoration | None = None
    text_direction: LayoutDirection | None = None

    def merge(self, other: "TextStyle | None") -> "TextStyle":
        """
        Merge another style on top of this one.

        Every attribute specified by `other` replaces the one in this style; every
        attribute `other` leaves unspecified keeps this style's value.

        Args:
            other: The style to overlay, or None

        Returns:
            The merged style
        """
        if other is None:
            return self

        values = {}
        for f in fields(self):
            overlay = getattr(other, f.name)
            values[f.name] = overlay if overlay is not None else getattr(self, f.name)

        return TextStyle(**values)

    def specified(self) -> dict[str, object]:
        """Return the attributes of this style that are not None."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


DEFAULT_FONT_SIZE = 14.0
DEFAULT_FONT_FAMILY = "default"


def resolve_defaults(style: TextStyle, layout_direction: LayoutDirection) -> TextStyle:
    """
    Fill every unspecified attribute of a style with a fixed baseline.

    Args:
        style: The style to resolve
        layout_direction: Layout direction used when no text direction is set

    Returns:
        A style with every attribute specified
    """
    baseline = TextStyle(
        color=BLACK,
        font_size=DEFAULT_FONT_SIZE,
        font_weight=FontWeight.NORMAL,
        font_style=FontStyle.NORMAL,
        font_family=DEFAULT_FONT_FAMILY,
        letter_spacing=0.0,
        background=TRANSPARENT,
        text_decoration=TextDecoration.NONE,
        text_direction=layout_direction
    )
    return baseline.merge(style)
