"""
Heading style strategies.

A heading style computes the TextStyle for a heading level, given the fully
resolved TextStyle at the point where the heading is rendered.  The returned
style is merged onto the resolved one, so anything it leaves unspecified is
inherited.
"""

from typing import Callable

from richtext.richtext_exceptions import InvalidArgumentError
from richtext.text_color import TextColor
from richtext.text_style import FontStyle, FontWeight, TextStyle


HeadingStyle = Callable[[int, TextStyle], TextStyle]


def validate_heading_level(level: int) -> None:
    """
    Check that a heading level is usable.

    Args:
        level: The heading level, 0 being the most important

    Raises:
        InvalidArgumentError: If the level is negative
    """
    if level < 0:
        raise InvalidArgumentError("Level must be at least 0", {"level": level})


def _fade(color: TextColor | None, factor: float) -> TextColor | None:
    if color is None:
        return None

    return color.copy(alpha=color.alpha * factor)


def default_heading_style(level: int, text_style: TextStyle) -> TextStyle:
    """
    Compute the default style overrides for a heading level.

    Levels 0 to 5 have their own sizes and emphasis.  Deeper levels get no
    overrides and `text_style` is returned unchanged.

    Args:
        level: The heading level, 0 being the most important
        text_style: The resolved text style the heading is rendered with

    Returns:
        The style to merge onto `text_style`

    Raises:
        InvalidArgumentError: If the level is negative
    """
    validate_heading_level(level)

    if level == 0:
        return TextStyle(font_size=36.0, font_weight=FontWeight.BOLD)

    if level == 1:
        return TextStyle(font_size=26.0, font_weight=FontWeight.BOLD)

    if level == 2:
        return TextStyle(font_size=22.0, font_weight=FontWeight.BOLD, color=_fade(text_style.color, 0.7))

    if level == 3:
        return TextStyle(font_size=20.0, font_weight=FontWeight.BOLD, font_style=FontStyle.ITALIC)

    if level == 4:
        return TextStyle(font_size=18.0, font_weight=FontWeight.BOLD, color=_fade(text_style.color, 0.7))

    if level == 5:
        return TextStyle(font_weight=FontWeight.BOLD, color=_fade(text_style.color, 0.5))

    return text_style
