"""Text style resolution for section headings."""

import logging

from richtext.heading_style import validate_heading_level
from richtext.rich_text_context import RichTextContext
from richtext.text_style import TextStyle


logger = logging.getLogger("Heading")


def heading_text_style(context: RichTextContext, level: int) -> TextStyle:
    """
    Compute the text style a heading provides to its children.

    The current text style is resolved (using the content color when it has no
    color of its own), passed to the configured heading style function, and
    the result merged back onto it.

    Args:
        context: The context the heading is rendered in
        level: The heading level, 0 being the most important

    Returns:
        The merged text style for the heading's content

    Raises:
        InvalidArgumentError: If the level is negative
    """
    validate_heading_level(level)

    rich_text_style = context.rich_text_style.resolve_defaults()
    heading_style_function = rich_text_style.heading_style
    assert heading_style_function is not None

    current_text_style = context.resolved_text_style()
    heading_style = heading_style_function(level, current_text_style)
    merged = current_text_style.merge(heading_style)

    if heading_style is not current_text_style and logger.isEnabledFor(logging.DEBUG):
        logger.debug("heading level %d overrides %s", level, heading_style.specified())

    return merged
