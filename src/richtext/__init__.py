"""
Rich text styling.

This package provides text styles, the heading element and its configurable
style table, and renderers turning rich text content into HTML or a Qt text
document.
"""

__version__ = "0.1"

from richtext.heading import heading_text_style
from richtext.heading_style import HeadingStyle, default_heading_style, validate_heading_level
from richtext.rich_text_context import RichTextContext
from richtext.rich_text_html_renderer import RichTextHTMLRenderer, text_style_to_css
from richtext.rich_text_node import (
    RichTextDocumentNode,
    RichTextHeadingNode,
    RichTextNode,
    RichTextTextNode,
    RichTextVisitor,
)
from richtext.rich_text_scope import RichTextContent, RichTextScope, render_rich_text
from richtext.rich_text_settings import RichTextSettings
from richtext.rich_text_style import RichTextStyle
from richtext.rich_text_theme import ColorMode, ColorRole, RichTextTheme
from richtext.richtext_exceptions import InvalidArgumentError, RichTextError, RichTextSettingsError
from richtext.text_color import BLACK, TRANSPARENT, WHITE, TextColor
from richtext.text_style import (
    FontStyle,
    FontWeight,
    LayoutDirection,
    TextDecoration,
    TextStyle,
    resolve_defaults,
)

__all__ = [
    # Exceptions
    'RichTextError',
    'InvalidArgumentError',
    'RichTextSettingsError',
    # Styles
    'TextColor',
    'BLACK',
    'WHITE',
    'TRANSPARENT',
    'TextStyle',
    'FontStyle',
    'FontWeight',
    'TextDecoration',
    'LayoutDirection',
    'resolve_defaults',
    'HeadingStyle',
    'default_heading_style',
    'validate_heading_level',
    'RichTextStyle',
    # Themes and settings
    'ColorMode',
    'ColorRole',
    'RichTextTheme',
    'RichTextSettings',
    # Composition
    'RichTextContext',
    'RichTextContent',
    'RichTextScope',
    'render_rich_text',
    'heading_text_style',
    # Render tree
    'RichTextNode',
    'RichTextVisitor',
    'RichTextDocumentNode',
    'RichTextHeadingNode',
    'RichTextTextNode',
    'RichTextHTMLRenderer',
    'text_style_to_css',
]
