"""
Context threaded down a rich text render tree.

Each element sees the context of its nearest ancestor.  Elements that change
a value (for example a heading providing its text style) create a child
context for their descendants and never modify the one they were given.
"""

from dataclasses import dataclass, field, replace

from richtext.rich_text_settings import RichTextSettings
from richtext.rich_text_style import RichTextStyle
from richtext.rich_text_theme import RichTextTheme
from richtext.text_color import TextColor
from richtext.text_style import LayoutDirection, TextStyle, resolve_defaults


@dataclass(frozen=True)
class RichTextContext:
    """
    Values inherited by every element in a rich text render tree.

    Attributes:
        text_style: The current text style, possibly with unspecified attributes
        content_color: Color for content that has no explicit color
        rich_text_style: Rich text element configuration
        layout_direction: Direction content is laid out in
        theme: The theme the content is drawn with, if any
    """
    text_style: TextStyle = field(default_factory=TextStyle)
    content_color: TextColor | None = None
    rich_text_style: RichTextStyle = field(default_factory=RichTextStyle)
    layout_direction: LayoutDirection = LayoutDirection.LTR
    theme: RichTextTheme | None = None

    @classmethod
    def from_theme(cls, theme: RichTextTheme, **kwargs) -> "RichTextContext":
        """
        Create a root context whose content color comes from a theme.

        Args:
            theme: The theme to draw content with
            **kwargs: Other context values

        Returns:
            The new context
        """
        return cls(content_color=theme.content_color(), theme=theme, **kwargs)

    @classmethod
    def from_settings(cls, settings: RichTextSettings, **kwargs) -> "RichTextContext":
        """
        Create a root context from rendering settings.

        Args:
            settings: Settings providing the theme and base font
            **kwargs: Other context values

        Returns:
            The new context
        """
        text_style = TextStyle(font_size=settings.font_size, font_family=settings.font_family)
        return cls.from_theme(RichTextTheme(settings.theme), text_style=text_style, **kwargs)

    def provide_text_style(self, text_style: TextStyle) -> "RichTextContext":
        """Create a child context whose text style is `text_style` merged onto the current one."""
        return replace(self, text_style=self.text_style.merge(text_style))

    def provide_content_color(self, content_color: TextColor) -> "RichTextContext":
        """Create a child context with a different content color."""
        return replace(self, content_color=content_color)

    def provide_rich_text_style(self, rich_text_style: RichTextStyle) -> "RichTextContext":
        """Create a child context whose configuration is `rich_text_style` merged onto the current one."""
        return replace(self, rich_text_style=self.rich_text_style.merge(rich_text_style))

    def resolved_text_style(self) -> TextStyle:
        """
        Resolve the current text style so every attribute is specified.

        If the current style has no color, the content color is used before the
        remaining defaults are filled in, so text adapts to the background it is
        drawn on instead of picking up the fixed default color.

        Returns:
            The fully resolved text style
        """
        incoming = self.text_style
        if incoming.color is None and self.content_color is not None:
            incoming = replace(incoming, color=self.content_color)

        return resolve_defaults(incoming, self.layout_direction)
