"""Configuration for rich text elements."""

from dataclasses import dataclass

from richtext.heading_style import HeadingStyle, default_heading_style


DEFAULT_PARAGRAPH_SPACING = 8.0


@dataclass(frozen=True)
class RichTextStyle:
    """
    Style configuration for rich text elements.

    Attributes:
        heading_style: Function computing the style of each heading level
        paragraph_spacing: Vertical space between blocks in sp
    """
    heading_style: HeadingStyle | None = None
    paragraph_spacing: float | None = None

    def merge(self, other: "RichTextStyle | None") -> "RichTextStyle":
        """
        Merge another configuration on top of this one.

        Args:
            other: The configuration to overlay, or None

        Returns:
            The merged configuration
        """
        if other is None:
            return self

        return RichTextStyle(
            heading_style=other.heading_style if other.heading_style is not None else self.heading_style,
            paragraph_spacing=(
                other.paragraph_spacing if other.paragraph_spacing is not None else self.paragraph_spacing
            )
        )

    def resolve_defaults(self) -> "RichTextStyle":
        """Fill every unspecified setting with its default."""
        return RichTextStyle(
            heading_style=self.heading_style if self.heading_style is not None else default_heading_style,
            paragraph_spacing=(
                self.paragraph_spacing if self.paragraph_spacing is not None else DEFAULT_PARAGRAPH_SPACING
            )
        )
