"""
Render tree visitor to render rich text content as HTML.
"""

import html
from typing import List

from richtext.rich_text_node import RichTextDocumentNode, RichTextHeadingNode, RichTextTextNode, RichTextVisitor
from richtext.text_style import FontStyle, LayoutDirection, TextDecoration, TextStyle


def _css_string(value: str) -> str:
    """Quote a value as a CSS string."""
    escaped = value.replace("\\", "\\\\").replace("\"", "\\\"").replace("\n", "\\a ")
    return f"\"{escaped}\""


def text_style_to_css(text_style: TextStyle) -> str:
    """
    Convert a text style to inline CSS declarations.

    Only the attributes the style specifies are included.

    Args:
        text_style: The style to convert

    Returns:
        The CSS declarations, separated by semicolons
    """
    declarations: List[str] = []

    if text_style.color is not None:
        declarations.append(f"color: {text_style.color.to_css()}")

    if text_style.background is not None and text_style.background.alpha > 0:
        declarations.append(f"background-color: {text_style.background.to_css()}")

    if text_style.font_size is not None:
        declarations.append(f"font-size: {text_style.font_size:g}px")

    if text_style.font_weight is not None:
        declarations.append(f"font-weight: {int(text_style.font_weight)}")

    if text_style.font_style is not None:
        declarations.append(f"font-style: {'italic' if text_style.font_style == FontStyle.ITALIC else 'normal'}")

    if text_style.font_family is not None and text_style.font_family != "default":
        declarations.append(f"font-family: {_css_string(text_style.font_family)}")

    if text_style.letter_spacing:
        declarations.append(f"letter-spacing: {text_style.letter_spacing:g}px")

    if text_style.text_decoration == TextDecoration.UNDERLINE:
        declarations.append("text-decoration: underline")

    elif text_style.text_decoration == TextDecoration.LINE_THROUGH:
        declarations.append("text-decoration: line-through")

    return "; ".join(declarations)


class RichTextHTMLRenderer(RichTextVisitor):
    """Visitor that renders a render tree as HTML."""

    def visit_RichTextDocumentNode(self, node: RichTextDocumentNode) -> str:  # pylint: disable=invalid-name
        """
        Render a document node to HTML.

        Args:
            node: The document node to render

        Returns:
            The HTML string representation of the document
        """
        inner_html = "".join(self.visit(child) for child in node.children)
        if node.background is None:
            return f"<div>{inner_html}</div>"

        return f"<div style=\"background-color: {node.background.to_css()}\">{inner_html}</div>"

    def visit_RichTextHeadingNode(self, node: RichTextHeadingNode) -> str:  # pylint: disable=invalid-name
        """
        Render a heading node to HTML.

        Args:
            node: The heading node to render

        Returns:
            The HTML string representation of the heading
        """
        inner_html = "".join(self.visit(child) for child in node.children)

        # Levels are 0-based and unbounded, HTML only has <h1> to <h6>
        aria_level = node.level + 1
        direction = "rtl" if node.text_style.text_direction == LayoutDirection.RTL else "ltr"
        return (
            f"<div role=\"heading\" aria-level=\"{aria_level}\" dir=\"{direction}\" "
            f"style=\"margin: {node.spacing:g}px 0\">{inner_html}</div>"
        )

    def visit_RichTextTextNode(self, node: RichTextTextNode) -> str:  # pylint: disable=invalid-name
        """
        Render a text node to HTML.

        Args:
            node: The text node to render

        Returns:
            The escaped text wrapped in a styled span
        """
        return f"<span style=\"{html.escape(text_style_to_css(node.text_style))}\">{html.escape(node.content)}</span>"
