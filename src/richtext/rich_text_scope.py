"""
Builder API for rich text content.

Content is described by calling element methods on a RichTextScope.  Elements
that contain other content take a callable that receives a child scope, whose
context carries whatever the element provides to its descendants.
"""

import logging
from typing import Callable

from richtext.heading import heading_text_style
from richtext.rich_text_context import RichTextContext
from richtext.rich_text_node import RichTextDocumentNode, RichTextHeadingNode, RichTextNode, RichTextTextNode


RichTextContent = Callable[["RichTextScope"], None]


class RichTextScope:
    """
    Emits rich text elements into a render tree node.

    Args:
        context: The context elements in this scope are rendered in
        node: The render tree node elements are added to
    """

    def __init__(self, context: RichTextContext, node: RichTextNode) -> None:
        self._logger = logging.getLogger("RichTextScope")
        self._context = context
        self._node = node

    @property
    def context(self) -> RichTextContext:
        """The context for elements in this scope."""
        return self._context

    @property
    def node(self) -> RichTextNode:
        """The render tree node this scope adds to."""
        return self._node

    def child_scope(self, context: RichTextContext, node: RichTextNode) -> "RichTextScope":
        """
        Add a node to this scope and create a scope for its content.

        Args:
            context: The context for the node's content
            node: The node to add

        Returns:
            A scope emitting into `node`
        """
        self._node.add_child(node)
        return RichTextScope(context, node)

    def text(self, text: str) -> RichTextTextNode:
        """
        Emit a run of text in the current text style.

        Args:
            text: The text to emit

        Returns:
            The added text node
        """
        node = RichTextTextNode(text, self._context.resolved_text_style())
        self._node.add_child(node)
        return node

    def heading(self, level: int, content: str | RichTextContent) -> RichTextHeadingNode:
        """
        Emit a section heading.

        Args:
            level: The non-negative rank of the heading, 0 being the most important
            content: Either plain text for the heading, or a callable emitting the
                heading's content into the scope it is passed

        Returns:
            The added heading node

        Raises:
            InvalidArgumentError: If the level is negative
        """
        text_style = heading_text_style(self._context, level)
        spacing = self._context.rich_text_style.resolve_defaults().paragraph_spacing
        assert spacing is not None

        node = RichTextHeadingNode(level, text_style, spacing)
        scope = self.child_scope(self._context.provide_text_style(text_style), node)

        if isinstance(content, str):
            scope.text(content)

        else:
            content(scope)

        self._logger.debug("emitted heading level %d with %d children", level, len(node.children))
        return node


def render_rich_text(context: RichTextContext, content: RichTextContent) -> RichTextDocumentNode:
    """
    Build a render tree for some rich text content.

    Args:
        context: The root context for the content
        content: Callable emitting the content into the scope it is passed

    Returns:
        The document node holding the emitted content
    """
    background = context.theme.background_color() if context.theme is not None else None
    document = RichTextDocumentNode(background)
    content(RichTextScope(context, document))
    return document
