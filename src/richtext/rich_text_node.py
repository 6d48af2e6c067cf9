"""
Render tree nodes for rich text content.

A render tree records what was emitted by rich text elements, with the
styles already resolved, so renderers only need to translate each node.
"""

from typing import Any, List

from richtext.text_color import TextColor
from richtext.text_style import TextStyle


class RichTextNode:
    """Base class for all rich text render tree nodes."""

    def __init__(self) -> None:
        """Initialize a node with an empty children list and no parent."""
        self.parent: RichTextNode | None = None
        self.children: List[RichTextNode] = []

    def add_child(self, child: "RichTextNode") -> "RichTextNode":
        """
        Add a child node to this node.

        Args:
            child: The child node to add

        Returns:
            The added child node for method chaining
        """
        child.parent = self
        self.children.append(child)
        return child

    def previous_sibling(self) -> "RichTextNode | None":
        """
        Get the previous sibling of this node, if any.

        Returns:
            The previous sibling node, or None if this is the first child or has no parent
        """
        if self.parent is None:
            return None

        index = self.parent.children.index(self)
        if index > 0:
            return self.parent.children[index - 1]

        return None


class RichTextVisitor:
    """Base visitor class for render tree traversal."""

    def visit(self, node: RichTextNode) -> Any:
        """
        Visit a node and dispatch to the appropriate visit method.

        Args:
            node: The node to visit

        Returns:
            The result of visiting the node
        """
        method_name = f'visit_{node.__class__.__name__}'
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: RichTextNode) -> List[Any]:
        """
        Default visit method for nodes without specific handlers.

        Args:
            node: The node to visit

        Returns:
            A list of results from visiting each child
        """
        return [self.visit(child) for child in node.children]


class RichTextDocumentNode(RichTextNode):
    """Root node of a render tree."""

    def __init__(self, background: TextColor | None = None) -> None:
        """
        Initialize a document node.

        Args:
            background: Color the document is drawn on, if any
        """
        super().__init__()
        self.background = background


class RichTextHeadingNode(RichTextNode):
    """Node representing a section heading."""

    def __init__(self, level: int, text_style: TextStyle, spacing: float) -> None:
        """
        Initialize a heading node.

        Args:
            level: The heading level, 0 being the most important
            text_style: The merged style provided to the heading's children
            spacing: Vertical space around the heading in sp
        """
        super().__init__()
        self.level = level
        self.text_style = text_style
        self.spacing = spacing


class RichTextTextNode(RichTextNode):
    """Node representing a run of text."""

    def __init__(self, content: str, text_style: TextStyle) -> None:
        """
        Initialize a text node.

        Args:
            content: The text content
            text_style: The fully resolved style to draw the text with
        """
        super().__init__()
        self.content = content
        self.text_style = text_style
