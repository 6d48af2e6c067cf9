"""
Render tree visitor to render rich text content directly to a QTextDocument.
"""

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QFont, QTextBlockFormat, QTextCharFormat, QTextCursor, QTextDocument

from richtext.rich_text_node import RichTextDocumentNode, RichTextHeadingNode, RichTextTextNode, RichTextVisitor
from richtext.text_color import TextColor
from richtext.text_style import FontStyle, LayoutDirection, TextDecoration, TextStyle


def text_color_to_qcolor(color: TextColor) -> QColor:
    """Convert a text color to a QColor."""
    return QColor.fromRgbF(color.red, color.green, color.blue, color.alpha)


def text_style_to_char_format(text_style: TextStyle, base: QTextCharFormat | None = None) -> QTextCharFormat:
    """
    Convert a text style to a QTextCharFormat.

    Only the attributes the style specifies are set; everything else is left as
    it is in `base`.

    Args:
        text_style: The style to convert
        base: Optional format to start from

    Returns:
        The character format
    """
    char_format = QTextCharFormat(base) if base is not None else QTextCharFormat()

    if text_style.color is not None:
        char_format.setForeground(text_color_to_qcolor(text_style.color))

    if text_style.background is not None and text_style.background.alpha > 0:
        char_format.setBackground(text_color_to_qcolor(text_style.background))

    if text_style.font_size is not None:
        char_format.setFontPointSize(text_style.font_size)

    if text_style.font_weight is not None:
        char_format.setFontWeight(QFont.Weight(int(text_style.font_weight)))

    if text_style.font_style is not None:
        char_format.setFontItalic(text_style.font_style == FontStyle.ITALIC)

    if text_style.font_family is not None and text_style.font_family != "default":
        char_format.setFontFamilies([text_style.font_family])

    if text_style.letter_spacing is not None:
        char_format.setFontLetterSpacingType(QFont.SpacingType.AbsoluteSpacing)
        char_format.setFontLetterSpacing(text_style.letter_spacing)

    if text_style.text_decoration is not None:
        char_format.setFontUnderline(text_style.text_decoration == TextDecoration.UNDERLINE)
        char_format.setFontStrikeOut(text_style.text_decoration == TextDecoration.LINE_THROUGH)

    return char_format


class RichTextQtRenderer(RichTextVisitor):
    """Visitor that renders a render tree directly to a QTextDocument."""

    def __init__(self, document: QTextDocument) -> None:
        """
        Initialize the document renderer.

        Args:
            document: The QTextDocument to render into
        """
        super().__init__()
        self._logger = logging.getLogger("RichTextQtRenderer")

        self._document = document
        self._cursor = QTextCursor(document)
        self._cursor.movePosition(QTextCursor.MoveOperation.Start)
        self._orig_block_format = self._cursor.blockFormat()

    def visit_RichTextDocumentNode(self, node: RichTextDocumentNode) -> None:  # pylint: disable=invalid-name
        """
        Render a document node to the QTextDocument.

        Args:
            node: The document node to render
        """
        # Treat this entire operation as one "edit" so Qt doesn't attempt to
        # render as we're adding things.
        cursor = self._cursor
        cursor.beginEditBlock()

        cursor.select(QTextCursor.SelectionType.Document)
        cursor.removeSelectedText()
        cursor.setBlockFormat(self._orig_block_format)

        if node.background is not None:
            root_frame = self._document.rootFrame()
            frame_format = root_frame.frameFormat()
            frame_format.setBackground(text_color_to_qcolor(node.background))
            root_frame.setFrameFormat(frame_format)

        for child in node.children:
            self.visit(child)

        # If our last block is empty then delete it
        if cursor.block().text() == "" and cursor.block().previous().isValid():
            cursor.movePosition(QTextCursor.MoveOperation.PreviousBlock)
            cursor.movePosition(QTextCursor.MoveOperation.EndOfBlock)
            cursor.movePosition(QTextCursor.MoveOperation.End, QTextCursor.MoveMode.KeepAnchor)
            cursor.removeSelectedText()

        cursor.endEditBlock()
        self._logger.debug("rendered %d blocks", self._document.blockCount())

    def visit_RichTextHeadingNode(self, node: RichTextHeadingNode) -> None:  # pylint: disable=invalid-name
        """
        Render a heading node to the QTextDocument.

        Args:
            node: The heading node to render
        """
        orig_block_format = self._cursor.blockFormat()
        orig_char_format = self._cursor.charFormat()

        # Qt only knows heading levels 1 to 6
        block_format = QTextBlockFormat()
        block_format.setHeadingLevel(min(node.level + 1, 6))
        if node.previous_sibling() is not None:
            block_format.setTopMargin(node.spacing)

        block_format.setBottomMargin(node.spacing)
        if node.text_style.text_direction == LayoutDirection.RTL:
            block_format.setLayoutDirection(Qt.LayoutDirection.RightToLeft)

        self._cursor.setBlockFormat(block_format)
        self._cursor.setCharFormat(text_style_to_char_format(node.text_style, orig_char_format))

        for child in node.children:
            self.visit(child)

        self._cursor.setCharFormat(orig_char_format)

        if not self._cursor.atBlockStart():
            self._cursor.insertBlock()

        self._cursor.setBlockFormat(orig_block_format)

    def visit_RichTextTextNode(self, node: RichTextTextNode) -> None:  # pylint: disable=invalid-name
        """
        Render a text node to the QTextDocument.

        Args:
            node: The text node to render
        """
        if not node.content:
            return

        self._cursor.insertText(node.content, text_style_to_char_format(node.text_style, self._cursor.charFormat()))
