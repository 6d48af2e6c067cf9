"""
Tests for rendering render trees as HTML.
"""
from dataclasses import replace

from richtext.rich_text_html_renderer import RichTextHTMLRenderer, text_style_to_css
from richtext.rich_text_node import RichTextDocumentNode
from richtext.rich_text_scope import render_rich_text
from richtext.text_color import TextColor
from richtext.text_style import FontStyle, FontWeight, LayoutDirection, TextDecoration, TextStyle


def test_css_only_includes_specified_attributes():
    """Test unspecified attributes produce no declarations."""
    assert text_style_to_css(TextStyle()) == ""
    assert text_style_to_css(TextStyle(font_size=22.0, font_weight=FontWeight.BOLD)) == (
        "font-size: 22px; font-weight: 700"
    )


def test_css_full_style():
    """Test converting a style with colors, slant and decoration."""
    style = TextStyle(
        color=TextColor(0.0, 0.0, 0.0, 0.7),
        font_style=FontStyle.ITALIC,
        font_family="serif",
        letter_spacing=1.5,
        text_decoration=TextDecoration.UNDERLINE
    )

    assert text_style_to_css(style) == (
        "color: rgba(0, 0, 0, 0.7); font-style: italic; font-family: \"serif\"; "
        "letter-spacing: 1.5px; text-decoration: underline"
    )


def test_css_skips_defaults():
    """Test the default family, transparent background and zero spacing are omitted."""
    style = TextStyle(
        font_family="default",
        background=TextColor(0.0, 0.0, 0.0, 0.0),
        letter_spacing=0.0,
        text_decoration=TextDecoration.NONE
    )

    assert text_style_to_css(style) == ""


def test_render_empty_document():
    """Test a document without background renders a plain div."""
    assert RichTextHTMLRenderer().visit(RichTextDocumentNode()) == "<div></div>"


def test_render_heading(light_context):
    """Test a heading renders with its merged style and level."""
    document = render_rich_text(light_context, lambda scope: scope.heading(2, "Section"))
    html_text = RichTextHTMLRenderer().visit(document)

    assert html_text.startswith("<div style=\"background-color: rgba(255, 255, 255, 1)\">")
    assert "role=\"heading\" aria-level=\"3\" dir=\"ltr\"" in html_text
    assert "margin: 8px 0" in html_text
    assert "color: rgba(0, 0, 0, 0.7)" in html_text
    assert "font-size: 22px" in html_text
    assert "font-weight: 700" in html_text
    assert ">Section</span>" in html_text


def test_render_escapes_text(light_context):
    """Test text content is HTML-escaped."""
    document = render_rich_text(light_context, lambda scope: scope.heading(0, "<b>&</b>"))
    html_text = RichTextHTMLRenderer().visit(document)

    assert "&lt;b&gt;&amp;&lt;/b&gt;" in html_text
    assert "<b>" not in html_text


def test_render_rtl_heading(light_context):
    """Test right-to-left layout reaches the rendered heading."""
    context = replace(light_context, layout_direction=LayoutDirection.RTL)
    html_text = RichTextHTMLRenderer().visit(render_rich_text(context, lambda scope: scope.heading(0, "x")))

    assert "dir=\"rtl\"" in html_text


def test_css_font_family_is_quoted():
    """Test a font family cannot add declarations of its own."""
    css = text_style_to_css(TextStyle(font_family="serif; color: red"))

    assert css == "font-family: \"serif; color: red\""


def test_css_font_family_escapes_quotes_and_backslashes():
    """Test quotes and backslashes in a font family are escaped."""
    css = text_style_to_css(TextStyle(font_family="a\"b\\c"))

    assert css == "font-family: \"a\\\"b\\\\c\""


def test_render_font_family_in_attribute(light_context):
    """Test a quoted font family stays inside the style attribute."""
    context = light_context.provide_text_style(TextStyle(font_family="x\" onclick=\"alert(1)"))
    html_text = RichTextHTMLRenderer().visit(render_rich_text(context, lambda scope: scope.text("t")))

    assert "onclick=\"" not in html_text
    assert "font-family: &quot;x\\&quot; onclick=\\&quot;alert(1)&quot;" in html_text
