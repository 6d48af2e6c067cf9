"""Shared fixtures for rich text tests."""

import os

import pytest

from richtext.rich_text_context import RichTextContext
from richtext.rich_text_theme import ColorMode, RichTextTheme
from richtext.text_color import TextColor


@pytest.fixture
def light_context():
    """Fixture providing a root context drawing on the light theme."""
    return RichTextContext.from_theme(RichTextTheme(ColorMode.LIGHT))


@pytest.fixture
def dark_context():
    """Fixture providing a root context drawing on the dark theme."""
    return RichTextContext.from_theme(RichTextTheme(ColorMode.DARK))


@pytest.fixture
def red():
    """Fixture providing an opaque red color."""
    return TextColor(1.0, 0.0, 0.0)


@pytest.fixture(scope="session")
def qt_app():
    """Fixture providing a QGuiApplication running on the offscreen platform."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    qt_gui = pytest.importorskip("PySide6.QtGui")

    app = qt_gui.QGuiApplication.instance()
    if app is None:
        app = qt_gui.QGuiApplication([])

    return app
