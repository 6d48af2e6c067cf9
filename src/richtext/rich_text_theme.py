"""Color themes for rich text content."""

from enum import Enum, auto
from typing import Dict

from richtext.text_color import TextColor


class ColorMode(Enum):
    """Enumeration for color theme modes."""
    LIGHT = auto()
    DARK = auto()


class ColorRole(Enum):
    """Enumeration of color roles used by rich text content."""
    BACKGROUND_PRIMARY = auto()         # Background the content is drawn on
    TEXT_PRIMARY = auto()               # Default content color
    TEXT_BRIGHT = auto()                # Emphasized text color
    TEXT_DISABLED = auto()              # Disabled text color
    TEXT_LINK = auto()                  # Link text color
    CODE_BACKGROUND = auto()            # Code block background


class RichTextTheme:
    """
    Colors for each color role in one color mode.

    Args:
        color_mode: The light or dark color mode
        overrides: Optional hex colors replacing the built-in ones for some roles
    """

    def __init__(self, color_mode: ColorMode = ColorMode.DARK, overrides: Dict[ColorRole, str] | None = None) -> None:
        self._color_mode = color_mode
        self._colors: Dict[ColorRole, Dict[ColorMode, str]] = self._initialize_colors()
        self._overrides: Dict[ColorRole, str] = dict(overrides) if overrides else {}

    def _initialize_colors(self) -> Dict[ColorRole, Dict[ColorMode, str]]:
        """Initialize the colours for both light and dark modes."""
        return {
            ColorRole.BACKGROUND_PRIMARY: {
                ColorMode.DARK: "#000000",
                ColorMode.LIGHT: "#ffffff"
            },
            ColorRole.TEXT_PRIMARY: {
                ColorMode.DARK: "#ffffff",
                ColorMode.LIGHT: "#000000"
            },
            ColorRole.TEXT_BRIGHT: {
                ColorMode.DARK: "#ffffff",
                ColorMode.LIGHT: "#000000"
            },
            ColorRole.TEXT_DISABLED: {
                ColorMode.DARK: "#707070",
                ColorMode.LIGHT: "#909090"
            },
            ColorRole.TEXT_LINK: {
                ColorMode.DARK: "#80a0ff",
                ColorMode.LIGHT: "#0000ff"
            },
            ColorRole.CODE_BACKGROUND: {
                ColorMode.DARK: "#141414",
                ColorMode.LIGHT: "#ececec"
            },
        }

    @property
    def color_mode(self) -> ColorMode:
        """The color mode of this theme."""
        return self._color_mode

    def get_color_str(self, role: ColorRole) -> str:
        """
        Get the hex color string for a role.

        Args:
            role: The color role to look up

        Returns:
            The "#rrggbb" color string for the role in this theme's color mode
        """
        if role in self._overrides:
            return self._overrides[role]

        return self._colors[role][self._color_mode]

    def get_color(self, role: ColorRole) -> TextColor:
        """
        Get the color for a role.

        Args:
            role: The color role to look up

        Returns:
            The color for the role in this theme's color mode
        """
        return TextColor.from_hex(self.get_color_str(role))

    def content_color(self) -> TextColor:
        """The color that content drawn on this theme's background should use."""
        return self.get_color(ColorRole.TEXT_PRIMARY)

    def background_color(self) -> TextColor:
        """The background color content is drawn on."""
        return self.get_color(ColorRole.BACKGROUND_PRIMARY)
