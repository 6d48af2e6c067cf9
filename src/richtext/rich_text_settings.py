"""Settings module for storing rich text rendering preferences."""

from dataclasses import dataclass
import json
import logging
import math
import os

from richtext.rich_text_theme import ColorMode
from richtext.richtext_exceptions import RichTextSettingsError


logger = logging.getLogger("RichTextSettings")


@dataclass
class RichTextSettings:
    """
    Rich text rendering settings.
    """
    theme: ColorMode = ColorMode.DARK  # Default to dark mode
    font_size: float | None = None  # None means use the default font size
    font_family: str | None = None  # None means use the default font family

    @classmethod
    def create_default(cls) -> "RichTextSettings":
        """Create a new RichTextSettings object with default values."""
        return cls(
            theme=ColorMode.DARK,
            font_size=None,
            font_family=None
        )

    @classmethod
    def load(cls, path: str) -> "RichTextSettings":
        """
        Load settings from file.

        Args:
            path: Path to the settings file

        Returns:
            RichTextSettings object with loaded values

        Raises:
            RichTextSettingsError: If the file cannot be read, contains invalid JSON, or holds
                a font size or family of the wrong type
        """
        # Start with default settings
        settings = cls.create_default()

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)

        except json.JSONDecodeError as e:
            raise RichTextSettingsError(f"Invalid settings file: {path}", {"path": path, "error": str(e)}) from e

        except OSError as e:
            raise RichTextSettingsError(f"Cannot read settings file: {path}", {"path": path, "error": str(e)}) from e

        if not isinstance(data, dict):
            raise RichTextSettingsError(f"Invalid settings file: {path}", {"path": path})

        # Load theme if available, otherwise use default (dark mode)
        theme_str = data.get("theme", "DARK")
        try:
            settings.theme = ColorMode[theme_str]

        except (KeyError, ValueError, TypeError):
            logger.warning("Unknown theme %r in %s, using default", theme_str, path)
            settings.theme = ColorMode.DARK

        font_size = data.get("fontSize", None)
        if font_size is not None and (
            isinstance(font_size, bool) or not isinstance(font_size, (int, float))
            or not math.isfinite(font_size) or font_size <= 0
        ):
            raise RichTextSettingsError(
                f"Invalid fontSize in settings file: {path}", {"path": path, "fontSize": font_size}
            )

        font_family = data.get("fontFamily", None)
        if font_family is not None and not isinstance(font_family, str):
            raise RichTextSettingsError(
                f"Invalid fontFamily in settings file: {path}", {"path": path, "fontFamily": font_family}
            )

        settings.font_size = font_size
        settings.font_family = font_family

        return settings

    def save(self, path: str) -> None:
        """
        Save settings to file.

        Args:
            path: Path to save the settings file

        Raises:
            RichTextSettingsError: If there's an issue creating the directory or writing the file
        """
        data = {
            "theme": self.theme.name,
            "fontSize": self.font_size,
            "fontFamily": self.font_family,
        }

        try:
            directory = os.path.dirname(path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            with open(path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=4)

        except OSError as e:
            raise RichTextSettingsError(f"Cannot write settings file: {path}", {"path": path, "error": str(e)}) from e
