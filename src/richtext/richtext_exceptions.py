"""Custom exceptions for rich text styling operations."""

from typing import Any


class RichTextError(Exception):
    """Base exception for rich text operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class InvalidArgumentError(RichTextError, ValueError):
    """Raised when a caller passes a value outside its permitted range.

    Raised for programming errors at the call site, including:
    - Negative heading levels
    - Color components outside the range 0..1
    - Malformed hex color strings
    """


class RichTextSettingsError(RichTextError):
    """Errors that occur while reading or writing rich text settings.

    Raised when settings cannot be loaded or saved, including:
    - JSON parsing failures (json.JSONDecodeError)
    - Missing or unreadable settings file (OSError)
    """
