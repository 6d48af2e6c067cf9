"""RGBA color values used by text styles."""

from dataclasses import dataclass, replace
import re

from richtext.richtext_exceptions import InvalidArgumentError


_HEX_DIGITS = re.compile(r"[0-9a-fA-F]{6}(?:[0-9a-fA-F]{2})?")


@dataclass(frozen=True)
class TextColor:
    """
    An immutable RGBA color.

    All components are floats in the range 0..1.
    """
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise InvalidArgumentError(
                    f"Color component '{name}' must be between 0 and 1",
                    {"component": name, "value": value}
                )

    def copy(self, alpha: float | None = None) -> "TextColor":
        """
        Create a copy of this color, optionally with a different alpha.

        Args:
            alpha: New alpha value, or None to keep the current one

        Returns:
            The copied color
        """
        if alpha is None:
            return self

        return replace(self, alpha=alpha)

    @classmethod
    def from_hex(cls, hex_color: str) -> "TextColor":
        """
        Parse a color in "#rrggbb" or "#rrggbbaa" form.

        Args:
            hex_color: The hex color string

        Returns:
            The parsed color

        Raises:
            InvalidArgumentError: If the string is not a valid hex color
        """
        digits = hex_color[1:] if hex_color.startswith("#") else hex_color
        if not _HEX_DIGITS.fullmatch(digits):
            raise InvalidArgumentError(f"Invalid hex color: {hex_color!r}", {"value": hex_color})

        components = [int(digits[i:i + 2], 16) / 255 for i in range(0, len(digits), 2)]
        return cls(*components)

    def to_hex(self) -> str:
        """Format the color as "#rrggbb", or "#rrggbbaa" when not fully opaque."""
        components = [self.red, self.green, self.blue]
        if self.alpha < 1.0:
            components.append(self.alpha)

        return "#" + "".join(f"{round(c * 255):02x}" for c in components)

    def to_css(self) -> str:
        """Format the color as a CSS rgba() expression."""
        return (
            f"rgba({round(self.red * 255)}, {round(self.green * 255)}, "
            f"{round(self.blue * 255)}, {round(self.alpha, 3):g})"
        )


BLACK = TextColor(0.0, 0.0, 0.0)
WHITE = TextColor(1.0, 1.0, 1.0)
TRANSPARENT = TextColor(0.0, 0.0, 0.0, 0.0)
