"""
Tests for the default heading style table.
"""
import pytest

from richtext.heading_style import default_heading_style, validate_heading_level
from richtext.richtext_exceptions import InvalidArgumentError
from richtext.text_color import BLACK, TextColor
from richtext.text_style import FontStyle, FontWeight, LayoutDirection, TextStyle, resolve_defaults


@pytest.fixture
def base_style():
    """Fixture providing a fully resolved body text style."""
    return resolve_defaults(TextStyle(font_family="serif", color=BLACK), LayoutDirection.LTR)


@pytest.mark.parametrize("level, expected", [
    (0, {"font_size": 36.0, "font_weight": FontWeight.BOLD}),
    (1, {"font_size": 26.0, "font_weight": FontWeight.BOLD}),
    (3, {"font_size": 20.0, "font_weight": FontWeight.BOLD, "font_style": FontStyle.ITALIC}),
])
def test_levels_without_color(base_style, level, expected):
    """Test levels that leave the color alone override exactly their attributes."""
    assert default_heading_style(level, base_style).specified() == expected


@pytest.mark.parametrize("level, font_size, alpha", [
    (2, 22.0, 0.7),
    (4, 18.0, 0.7),
    (5, None, 0.5),
])
def test_levels_with_faded_color(base_style, level, font_size, alpha):
    """Test levels that fade the color scale the base alpha."""
    style = default_heading_style(level, base_style)

    assert style.font_size == font_size
    assert style.font_weight == FontWeight.BOLD
    assert style.font_style is None
    assert style.color is not None
    assert style.color.alpha == pytest.approx(alpha)
    assert (style.color.red, style.color.green, style.color.blue) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("level", [6, 7, 10, 1000])
def test_deep_levels_return_base_style(base_style, level):
    """Test levels past the table return the base style itself."""
    assert default_heading_style(level, base_style) is base_style


@pytest.mark.parametrize("level", [-1, -100])
def test_negative_level_rejected(base_style, level):
    """Test negative levels raise InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError) as exc_info:
        default_heading_style(level, base_style)

    assert "Level must be at least 0" in str(exc_info.value)
    assert exc_info.value.error_details == {"level": level}


def test_negative_level_is_value_error():
    """Test the invalid level error is also a ValueError."""
    with pytest.raises(ValueError):
        validate_heading_level(-1)


def test_overrides_independent_of_base_content():
    """Test the fixed attributes do not depend on the base style."""
    small = TextStyle(font_size=8.0, font_weight=FontWeight.LIGHT, font_style=FontStyle.ITALIC)
    large = TextStyle(font_size=80.0, font_weight=FontWeight.BLACK)

    assert default_heading_style(1, small) == default_heading_style(1, large)


def test_alpha_scaling_is_multiplicative():
    """Test the alpha is scaled from the base alpha rather than replaced."""
    base = TextStyle(color=TextColor(0.0, 0.0, 0.0, 0.4))

    assert default_heading_style(2, base).color.alpha == pytest.approx(0.28)
    assert default_heading_style(5, base).color.alpha == pytest.approx(0.2)


def test_alpha_scaling_keeps_channels():
    """Test fading keeps the red, green and blue channels."""
    base = TextStyle(color=TextColor(0.2, 0.4, 0.6, 1.0))
    color = default_heading_style(4, base).color

    assert (color.red, color.green, color.blue) == (0.2, 0.4, 0.6)


def test_faded_level_without_base_color():
    """Test fading an unspecified color leaves it unspecified."""
    assert default_heading_style(2, TextStyle()).color is None


@pytest.mark.parametrize("level", range(0, 8))
def test_merge_preserves_unlisted_attributes(base_style, level):
    """Test merging the heading style keeps attributes the level does not set."""
    merged = base_style.merge(default_heading_style(level, base_style))

    assert merged.font_family == "serif"
    assert merged.letter_spacing == base_style.letter_spacing
    assert merged.background == base_style.background
    assert merged.text_direction == base_style.text_direction


def test_level_zero_scenario():
    """Test a level 0 heading over normal 14sp black text."""
    base = TextStyle(font_size=14.0, font_weight=FontWeight.NORMAL, color=BLACK)
    heading = default_heading_style(0, base)

    assert heading == TextStyle(font_size=36.0, font_weight=FontWeight.BOLD)
    assert base.merge(heading) == TextStyle(font_size=36.0, font_weight=FontWeight.BOLD, color=BLACK)


def test_level_two_scenario():
    """Test a level 2 heading over black text."""
    base = TextStyle(color=BLACK)
    heading = default_heading_style(2, base)

    assert heading.font_size == 22.0
    assert heading.font_weight == FontWeight.BOLD
    assert base.merge(heading).color.alpha == pytest.approx(0.7)
