"""Color helpers: hex parsing, HSL conversion and face shading."""

import colorsys
from typing import Union

from roadhop.graphics.primitives import Color

ColorLike = Union[Color, str]


def hex_to_rgb(value: str) -> Color:
    """Parse '#rrggbb' (or short '#rgb') into an RGB tuple."""
    digits = value.lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) != 6:
        raise ValueError(f"Not a hex color: {value!r}")
    packed = int(digits, 16)
    return (packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF


def rgb_to_hex(color: Color) -> str:
    r, g, b = color
    return f"#{r:02x}{g:02x}{b:02x}"


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> Color:
    """Convert HSL (hue in degrees, s/l in 0..1) to an RGB tuple."""
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360.0, lightness, saturation)
    return round(r * 255), round(g * 255), round(b * 255)


def to_rgb(color: ColorLike) -> Color:
    if isinstance(color, str):
        return hex_to_rgb(color)
    return color


def shade_color(color: ColorLike, percent: float) -> Color:
    """Lighten (percent > 0) or darken (percent < 0) a color.

    Each channel moves toward white or black by ``|percent|`` of the
    remaining distance, so 0.2 lifts a face by a fifth and -0.2 drops it
    by a fifth.

    Args:
        color: '#rrggbb' string or RGB tuple
        percent: Signed fraction in [-1, 1]

    Returns:
        Shaded RGB tuple
    """
    target = 0 if percent < 0 else 255
    amount = min(abs(percent), 1.0)
    return tuple(
        max(0, min(255, round((target - c) * amount) + c))
        for c in to_rgb(color)
    )
