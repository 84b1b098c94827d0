"""Text layout helpers on top of the bitmap font."""

from typing import Tuple

from roadhop.graphics.primitives import Buffer, Color, draw_rect, draw_text, measure_text


def draw_centered_text(
    buffer: Buffer,
    text: str,
    y: int,
    color: Color,
    scale: int = 1,
) -> Tuple[int, int]:
    """Draw text horizontally centered on the buffer.

    Returns:
        Tuple of (width, height) of rendered text
    """
    text_w, _ = measure_text(text, scale)
    x = (buffer.shape[1] - text_w) // 2
    return draw_text(buffer, text, x, y, color, scale=scale)


def draw_label(
    buffer: Buffer,
    text: str,
    x: int,
    y: int,
    color: Color,
    background: Color,
    scale: int = 1,
    padding: int = 4,
) -> Tuple[int, int]:
    """Draw text on a solid plate, for HUD readouts over busy backgrounds."""
    text_w, text_h = measure_text(text, scale)
    draw_rect(buffer, x, y, text_w + padding * 2, text_h + padding * 2, background)
    draw_text(buffer, text, x + padding, y + padding, color, scale=scale)
    return text_w + padding * 2, text_h + padding * 2
