"""Pseudo-3D block drawing shared by vehicles, trees and characters."""

from roadhop.graphics.primitives import Buffer, draw_polygon, draw_rect
from roadhop.graphics.shading import ColorLike, shade_color, to_rgb

# Height of the lit top band, relative to block depth
TOP_SCALE = 0.6

# Horizontal and vertical skew of the side and top faces
SKEW_SCALE = 0.4

LIGHT = 0.2
SHADOW = -0.2


def draw_cube(
    buffer: Buffer,
    x: float,
    y: float,
    w: float,
    h: float,
    d: float,
    color: ColorLike,
) -> None:
    """Draw a block with a front face, a lit top and a shaded right side.

    Args:
        buffer: Target frame buffer
        x: Left edge of the front face
        y: Top edge of the front face
        w: Front face width
        h: Front face height
        d: Block depth; controls the size of the top and side faces
        color: Base (front face) color
    """
    base = to_rgb(color)
    lit = shade_color(base, LIGHT)
    dark = shade_color(base, SHADOW)

    top_h = d * TOP_SCALE
    skew = d * SKEW_SCALE

    # Top band
    draw_rect(buffer, x, y - top_h, w, top_h, lit)

    # Right side
    draw_polygon(
        buffer,
        [(x + w, y), (x + w + skew, y - skew), (x + w + skew, y + h - skew), (x + w, y + h)],
        dark,
    )

    # Top parallelogram joining the front face to the side
    draw_polygon(
        buffer,
        [(x, y), (x + skew, y - skew), (x + w + skew, y - skew), (x + w, y)],
        lit,
    )

    # Front face last so the skewed faces never bleed over it
    draw_rect(buffer, x, y, w, h, base)
