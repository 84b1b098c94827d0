"""Graphics module for the ROADHOP rendering pipeline."""

from roadhop.graphics.primitives import (
    blend_rect,
    dim,
    draw_polygon,
    draw_rect,
    draw_text,
    measure_text,
)
from roadhop.graphics.shading import hex_to_rgb, hsl_to_rgb, shade_color
from roadhop.graphics.text_utils import draw_centered_text, draw_label
from roadhop.graphics.voxel import draw_cube

__all__ = [
    # Primitives
    "blend_rect",
    "dim",
    "draw_polygon",
    "draw_rect",
    "draw_text",
    "measure_text",
    # Shading
    "hex_to_rgb",
    "hsl_to_rgb",
    "shade_color",
    "draw_cube",
    # Text
    "draw_centered_text",
    "draw_label",
]
