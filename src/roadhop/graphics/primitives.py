"""Basic drawing primitives for the ROADHOP frame buffer."""

from typing import Optional, Sequence, Tuple
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Point = Tuple[float, float]
Buffer = NDArray[np.uint8]


def dim(buffer: Buffer, factor: float = 0.5) -> None:
    """Darken the whole buffer in place (used behind menu overlays)."""
    buffer[:, :] = (buffer * factor).astype(np.uint8)


def draw_rect(
    buffer: Buffer,
    x: float,
    y: float,
    width: float,
    height: float,
    color: Color,
    filled: bool = True,
    thickness: int = 1,
) -> None:
    """Draw a rectangle on the buffer.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
        filled: If True, fill rectangle; if False, draw outline only
        thickness: Line thickness for outline (when filled=False)
    """
    h, w = buffer.shape[:2]

    # Entities move in float pixels; snap to the pixel grid here
    left = int(round(x))
    top = int(round(y))
    right = int(round(x + width))
    bottom = int(round(y + height))

    # Clamp to buffer bounds
    x1 = max(0, min(left, w))
    y1 = max(0, min(top, h))
    x2 = max(0, min(right, w))
    y2 = max(0, min(bottom, h))

    if x2 <= x1 or y2 <= y1:
        return

    if filled:
        buffer[y1:y2, x1:x2] = color
    else:
        for t in range(thickness):
            buffer[min(y1 + t, y2 - 1), x1:x2] = color
            buffer[max(y2 - 1 - t, y1), x1:x2] = color
            buffer[y1:y2, min(x1 + t, x2 - 1)] = color
            buffer[y1:y2, max(x2 - 1 - t, x1)] = color


def blend_rect(
    buffer: Buffer,
    x: float,
    y: float,
    width: float,
    height: float,
    color: Color,
    alpha: float,
) -> None:
    """Alpha-blend a solid rectangle over the buffer (drop shadows)."""
    h, w = buffer.shape[:2]
    x1 = max(0, min(int(round(x)), w))
    y1 = max(0, min(int(round(y)), h))
    x2 = max(0, min(int(round(x + width)), w))
    y2 = max(0, min(int(round(y + height)), h))
    if x2 <= x1 or y2 <= y1:
        return

    region = buffer[y1:y2, x1:x2]
    blended = np.asarray(color, dtype=np.float32) * alpha + region * (1 - alpha)
    buffer[y1:y2, x1:x2] = blended.astype(np.uint8)


def draw_polygon(buffer: Buffer, points: Sequence[Point], color: Color) -> None:
    """Fill a convex polygon.

    Pixels whose centers lie inside every edge half-plane are painted.
    Winding order does not matter.

    Args:
        buffer: Target numpy array (height, width, 3)
        points: Polygon vertices in order
        color: RGB color tuple
    """
    if len(points) < 3:
        return

    h, w = buffer.shape[:2]
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]

    # Work only inside the clamped bounding box
    x1 = max(0, int(np.floor(min(xs))))
    y1 = max(0, int(np.floor(min(ys))))
    x2 = min(w, int(np.ceil(max(xs))) + 1)
    y2 = min(h, int(np.ceil(max(ys))) + 1)
    if x2 <= x1 or y2 <= y1:
        return

    y_indices, x_indices = np.ogrid[y1:y2, x1:x2]
    px = x_indices + 0.5
    py = y_indices + 0.5

    inside_pos = np.ones((y2 - y1, x2 - x1), dtype=bool)
    inside_neg = np.ones((y2 - y1, x2 - x1), dtype=bool)
    for i, (ax, ay) in enumerate(points):
        bx, by = points[(i + 1) % len(points)]
        cross = (bx - ax) * (py - ay) - (by - ay) * (px - ax)
        inside_pos &= cross >= 0
        inside_neg &= cross <= 0

    mask = inside_pos | inside_neg
    buffer[y1:y2, x1:x2][mask] = color


def draw_text(
    buffer: Buffer,
    text: str,
    x: int,
    y: int,
    color: Color,
    font: Optional[dict] = None,
    scale: int = 1,
) -> Tuple[int, int]:
    """Draw text using a bitmap font.

    Args:
        buffer: Target numpy array (height, width, 3)
        text: Text string to draw
        x: Starting x coordinate
        y: Starting y coordinate
        color: RGB color tuple
        font: Bitmap font dictionary (char -> 2D array). Uses built-in if None.
        scale: Scale factor for font size

    Returns:
        Tuple of (width, height) of rendered text in pixels
    """
    if font is None:
        font = get_default_font()

    h, w = buffer.shape[:2]
    cursor_x = x
    char_height = 5 * scale

    for char in text:
        if char == ' ':
            cursor_x += 4 * scale
            continue

        char_data = font.get(char.upper(), font.get('?', []))
        char_width = len(char_data[0])

        for row_idx, row in enumerate(char_data):
            for col_idx, pixel in enumerate(row):
                if not pixel:
                    continue
                px = cursor_x + col_idx * scale
                py = y + row_idx * scale
                if px >= w or py >= h or px + scale <= 0 or py + scale <= 0:
                    continue
                buffer[max(0, py):py + scale, max(0, px):px + scale] = color

        cursor_x += (char_width + 1) * scale

    return cursor_x - x, char_height


def measure_text(text: str, scale: int = 1, font: Optional[dict] = None) -> Tuple[int, int]:
    """Return (width, height) that draw_text would cover."""
    if font is None:
        font = get_default_font()

    width = 0
    for char in text:
        if char == ' ':
            width += 4 * scale
            continue
        char_data = font.get(char.upper(), font.get('?', []))
        width += (len(char_data[0]) + 1) * scale
    return width, 5 * scale


def get_default_font() -> dict:
    """Return a simple 3x5 bitmap font for basic characters."""
    return _DEFAULT_FONT


# Each character is a list of rows, each row is a list of 0/1 pixels
_DEFAULT_FONT = {
    'A': [[0,1,0], [1,0,1], [1,1,1], [1,0,1], [1,0,1]],
    'B': [[1,1,0], [1,0,1], [1,1,0], [1,0,1], [1,1,0]],
    'C': [[0,1,1], [1,0,0], [1,0,0], [1,0,0], [0,1,1]],
    'D': [[1,1,0], [1,0,1], [1,0,1], [1,0,1], [1,1,0]],
    'E': [[1,1,1], [1,0,0], [1,1,0], [1,0,0], [1,1,1]],
    'F': [[1,1,1], [1,0,0], [1,1,0], [1,0,0], [1,0,0]],
    'G': [[0,1,1], [1,0,0], [1,0,1], [1,0,1], [0,1,1]],
    'H': [[1,0,1], [1,0,1], [1,1,1], [1,0,1], [1,0,1]],
    'I': [[1,1,1], [0,1,0], [0,1,0], [0,1,0], [1,1,1]],
    'J': [[0,0,1], [0,0,1], [0,0,1], [1,0,1], [0,1,0]],
    'K': [[1,0,1], [1,0,1], [1,1,0], [1,0,1], [1,0,1]],
    'L': [[1,0,0], [1,0,0], [1,0,0], [1,0,0], [1,1,1]],
    'M': [[1,0,1], [1,1,1], [1,0,1], [1,0,1], [1,0,1]],
    'N': [[1,0,1], [1,1,1], [1,1,1], [1,0,1], [1,0,1]],
    'O': [[0,1,0], [1,0,1], [1,0,1], [1,0,1], [0,1,0]],
    'P': [[1,1,0], [1,0,1], [1,1,0], [1,0,0], [1,0,0]],
    'Q': [[0,1,0], [1,0,1], [1,0,1], [1,1,1], [0,1,1]],
    'R': [[1,1,0], [1,0,1], [1,1,0], [1,0,1], [1,0,1]],
    'S': [[0,1,1], [1,0,0], [0,1,0], [0,0,1], [1,1,0]],
    'T': [[1,1,1], [0,1,0], [0,1,0], [0,1,0], [0,1,0]],
    'U': [[1,0,1], [1,0,1], [1,0,1], [1,0,1], [0,1,0]],
    'V': [[1,0,1], [1,0,1], [1,0,1], [0,1,0], [0,1,0]],
    'W': [[1,0,1], [1,0,1], [1,0,1], [1,1,1], [1,0,1]],
    'X': [[1,0,1], [1,0,1], [0,1,0], [1,0,1], [1,0,1]],
    'Y': [[1,0,1], [1,0,1], [0,1,0], [0,1,0], [0,1,0]],
    'Z': [[1,1,1], [0,0,1], [0,1,0], [1,0,0], [1,1,1]],
    '0': [[0,1,0], [1,0,1], [1,0,1], [1,0,1], [0,1,0]],
    '1': [[0,1,0], [1,1,0], [0,1,0], [0,1,0], [1,1,1]],
    '2': [[0,1,0], [1,0,1], [0,0,1], [0,1,0], [1,1,1]],
    '3': [[1,1,0], [0,0,1], [0,1,0], [0,0,1], [1,1,0]],
    '4': [[1,0,1], [1,0,1], [1,1,1], [0,0,1], [0,0,1]],
    '5': [[1,1,1], [1,0,0], [1,1,0], [0,0,1], [1,1,0]],
    '6': [[0,1,1], [1,0,0], [1,1,0], [1,0,1], [0,1,0]],
    '7': [[1,1,1], [0,0,1], [0,1,0], [0,1,0], [0,1,0]],
    '8': [[0,1,0], [1,0,1], [0,1,0], [1,0,1], [0,1,0]],
    '9': [[0,1,0], [1,0,1], [0,1,1], [0,0,1], [1,1,0]],
    '?': [[0,1,0], [1,0,1], [0,0,1], [0,0,0], [0,1,0]],
    '!': [[0,1,0], [0,1,0], [0,1,0], [0,0,0], [0,1,0]],
    '.': [[0,0,0], [0,0,0], [0,0,0], [0,0,0], [0,1,0]],
    ':': [[0,0,0], [0,1,0], [0,0,0], [0,1,0], [0,0,0]],
    '-': [[0,0,0], [0,0,0], [1,1,1], [0,0,0], [0,0,0]],
    '/': [[0,0,1], [0,0,1], [0,1,0], [1,0,0], [1,0,0]],
    '<': [[0,0,1], [0,1,0], [1,0,0], [0,1,0], [0,0,1]],
    '>': [[1,0,0], [0,1,0], [0,0,1], [0,1,0], [1,0,0]],
}
