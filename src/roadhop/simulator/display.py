"""
Frame buffer display backed by a pygame surface.

Game code draws into a numpy RGB buffer; the window turns it into a
surface once per frame.
"""

import pygame
import numpy as np
from numpy.typing import NDArray


class FrameDisplay:
    """Numpy frame buffer with a pygame renderer."""

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._buffer = np.zeros((height, width, 3), dtype=np.uint8)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def buffer(self) -> NDArray[np.uint8]:
        """Live buffer, shape (height, width, 3). Draw into it directly."""
        return self._buffer

    def clear(self, r: int = 0, g: int = 0, b: int = 0) -> None:
        self._buffer[:, :] = [r, g, b]

    def get_buffer(self) -> NDArray[np.uint8]:
        return self._buffer.copy()

    def render(self, scale: int = 1) -> pygame.Surface:
        """
        Render buffer to a pygame surface.

        Args:
            scale: Integer pixel scale factor

        Returns:
            pygame.Surface with rendered frame
        """
        # surfarray is indexed (x, y)
        surface = pygame.surfarray.make_surface(self._buffer.swapaxes(0, 1))
        if scale == 1:
            return surface
        return pygame.transform.scale(surface, (self._width * scale, self._height * scale))
