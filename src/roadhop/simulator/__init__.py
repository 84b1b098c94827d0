"""Desktop pygame front end for ROADHOP."""

from .display import FrameDisplay
from .window import GameWindow

__all__ = ["FrameDisplay", "GameWindow"]
