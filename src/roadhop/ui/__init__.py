"""Menu screens and HUD overlays."""

from .screens import MenuScreen, ScreenController

__all__ = ["MenuScreen", "ScreenController"]
