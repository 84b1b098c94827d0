"""Configuration for ROADHOP."""

from .settings import BoardSettings, Settings, WindowSettings, get_settings

__all__ = ["BoardSettings", "Settings", "WindowSettings", "get_settings"]
