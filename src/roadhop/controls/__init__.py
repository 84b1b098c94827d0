"""Input handling for ROADHOP."""

from .keyboard import Action, InputState, KeyTracker, KEY_BINDINGS, MOVE_VECTORS

__all__ = ["Action", "InputState", "KeyTracker", "KEY_BINDINGS", "MOVE_VECTORS"]
