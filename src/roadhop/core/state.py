"""
Game mode state machine for ROADHOP.

States:
    MENU: Title and character select screens, ambient traffic running
    PLAYING: Player in control, collisions checked every frame
    GAME_OVER: Frozen world with final score shown
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class GameMode(Enum):
    """Top-level game modes."""
    MENU = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class StateMachine:
    """
    Tracks the current game mode and guards transitions.

    Listeners are called with (old_mode, new_mode) after every
    successful transition.
    """

    # Valid mode transitions
    VALID_TRANSITIONS: list[tuple[GameMode, GameMode]] = [
        (GameMode.MENU, GameMode.PLAYING),       # Start
        (GameMode.PLAYING, GameMode.GAME_OVER),  # Crash
        (GameMode.PLAYING, GameMode.MENU),       # Quit to title
        (GameMode.GAME_OVER, GameMode.PLAYING),  # Restart
        (GameMode.GAME_OVER, GameMode.MENU),
    ]

    def __init__(self, initial_mode: GameMode = GameMode.MENU) -> None:
        self._mode = initial_mode
        self._listeners: list[Callable[[GameMode, GameMode], None]] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.info(f"StateMachine initialized with mode: {initial_mode.name}")

    @property
    def mode(self) -> GameMode:
        """Get current mode."""
        return self._mode

    def can_transition(self, to_mode: GameMode) -> bool:
        """Check if transition to given mode is valid."""
        return (self._mode, to_mode) in self._valid_transitions

    def transition(self, to_mode: GameMode) -> bool:
        """
        Attempt to transition to a new mode.

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_mode):
            logger.warning(
                f"Invalid transition: {self._mode.name} -> {to_mode.name}"
            )
            return False

        old_mode = self._mode
        self._mode = to_mode
        logger.info(f"Mode transition: {old_mode.name} -> {to_mode.name}")

        for listener in self._listeners:
            try:
                listener(old_mode, to_mode)
            except Exception as e:
                logger.error(f"Error in mode listener: {e}")

        return True

    def add_listener(self, callback: Callable[[GameMode, GameMode], None]) -> None:
        """Add a mode change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[GameMode, GameMode], None]) -> None:
        """Remove a mode change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)
