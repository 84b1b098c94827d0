"""
Keyboard input for ROADHOP.

Keys are tracked by their pygame name ("w", "up", "return", ...). Once per
frame the set of held keys is compared with the previous frame's set and
only keys that went from released to pressed produce an action, so
holding a key never repeats a move.
"""

from enum import Enum, auto
from typing import Dict, Iterable, List, Optional, Set, Tuple


class Action(Enum):
    """Player intents produced by the keyboard."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    CONFIRM = auto()
    CHARACTERS = auto()
    BACK = auto()
    QUIT = auto()
    PICK_1 = auto()
    PICK_2 = auto()
    PICK_3 = auto()
    PICK_4 = auto()


KEY_BINDINGS: Dict[str, Action] = {
    # WASD
    "w": Action.UP,
    "s": Action.DOWN,
    "a": Action.LEFT,
    "d": Action.RIGHT,
    # Arrows
    "up": Action.UP,
    "down": Action.DOWN,
    "left": Action.LEFT,
    "right": Action.RIGHT,
    # Menus
    "return": Action.CONFIRM,
    "enter": Action.CONFIRM,
    "space": Action.CONFIRM,
    "c": Action.CHARACTERS,
    "escape": Action.BACK,
    "backspace": Action.BACK,
    "q": Action.QUIT,
    "1": Action.PICK_1,
    "2": Action.PICK_2,
    "3": Action.PICK_3,
    "4": Action.PICK_4,
}

MOVE_VECTORS: Dict[Action, Tuple[int, int]] = {
    Action.UP: (0, -1),
    Action.DOWN: (0, 1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
}

PICK_INDEX: Dict[Action, int] = {
    Action.PICK_1: 0,
    Action.PICK_2: 1,
    Action.PICK_3: 2,
    Action.PICK_4: 3,
}


class KeyTracker:
    """Collects key transitions between frames.

    A key pressed and released inside one frame still shows up as held in
    that frame's snapshot, so quick taps are not lost. A held key that is
    released and pressed again before the next snapshot is reported as
    repressed, since the held set alone cannot show that edge.
    """

    def __init__(self) -> None:
        self._held: Set[str] = set()
        self._tapped: Set[str] = set()
        self._released: Set[str] = set()
        self._repressed: Set[str] = set()

    def key_down(self, name: str) -> None:
        if name in self._released:
            self._repressed.add(name)
        self._held.add(name)
        self._tapped.add(name)

    def key_up(self, name: str) -> None:
        self._held.discard(name)
        self._released.add(name)

    def snapshot(self) -> Tuple[Set[str], Set[str]]:
        """Keys down at any point since the last snapshot, and keys repressed."""
        keys = self._held | self._tapped
        repressed = self._repressed
        self._tapped = set()
        self._released = set()
        self._repressed = set()
        return keys, repressed


class InputState:
    """Edge detector turning per-frame held-key sets into actions."""

    def __init__(self, bindings: Optional[Dict[str, Action]] = None) -> None:
        self.bindings = bindings if bindings is not None else KEY_BINDINGS
        self._previous: Set[str] = set()

    def poll(self, held: Iterable[str], repressed: Iterable[str] = ()) -> List[Action]:
        """Return actions for keys newly pressed since the last poll.

        Keys in ``repressed`` count as new presses even if they were already
        held last poll. Unmapped keys are ignored.
        """
        current = {name.lower() for name in held}
        pressed = (current - self._previous) | {name.lower() for name in repressed}
        self._previous = current
        return [self.bindings[name] for name in sorted(pressed) if name in self.bindings]

    def reset(self) -> None:
        self._previous = set()
