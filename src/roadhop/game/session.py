"""
Game session: owns the world, the player and the mode state machine.

One ``update()`` and one ``draw()`` per frame tick. The UI and window only
talk to the game through this object.
"""

import logging
import random
from typing import List, Optional, Union

from roadhop.core.events import Event, EventBus, EventType
from roadhop.core.state import GameMode, StateMachine
from roadhop.game.characters import CharacterType
from roadhop.game.entities import MoveResult, Player, Tree, Vehicle
from roadhop.game.grid import Grid
from roadhop.game.world import World
from roadhop.graphics.primitives import Buffer

logger = logging.getLogger(__name__)

Drawable = Union[Player, Vehicle, Tree]


class GameSession:
    """A single play session.

    Score is the furthest distance ever reached; distance itself goes
    down again when the player steps back.
    """

    def __init__(
        self,
        grid: Optional[Grid] = None,
        rng: Optional[random.Random] = None,
        event_bus: Optional[EventBus] = None,
        character: Union[CharacterType, str] = CharacterType.PIG,
    ) -> None:
        self.grid = grid or Grid()
        self.rng = rng or random.Random()
        self.event_bus = event_bus or EventBus()
        self.state_machine = StateMachine(GameMode.MENU)

        self.world = World(self.grid, self.rng)
        self.player: Optional[Player] = None
        self.score = 0
        self.distance = 0
        self.frame_count = 0
        self._selected = CharacterType.parse(character)

    @property
    def mode(self) -> GameMode:
        return self.state_machine.mode

    @property
    def selected_character(self) -> CharacterType:
        return self._selected

    def set_selected_character(self, character: Union[CharacterType, str]) -> None:
        self._selected = CharacterType.parse(character)
        logger.info(f"Character selected: {self._selected.value}")
        self.event_bus.emit(Event(
            EventType.CHARACTER_SELECTED,
            data={"character": self._selected.value},
            source="session",
        ))

    def init_entities(self) -> None:
        """Reset progress and rebuild the world and player."""
        self.score = 0
        self.distance = 0
        self.frame_count = 0

        self.world.reset(self.score)
        self.player = Player(self._selected, self.grid)

        # Never start inside a tree
        start_lane = self.world.lane_at(self.player.row)
        if start_lane is not None:
            start_lane.remove_tree(self.player.col)

    def start_game(self) -> bool:
        """Begin a fresh run from the menu or the game-over screen."""
        if not self.state_machine.can_transition(GameMode.PLAYING):
            logger.warning(f"Cannot start game from {self.mode.name}")
            return False

        self.init_entities()
        self.state_machine.transition(GameMode.PLAYING)
        logger.info(f"Game started as {self._selected.value}")
        self.event_bus.emit(Event(
            EventType.GAME_STARTED,
            data={"character": self._selected.value},
            source="session",
        ))
        return True

    def show_menu(self) -> bool:
        if self.mode is GameMode.MENU:
            return True
        if not self.state_machine.transition(GameMode.MENU):
            return False
        self.init_entities()
        return True

    def move_player(self, dx: int, dy: int) -> MoveResult:
        """Apply one movement action. Ignored outside of PLAYING."""
        if self.mode is not GameMode.PLAYING or self.player is None:
            return MoveResult.BLOCKED

        result = self.player.move(dx, dy, self.world)

        if result.is_forward:
            self.distance += 1
            if self.distance > self.score:
                self.score = self.distance
                self.event_bus.emit(Event(
                    EventType.SCORE_CHANGED,
                    data={"score": self.score},
                    source="session",
                ))
            if result is MoveResult.SCROLL:
                self.world.scroll(self.score)
                self.event_bus.emit(Event(
                    EventType.WORLD_SCROLLED,
                    data={"scrolls": self.world.scroll_count},
                    source="session",
                ))
        elif result is MoveResult.BACKWARD:
            self.distance = max(0, self.distance - 1)

        return result

    def update(self) -> None:
        """Advance one frame."""
        if self.mode is GameMode.GAME_OVER:
            return

        self.frame_count += 1
        self.world.update()

        if self.player is not None:
            self.player.update()

        if self.mode is GameMode.PLAYING and self.player is not None:
            if self.world.collides(self.player):
                self._game_over()

    def _game_over(self) -> None:
        self.state_machine.transition(GameMode.GAME_OVER)
        logger.info(f"Game over: score={self.score} frames={self.frame_count}")
        self.event_bus.emit(Event(
            EventType.GAME_OVER,
            data={"score": self.score},
            source="session",
        ))

    def render_list(self) -> List[Drawable]:
        """Player, vehicles and trees in back-to-front drawing order.

        The player is left out once the game is over.
        """
        items: List[Drawable] = []
        if self.player is not None and self.mode is not GameMode.GAME_OVER:
            items.append(self.player)
        items.extend(self.world.entities())
        items.sort(key=lambda item: item.render_y)
        return items

    def draw(self, buffer: Buffer) -> None:
        if self.player is None:
            raise RuntimeError("draw() called before init_entities()")

        for lane in self.world.lanes:
            lane.draw_ground(buffer)

        for item in self.render_list():
            item.draw(buffer)
