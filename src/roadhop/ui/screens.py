"""
Menu screens and HUD drawn over the game.

The controller routes keyboard actions to the session depending on the
current mode and, inside the menu, on which screen is open.
"""

from enum import Enum, auto
import logging

from roadhop.controls.keyboard import Action, MOVE_VECTORS, PICK_INDEX
from roadhop.core.events import Event, EventType
from roadhop.core.state import GameMode
from roadhop.game.characters import CharacterType, Facing, draw_character
from roadhop.game.session import GameSession
from roadhop.graphics.primitives import Buffer, dim, draw_rect, draw_text, measure_text
from roadhop.graphics.text_utils import draw_centered_text, draw_label

logger = logging.getLogger(__name__)

TITLE_COLOR = (255, 235, 59)
TEXT_COLOR = (240, 240, 240)
HINT_COLOR = (170, 170, 190)
ALERT_COLOR = (255, 80, 80)
HIGHLIGHT_COLOR = (255, 152, 0)
HUD_BG = (20, 20, 30)

CHARACTERS = list(CharacterType)


class MenuScreen(Enum):
    TITLE = auto()
    CHARACTERS = auto()


class ScreenController:
    """Title, character select, HUD and game-over overlays."""

    def __init__(self, session: GameSession) -> None:
        self.session = session
        self.screen = MenuScreen.TITLE

    def handle(self, action: Action) -> bool:
        """Apply one action. Returns True if it was used."""
        if action is Action.QUIT:
            self.session.event_bus.emit(Event(EventType.QUIT, source="ui"))
            return True

        mode = self.session.mode
        if mode is GameMode.PLAYING:
            return self._handle_playing(action)
        if mode is GameMode.GAME_OVER:
            return self._handle_game_over(action)
        if self.screen is MenuScreen.CHARACTERS:
            return self._handle_characters(action)
        return self._handle_title(action)

    def _handle_title(self, action: Action) -> bool:
        if action is Action.CONFIRM:
            return self.session.start_game()
        if action is Action.CHARACTERS:
            self.screen = MenuScreen.CHARACTERS
            logger.debug("Opened character select")
            return True
        if action in PICK_INDEX:
            self.session.set_selected_character(CHARACTERS[PICK_INDEX[action]])
            return True
        return False

    def _handle_characters(self, action: Action) -> bool:
        if action in PICK_INDEX:
            self.session.set_selected_character(CHARACTERS[PICK_INDEX[action]])
            return True
        if action in (Action.LEFT, Action.RIGHT):
            step = -1 if action is Action.LEFT else 1
            index = CHARACTERS.index(self.session.selected_character)
            self.session.set_selected_character(CHARACTERS[(index + step) % len(CHARACTERS)])
            return True
        if action is Action.BACK:
            self.screen = MenuScreen.TITLE
            return True
        if action is Action.CONFIRM:
            self.screen = MenuScreen.TITLE
            return self.session.start_game()
        return False

    def _handle_playing(self, action: Action) -> bool:
        if action in MOVE_VECTORS:
            dx, dy = MOVE_VECTORS[action]
            self.session.move_player(dx, dy)
            return True
        if action is Action.BACK:
            self.screen = MenuScreen.TITLE
            return self.session.show_menu()
        return False

    def _handle_game_over(self, action: Action) -> bool:
        if action is Action.CONFIRM:
            return self.session.start_game()
        if action is Action.BACK:
            self.screen = MenuScreen.TITLE
            return self.session.show_menu()
        return False

    # Rendering

    def draw(self, buffer: Buffer) -> None:
        mode = self.session.mode
        if mode is GameMode.PLAYING:
            self._draw_hud(buffer)
        elif mode is GameMode.GAME_OVER:
            self._draw_game_over(buffer)
        elif self.screen is MenuScreen.CHARACTERS:
            self._draw_characters(buffer)
        else:
            self._draw_title(buffer)

    def _draw_hud(self, buffer: Buffer) -> None:
        draw_label(buffer, f"SCORE {self.session.score}", 8, 8, TEXT_COLOR, HUD_BG, scale=3)

    def _draw_title(self, buffer: Buffer) -> None:
        dim(buffer, 0.45)
        h = buffer.shape[0]
        draw_centered_text(buffer, "ROADHOP", h // 4, TITLE_COLOR, scale=8)
        draw_centered_text(buffer, f"PLAYING AS {self.session.selected_character.value}", h // 4 + 70, HINT_COLOR, scale=2)
        draw_centered_text(buffer, "ENTER - START", h // 2, TEXT_COLOR, scale=3)
        draw_centered_text(buffer, "C - CHARACTERS", h // 2 + 30, TEXT_COLOR, scale=3)
        draw_centered_text(buffer, "WASD / ARROWS - MOVE", h // 2 + 90, HINT_COLOR, scale=2)
        draw_centered_text(buffer, "Q - QUIT", h // 2 + 110, HINT_COLOR, scale=2)

    def _draw_characters(self, buffer: Buffer) -> None:
        dim(buffer, 0.45)
        h, w = buffer.shape[:2]
        draw_centered_text(buffer, "CHOOSE", h // 5, TITLE_COLOR, scale=5)

        slot_w = w // len(CHARACTERS)
        top = h // 2 - 40
        for i, character in enumerate(CHARACTERS):
            x = i * slot_w + (slot_w - 32) // 2
            if character is self.session.selected_character:
                draw_rect(buffer, x - 10, top - 22, 60, 72, HIGHLIGHT_COLOR, filled=False, thickness=3)
            draw_character(buffer, character, Facing.DOWN, x, top)
            draw_centered_in(buffer, character.value, i * slot_w, slot_w, top + 60)
            draw_centered_in(buffer, str(i + 1), i * slot_w, slot_w, top + 78, color=HINT_COLOR)

        draw_centered_text(buffer, "< > OR 1-4 - SELECT", h // 2 + 90, HINT_COLOR, scale=2)
        draw_centered_text(buffer, "ENTER - PLAY", h // 2 + 115, TEXT_COLOR, scale=3)
        draw_centered_text(buffer, "ESC - BACK", h // 2 + 145, HINT_COLOR, scale=2)

    def _draw_game_over(self, buffer: Buffer) -> None:
        dim(buffer, 0.5)
        h = buffer.shape[0]
        draw_centered_text(buffer, "GAME OVER", h // 3, ALERT_COLOR, scale=6)
        draw_centered_text(buffer, f"SCORE {self.session.score}", h // 3 + 60, TEXT_COLOR, scale=4)
        draw_centered_text(buffer, "ENTER - RESTART", h // 2 + 40, TEXT_COLOR, scale=3)
        draw_centered_text(buffer, "ESC - MENU", h // 2 + 70, HINT_COLOR, scale=2)


def draw_centered_in(buffer: Buffer, text: str, x: int, width: int, y: int, color=TEXT_COLOR) -> None:
    """Center text inside a horizontal slot."""
    text_w, _ = measure_text(text, scale=2)
    draw_text(buffer, text, x + (width - text_w) // 2, y, color, scale=2)
