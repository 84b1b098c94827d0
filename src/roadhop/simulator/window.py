"""
Desktop game window using pygame.

Runs the frame loop: poll events, turn newly pressed keys into actions,
update the session, draw the frame and present it.
"""

import pygame
import asyncio
import logging
from typing import Optional

from ..config.settings import WindowSettings
from ..controls.keyboard import InputState, KeyTracker
from ..core.events import Event, EventType
from ..game.session import GameSession
from ..ui.screens import ScreenController
from .display import FrameDisplay

logger = logging.getLogger(__name__)


class GameWindow:
    """
    Main window hosting one game session.

    Keyboard Mapping:
        WASD / ARROWS: Move (one cell per press)
        ENTER / SPACE: Start, restart
        C: Character select
        1-4: Pick character
        ESC / BACKSPACE: Back to title
        Q: Quit
        F11: Toggle fullscreen
        F12: Capture screenshot
    """

    def __init__(
        self,
        session: GameSession,
        config: Optional[WindowSettings] = None,
        screens: Optional[ScreenController] = None,
    ) -> None:
        self.session = session
        self.config = config or WindowSettings()
        self.screens = screens or ScreenController(session)

        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._running = False
        self._frame_count = 0
        self.caption = self.config.title

        self.display = FrameDisplay(session.grid.width, session.grid.height)
        self._keys = KeyTracker()
        self._input = InputState()

        session.event_bus.subscribe(EventType.QUIT, self._on_quit)
        session.event_bus.subscribe(EventType.GAME_STARTED, self._on_game_started)
        session.event_bus.subscribe(EventType.GAME_OVER, self._on_game_over)

        logger.info("GameWindow created")

    @property
    def size(self) -> tuple[int, int]:
        scale = self.config.scale
        return self.display.width * scale, self.display.height * scale

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.caption)

        flags = pygame.DOUBLEBUF
        if self.config.fullscreen:
            flags |= pygame.FULLSCREEN

        self._screen = pygame.display.set_mode(self.size, flags)
        self._clock = pygame.time.Clock()

        logger.info(f"Pygame initialized: {self.size[0]}x{self.size[1]}")

    def _on_quit(self, event: Event) -> None:
        self._running = False

    def _on_game_started(self, event: Event) -> None:
        self._set_caption(self.config.title)

    def _on_game_over(self, event: Event) -> None:
        self._set_caption(f"{self.config.title} - score {event.data.get('score', 0)}")

    def _set_caption(self, caption: str) -> None:
        self.caption = caption
        if self._screen:
            pygame.display.set_caption(caption)

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_F11:
                    self._toggle_fullscreen()
                elif event.key == pygame.K_F12:
                    self._capture_screenshot()
                else:
                    self._keys.key_down(pygame.key.name(event.key))

            elif event.type == pygame.KEYUP:
                self._keys.key_up(pygame.key.name(event.key))

    def tick(self) -> None:
        """Run one frame of input, update and draw."""
        held, repressed = self._keys.snapshot()
        for action in self._input.poll(held, repressed):
            self.screens.handle(action)

        self.session.update()

        buffer = self.display.buffer
        self.session.draw(buffer)
        self.screens.draw(buffer)

    def _render(self) -> None:
        if not self._screen:
            return

        self._screen.fill(self.config.bg_color)
        surface = self.display.render(self.config.scale)
        rect = surface.get_rect(center=self._screen.get_rect().center)
        self._screen.blit(surface, rect.topleft)
        pygame.display.flip()

    def _capture_screenshot(self) -> None:
        """Capture and save a screenshot."""
        if self._screen:
            filename = f"screenshot_{self._frame_count}.png"
            pygame.image.save(self._screen, filename)
            logger.info(f"Screenshot saved: {filename}")

    def _toggle_fullscreen(self) -> None:
        self.config.fullscreen = not self.config.fullscreen

        flags = pygame.DOUBLEBUF
        if self.config.fullscreen:
            flags |= pygame.FULLSCREEN
            info = pygame.display.Info()
            self._screen = pygame.display.set_mode((info.current_w, info.current_h), flags)
        else:
            self._screen = pygame.display.set_mode(self.size, flags)

        logger.info(f"Fullscreen: {self.config.fullscreen}")

    async def run(self) -> None:
        """Main game loop."""
        self._init_pygame()
        self._running = True

        # Ambient traffic behind the title screen
        if self.session.player is None:
            self.session.init_entities()

        logger.info("Game loop started")

        while self._running:
            self._handle_events()
            self.tick()
            self._render()

            if self._clock:
                self._clock.tick(self.config.fps)

            self._frame_count += 1

            # Yield to other tasks
            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        pygame.quit()
        logger.info(f"Game loop stopped after {self._frame_count} frames")
