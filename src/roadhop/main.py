"""
Main entry point for ROADHOP.

Loads settings, configures logging and runs the game window.
"""

import asyncio
import logging
import random
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from roadhop.config.settings import Settings, get_settings
from roadhop.core.events import EventBus
from roadhop.game.grid import Grid
from roadhop.game.session import GameSession

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """Configure console and optional file logging."""
    level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        # Truncate on each run for fresh logs
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logging.info(f"Logging to file: {log_file}")


def create_session(settings: Settings) -> GameSession:
    """Build a game session from settings."""
    grid = Grid.from_settings(settings.board)
    rng = random.Random(settings.seed)
    if settings.seed is not None:
        logger.info(f"Using fixed seed {settings.seed}")

    return GameSession(
        grid=grid,
        rng=rng,
        event_bus=EventBus(),
        character=settings.character,
    )


async def run(settings: Settings) -> None:
    # pygame is only needed once a window is actually opened
    from roadhop.simulator.window import GameWindow

    session = create_session(settings)
    window = GameWindow(session, config=settings.window)
    await window.run()


def main() -> None:
    load_dotenv()
    settings = get_settings()
    setup_logging(settings.debug, settings.log_file)

    logger.info("=" * 50)
    logger.info("ROADHOP starting")
    logger.info("=" * 50)
    logger.info("Controls:")
    logger.info("  WASD / ARROWS - Move")
    logger.info("  ENTER / SPACE - Start / restart")
    logger.info("  C             - Character select")
    logger.info("  ESC           - Back to title")
    logger.info("  F11 / F12     - Fullscreen / screenshot")
    logger.info("  Q             - Quit")

    try:
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        logger.info("Stopped by user")
    except Exception as e:
        logger.exception(f"Game error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
