"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BoardSettings(BaseSettings):
    """Play field geometry."""

    model_config = SettingsConfigDict(env_prefix="ROADHOP_BOARD_")

    grid_size: int = Field(default=40, gt=0)
    width: int = Field(default=480, gt=0)
    height: int = Field(default=720, gt=0)

    # Forward moves landing above this row scroll the world instead
    scroll_threshold_rows: int = Field(default=8, ge=0)

    # Bottom rows that are always safe ground at world init
    start_rows: int = Field(default=2, ge=1)

    @model_validator(mode="after")
    def _check_grid_alignment(self) -> "BoardSettings":
        if self.width % self.grid_size or self.height % self.grid_size:
            raise ValueError(
                f"board {self.width}x{self.height} is not a multiple of grid {self.grid_size}"
            )
        return self


class WindowSettings(BaseSettings):
    """Desktop window settings."""

    model_config = SettingsConfigDict(env_prefix="ROADHOP_WINDOW_")

    title: str = "ROADHOP"
    fps: int = Field(default=60, gt=0)
    scale: int = Field(default=1, ge=1, le=4)
    fullscreen: bool = False

    bg_color: tuple[int, int, int] = (20, 20, 30)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="ROADHOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False

    # Fixed seed for reproducible lane generation
    seed: Optional[int] = None

    # Initial character on the select screen
    character: Literal["pig", "chicken", "duck", "cow"] = "pig"

    log_file: Optional[Path] = Path("roadhop.log")

    board: BoardSettings = Field(default_factory=BoardSettings)
    window: WindowSettings = Field(default_factory=WindowSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
