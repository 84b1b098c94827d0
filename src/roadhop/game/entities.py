"""Things that live on the play field: the player, vehicles and trees."""

import math
from enum import Enum, auto
from typing import TYPE_CHECKING

from roadhop.game.characters import CharacterType, Facing, draw_character
from roadhop.game.grid import Grid
from roadhop.graphics.primitives import Buffer, Color, blend_rect, draw_rect
from roadhop.graphics.shading import hex_to_rgb, shade_color
from roadhop.graphics.voxel import draw_cube

if TYPE_CHECKING:
    from roadhop.game.world import World

TREE_TRUNK = hex_to_rgb("#8b4513")
TREE_LEAVES = hex_to_rgb("#228b22")
WHEEL = hex_to_rgb("#222222")


class MoveResult(Enum):
    """Outcome of a single player step."""

    BLOCKED = auto()
    SIDEWAYS = auto()
    FORWARD = auto()
    SCROLL = auto()     # Forward step absorbed by scrolling the world
    BACKWARD = auto()

    @property
    def is_forward(self) -> bool:
        return self in (MoveResult.FORWARD, MoveResult.SCROLL)


class Player:
    """The hopping character, positioned on an integer grid cell."""

    # Sprite is inset from its cell on every side
    INSET = 5

    HOP_FRAMES = 8
    HOP_HEIGHT = 6.0

    def __init__(
        self,
        character: CharacterType,
        grid: Grid,
        col: int | None = None,
        row: int | None = None,
    ) -> None:
        self.character = character
        self.grid = grid
        self.col = grid.cols // 2 if col is None else col
        self.row = grid.start_row if row is None else row
        self.facing = Facing.DOWN
        self._hop_timer = 0

    @property
    def x(self) -> int:
        return self.col * self.grid.size

    @property
    def y(self) -> int:
        return self.row * self.grid.size

    @property
    def width(self) -> int:
        return self.grid.size - 2 * self.INSET

    @property
    def height(self) -> int:
        return self.grid.size - 2 * self.INSET

    @property
    def offset_y(self) -> float:
        """Upward hop displacement for the current frame (negative is up)."""
        if self._hop_timer <= 0:
            return 0.0
        phase = 1.0 - self._hop_timer / self.HOP_FRAMES
        return -math.sin(phase * math.pi) * self.HOP_HEIGHT

    @property
    def render_y(self) -> float:
        return self.y + self.height

    def face(self, dx: int, dy: int) -> None:
        if dx < 0:
            self.facing = Facing.LEFT
        elif dx > 0:
            self.facing = Facing.RIGHT
        if dy < 0:
            self.facing = Facing.UP
        elif dy > 0:
            self.facing = Facing.DOWN

    def move(self, dx: int, dy: int, world: "World") -> MoveResult:
        """Try to step one cell.

        Horizontal and vertical parts are resolved independently against
        trees; vehicles never block. A forward step whose destination row
        is above the scroll threshold leaves the player where it is and
        reports ``SCROLL`` so the caller can move the world instead.
        """
        self.face(dx, dy)
        result = MoveResult.BLOCKED

        if dx:
            new_col = self.col + dx
            if self.grid.in_cols(new_col) and not world.is_blocked(self.row, new_col):
                self.col = new_col
                result = MoveResult.SIDEWAYS

        if dy:
            new_row = self.row + dy
            if world.is_blocked(new_row, self.col):
                pass
            elif dy < 0:
                if new_row < self.grid.scroll_threshold_row:
                    result = MoveResult.SCROLL
                else:
                    self.row = new_row
                    result = MoveResult.FORWARD
            elif self.grid.in_rows(new_row):
                self.row = new_row
                result = MoveResult.BACKWARD

        if result is not MoveResult.BLOCKED:
            self._hop_timer = self.HOP_FRAMES
        return result

    def update(self) -> None:
        if self._hop_timer > 0:
            self._hop_timer -= 1

    def draw(self, buffer: Buffer) -> None:
        cx = self.x + self.INSET
        cy = self.y + self.INSET + self.offset_y
        draw_character(buffer, self.character, self.facing, cx, cy)


class Vehicle:
    """A car or truck driving along a road lane."""

    INSET = 5

    def __init__(
        self,
        x: float,
        row: int,
        width: float,
        speed: float,
        direction: int,
        color: Color,
        grid: Grid,
    ) -> None:
        self.x = x
        self.row = row
        self.width = width
        self.speed = speed
        self.direction = direction
        self.color = color
        self.grid = grid

    @property
    def y(self) -> int:
        return self.row * self.grid.size

    @property
    def height(self) -> int:
        return self.grid.size - 2 * self.INSET

    @property
    def render_y(self) -> float:
        return self.y + self.height

    def update(self) -> None:
        self.x += self.speed * self.direction

    def is_off_screen(self, margin: float) -> bool:
        if self.direction > 0:
            return self.x > self.grid.width + margin
        return self.x + self.width < -margin

    def draw(self, buffer: Buffer) -> None:
        x, y, w = self.x, self.y, self.width

        blend_rect(buffer, x + 5, y + 25, w - 10, 10, (0, 0, 0), 0.3)
        draw_cube(buffer, x, y + 5, w, 20, 20, self.color)

        cabin_w = w * 0.6
        cabin_x = x + (w - cabin_w) / 2
        draw_cube(buffer, cabin_x, y - 10, cabin_w, 15, 15, shade_color(self.color, 0.4))

        draw_rect(buffer, x + 5, y + 20, 8, 8, WHEEL)
        draw_rect(buffer, x + w - 13, y + 20, 8, 8, WHEEL)


class Tree:
    """Static obstacle occupying one grid cell of a safe lane."""

    def __init__(self, col: int, row: int, grid: Grid) -> None:
        self.col = col
        self.row = row
        self.grid = grid

    @property
    def x(self) -> int:
        return self.col * self.grid.size

    @property
    def y(self) -> int:
        return self.row * self.grid.size

    @property
    def height(self) -> int:
        return self.grid.size

    @property
    def render_y(self) -> float:
        return self.y + self.height

    def draw(self, buffer: Buffer) -> None:
        x, y = self.x, self.y
        draw_cube(buffer, x + 12, y + 10, 16, 30, 16, TREE_TRUNK)
        draw_cube(buffer, x, y - 20, 40, 30, 30, TREE_LEAVES)
        draw_cube(buffer, x + 5, y - 45, 30, 25, 25, shade_color(TREE_LEAVES, 0.1))
