"""One horizontal strip of the play field."""

import random
from enum import Enum, auto
from typing import List, Optional

from roadhop.game.entities import Player, Tree, Vehicle
from roadhop.game.grid import Grid
from roadhop.graphics.primitives import Buffer, draw_rect
from roadhop.graphics.shading import hex_to_rgb, hsl_to_rgb


class GroundType(Enum):
    ROAD = auto()
    SAFE = auto()


GROUND_COLORS = {
    GroundType.ROAD: (hex_to_rgb("#555555"), hex_to_rgb("#444444")),
    GroundType.SAFE: (hex_to_rgb("#7cfc00"), hex_to_rgb("#5bb800")),
}


class Lane:
    """A road with traffic or a safe strip of grass with trees.

    Speed and traffic are rolled once at construction; harder lanes
    appear as the score grows.
    """

    # Difficulty
    BASE_SPEED_MIN = 2.0
    BASE_SPEED_RANGE = 2.0
    SPEED_PER_POINT = 0.02
    MAX_SPEED_MULTIPLIER = 3.5

    # Generation
    ROAD_CHANCE = 0.6
    TREE_CHANCE = 0.7
    MAX_TREES = 2

    # Traffic
    SPAWN_CHANCE = 0.02
    SPAWN_CLEARANCE_CELLS = 2
    LONG_VEHICLE_CHANCE = 0.3
    SHORT_VEHICLE_CELLS = 1.5
    LONG_VEHICLE_CELLS = 2.5
    OFFSCREEN_MARGIN = 100

    # Collision bands are shrunk so grazing contacts don't count
    COLLISION_INSET = 5
    EDGE_STRIP = 5

    def __init__(
        self,
        row: int,
        score: int,
        grid: Grid,
        rng: Optional[random.Random] = None,
        force_safe: bool = False,
    ) -> None:
        self.row = row
        self.grid = grid
        self._rng = rng or random.Random()
        self.vehicles: List[Vehicle] = []
        self.trees: List[Tree] = []

        multiplier = min(1 + score * self.SPEED_PER_POINT, self.MAX_SPEED_MULTIPLIER)
        self.speed = (self._rng.random() * self.BASE_SPEED_RANGE + self.BASE_SPEED_MIN) * multiplier
        self.direction = 1 if self._rng.random() < 0.5 else -1

        is_road = self._rng.random() < self.ROAD_CHANCE
        if force_safe or grid.is_start_row(row):
            is_road = False
        self.ground = GroundType.ROAD if is_road else GroundType.SAFE

        if self.ground is GroundType.SAFE and self._rng.random() < self.TREE_CHANCE:
            for _ in range(self._rng.randint(0, self.MAX_TREES)):
                self.add_tree(self._rng.randrange(grid.cols))

    @property
    def y(self) -> int:
        return self.row * self.grid.size

    @property
    def is_road(self) -> bool:
        return self.ground is GroundType.ROAD

    def add_tree(self, col: int) -> None:
        if not self.tree_at(col):
            self.trees.append(Tree(col, self.row, self.grid))

    def remove_tree(self, col: int) -> None:
        self.trees = [tree for tree in self.trees if tree.col != col]

    def tree_at(self, col: int) -> bool:
        return any(tree.col == col for tree in self.trees)

    def add_vehicle(self, x: float, width: float) -> Vehicle:
        color = hsl_to_rgb(self._rng.random() * 360, 0.7, 0.5)
        vehicle = Vehicle(x, self.row, width, self.speed, self.direction, color, self.grid)
        self.vehicles.append(vehicle)
        return vehicle

    def shift(self, rows: int = 1) -> None:
        """Move the lane and everything on it down by whole rows."""
        self.row += rows
        for vehicle in self.vehicles:
            vehicle.row = self.row
        for tree in self.trees:
            tree.row = self.row

    def update(self) -> None:
        if not self.is_road:
            return

        if self._rng.random() < self.SPAWN_CHANCE and self._spawn_edge_clear():
            cells = self.LONG_VEHICLE_CELLS if self._rng.random() < self.LONG_VEHICLE_CHANCE else self.SHORT_VEHICLE_CELLS
            width = self.grid.to_px(cells)
            x = -width if self.direction > 0 else self.grid.width
            self.add_vehicle(x, width)

        for vehicle in self.vehicles:
            vehicle.update()
        self.vehicles = [v for v in self.vehicles if not v.is_off_screen(self.OFFSCREEN_MARGIN)]

    def _spawn_edge_clear(self) -> bool:
        """No vehicle is still sitting near the edge new traffic enters from."""
        clearance = self.grid.to_px(self.SPAWN_CLEARANCE_CELLS)
        for vehicle in self.vehicles:
            if self.direction > 0 and vehicle.x < clearance:
                return False
            if self.direction < 0 and vehicle.x > self.grid.width - clearance:
                return False
        return True

    def band_overlaps(self, player: Player) -> bool:
        top = self.y + self.COLLISION_INSET
        bottom = self.y + self.grid.size - self.COLLISION_INSET
        return player.y < bottom and player.y + player.height > top

    def collides(self, player: Player) -> bool:
        if not self.band_overlaps(player):
            return False

        inset = self.COLLISION_INSET
        left = player.x + inset
        right = player.x + player.width - inset
        return any(
            left < vehicle.x + vehicle.width - inset and right > vehicle.x + inset
            for vehicle in self.vehicles
        )

    def draw_ground(self, buffer: Buffer) -> None:
        top, edge = GROUND_COLORS[self.ground]
        size = self.grid.size
        draw_rect(buffer, 0, self.y, self.grid.width, size, top)
        draw_rect(buffer, 0, self.y + size - self.EDGE_STRIP, self.grid.width, self.EDGE_STRIP, edge)
