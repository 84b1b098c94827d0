"""The scrolling stack of lanes."""

import logging
import random
from typing import Iterator, List, Optional, Union

from roadhop.game.entities import Player, Tree, Vehicle
from roadhop.game.grid import Grid
from roadhop.game.lane import Lane

logger = logging.getLogger(__name__)


class World:
    """Ordered lanes covering the board, top (row 0) to bottom.

    The player never scrolls off the top: once it reaches the threshold,
    the world scrolls down under it one row at a time, dropping the
    bottom lane and generating a fresh one at the top.
    """

    def __init__(self, grid: Grid, rng: Optional[random.Random] = None) -> None:
        self.grid = grid
        self._rng = rng or random.Random()
        self.lanes: List[Lane] = []
        self.scroll_count = 0

    def reset(self, score: int = 0) -> None:
        self.lanes = [self._new_lane(row, score) for row in range(self.grid.rows)]
        self.scroll_count = 0
        logger.debug(f"World reset with {len(self.lanes)} lanes")

    def _new_lane(self, row: int, score: int) -> Lane:
        return Lane(row, score, self.grid, rng=self._rng)

    def scroll(self, score: int) -> Lane:
        """Shift every lane down one row and stream a new lane in at the top.

        Args:
            score: Current score, used to scale the new lane's speed

        Returns:
            The lane that was added
        """
        for lane in self.lanes:
            lane.shift(1)
        self.lanes = [lane for lane in self.lanes if lane.row < self.grid.rows]

        lane = self._new_lane(0, score)
        self.lanes.insert(0, lane)
        self.scroll_count += 1
        logger.debug(f"World scrolled (#{self.scroll_count}), new lane {lane.ground.name}")
        return lane

    def lane_at(self, row: int) -> Optional[Lane]:
        for lane in self.lanes:
            if lane.row == row:
                return lane
        return None

    def is_blocked(self, row: int, col: int) -> bool:
        lane = self.lane_at(row)
        return lane is not None and lane.tree_at(col)

    def update(self) -> None:
        for lane in self.lanes:
            lane.update()

    def collides(self, player: Player) -> bool:
        return any(lane.collides(player) for lane in self.lanes)

    def entities(self) -> Iterator[Union[Vehicle, Tree]]:
        for lane in self.lanes:
            yield from lane.vehicles
            yield from lane.trees
