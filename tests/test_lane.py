"""Tests for lane generation, traffic and collision."""

import random
import unittest

import numpy as np

from roadhop.game.characters import CharacterType
from roadhop.game.entities import Player
from roadhop.game.grid import Grid
from roadhop.game.lane import GROUND_COLORS, GroundType, Lane

from support import FixedRandom


def road_lane(grid, row=5, direction=1, speed=3.0, roll=0.99):
    lane = Lane(row, 0, grid, rng=random.Random(1))
    lane.ground = GroundType.ROAD
    lane.trees = []
    lane.vehicles = []
    lane.direction = direction
    lane.speed = speed
    lane._rng = FixedRandom(roll)
    return lane


class TestLaneGeneration(unittest.TestCase):

    def setUp(self):
        self.grid = Grid()

    def test_start_rows_are_always_safe(self):
        for seed in range(200):
            rng = random.Random(seed)
            for row in (self.grid.rows - 1, self.grid.rows - 2):
                self.assertIs(Lane(row, 0, self.grid, rng=rng).ground, GroundType.SAFE)

    def test_force_safe(self):
        for seed in range(50):
            lane = Lane(0, 0, self.grid, rng=random.Random(seed), force_safe=True)
            self.assertIs(lane.ground, GroundType.SAFE)

    def test_both_ground_types_appear(self):
        rng = random.Random(7)
        grounds = {Lane(3, 0, self.grid, rng=rng).ground for _ in range(100)}
        self.assertEqual(grounds, {GroundType.ROAD, GroundType.SAFE})

    def test_speed_range_at_zero_score(self):
        rng = random.Random(3)
        for _ in range(200):
            lane = Lane(3, 0, self.grid, rng=rng)
            self.assertGreaterEqual(lane.speed, 2.0)
            self.assertLess(lane.speed, 4.0)
            self.assertIn(lane.direction, (1, -1))

    def test_speed_scales_with_score(self):
        lane = Lane(3, 50, self.grid, rng=FixedRandom(0.0))
        self.assertAlmostEqual(lane.speed, 2.0 * 2.0)

    def test_speed_multiplier_is_capped(self):
        lane = Lane(3, 10_000, self.grid, rng=FixedRandom(0.0))
        self.assertAlmostEqual(lane.speed, 2.0 * 3.5)

    def test_trees_only_on_safe_lanes(self):
        rng = random.Random(11)
        for _ in range(300):
            lane = Lane(4, 0, self.grid, rng=rng)
            if lane.is_road:
                self.assertEqual(lane.trees, [])
            self.assertLessEqual(len(lane.trees), 2)
            for tree in lane.trees:
                self.assertTrue(self.grid.in_cols(tree.col))
                self.assertEqual(tree.row, lane.row)

    def test_trees_never_share_a_cell(self):
        lane = Lane(4, 0, self.grid, rng=random.Random(0), force_safe=True)
        lane.trees = []
        lane.add_tree(3)
        lane.add_tree(3)
        self.assertEqual(len(lane.trees), 1)
        self.assertTrue(lane.tree_at(3))
        lane.remove_tree(3)
        self.assertFalse(lane.tree_at(3))

    def test_new_lane_has_no_traffic(self):
        lane = Lane(4, 0, self.grid, rng=random.Random(0))
        self.assertEqual(lane.vehicles, [])


class TestLaneTraffic(unittest.TestCase):

    def setUp(self):
        self.grid = Grid()

    def test_spawn_left_edge_moving_right(self):
        lane = road_lane(self.grid, direction=1, speed=3.0, roll=0.0)
        lane.update()
        self.assertEqual(len(lane.vehicles), 1)
        car = lane.vehicles[0]
        # roll 0.0 picks the long 2.5-cell vehicle
        self.assertEqual(car.width, 100)
        self.assertAlmostEqual(car.x, -100 + 3.0)
        self.assertEqual(car.row, lane.row)
        self.assertEqual(car.direction, 1)

    def test_spawn_right_edge_moving_left(self):
        lane = road_lane(self.grid, direction=-1, speed=2.0, roll=0.0)
        lane.update()
        self.assertEqual(len(lane.vehicles), 1)
        self.assertAlmostEqual(lane.vehicles[0].x, self.grid.width - 2.0)

    def test_spawn_vetoed_while_edge_occupied(self):
        lane = road_lane(self.grid, direction=1, roll=0.0)
        lane.update()
        lane.update()
        self.assertEqual(len(lane.vehicles), 1)

    def test_spawn_allowed_once_edge_clears(self):
        lane = road_lane(self.grid, direction=1, roll=0.0)
        lane.add_vehicle(self.grid.to_px(2), 60)
        lane.update()
        self.assertEqual(len(lane.vehicles), 2)

    def test_no_spawn_on_high_roll(self):
        lane = road_lane(self.grid, roll=0.5)
        for _ in range(10):
            lane.update()
        self.assertEqual(lane.vehicles, [])

    def test_safe_lane_never_spawns(self):
        lane = road_lane(self.grid, roll=0.0)
        lane.ground = GroundType.SAFE
        lane.update()
        self.assertEqual(lane.vehicles, [])

    def test_vehicles_advance_by_speed(self):
        lane = road_lane(self.grid, direction=-1, speed=2.5)
        lane.add_vehicle(200, 60)
        lane.update()
        self.assertAlmostEqual(lane.vehicles[0].x, 197.5)

    def test_offscreen_vehicle_removed_right(self):
        lane = road_lane(self.grid, direction=1, speed=2.0)
        lane.add_vehicle(self.grid.width + 99, 60)
        lane.update()
        self.assertEqual(lane.vehicles, [])

    def test_offscreen_vehicle_removed_left(self):
        lane = road_lane(self.grid, direction=-1, speed=2.0)
        lane.add_vehicle(-159, 60)
        lane.update()
        self.assertEqual(lane.vehicles, [])

    def test_vehicle_inside_margin_kept(self):
        lane = road_lane(self.grid, direction=1, speed=2.0)
        lane.add_vehicle(self.grid.width + 50, 60)
        lane.update()
        self.assertEqual(len(lane.vehicles), 1)


class TestLaneCollision(unittest.TestCase):
    """Player at col 5, row 5: x spans 200..230 with a 5px inset each side."""

    def setUp(self):
        self.grid = Grid()
        self.lane = road_lane(self.grid, row=5)
        self.player = Player(CharacterType.PIG, self.grid, col=5, row=5)

    def test_direct_hit(self):
        self.lane.add_vehicle(self.player.x, 60)
        self.assertTrue(self.lane.collides(self.player))

    def test_empty_lane(self):
        self.assertFalse(self.lane.collides(self.player))

    def test_far_vehicle(self):
        self.lane.add_vehicle(0, 60)
        self.assertFalse(self.lane.collides(self.player))

    def test_right_edge_near_miss(self):
        # Vehicle's inset left edge lands exactly on the player's inset right edge
        self.lane.add_vehicle(self.player.x + 20, 60)
        self.assertFalse(self.lane.collides(self.player))

    def test_right_edge_overlap(self):
        self.lane.add_vehicle(self.player.x + 19, 60)
        self.assertTrue(self.lane.collides(self.player))

    def test_left_edge_near_miss(self):
        self.lane.add_vehicle(self.player.x - 50, 60)
        self.assertFalse(self.lane.collides(self.player))

    def test_left_edge_overlap(self):
        self.lane.add_vehicle(self.player.x - 49, 60)
        self.assertTrue(self.lane.collides(self.player))

    def test_other_row_never_collides(self):
        self.lane.add_vehicle(self.player.x, 60)
        for row in (4, 6):
            other = Player(CharacterType.PIG, self.grid, col=5, row=row)
            self.assertFalse(self.lane.band_overlaps(other))
            self.assertFalse(self.lane.collides(other))


class TestLaneShiftAndDraw(unittest.TestCase):

    def setUp(self):
        self.grid = Grid()

    def test_shift_moves_contents_and_keeps_offsets(self):
        lane = road_lane(self.grid, row=3)
        lane.add_vehicle(123.5, 60)
        lane.add_tree(7)
        lane.shift(2)
        self.assertEqual(lane.row, 5)
        self.assertEqual(lane.y, 200)
        self.assertEqual(lane.vehicles[0].row, 5)
        self.assertEqual(lane.vehicles[0].x, 123.5)
        self.assertEqual(lane.trees[0].row, 5)
        self.assertEqual(lane.trees[0].col, 7)

    def test_ground_strip_colors(self):
        buf = np.zeros((self.grid.height, self.grid.width, 3), dtype=np.uint8)
        lane = road_lane(self.grid, row=2)
        lane.draw_ground(buf)
        top, edge = GROUND_COLORS[GroundType.ROAD]
        self.assertEqual(tuple(buf[80 + 10, 10]), top)
        self.assertEqual(tuple(buf[80 + 38, 10]), edge)
        self.assertEqual(tuple(buf[79, 10]), (0, 0, 0))
        self.assertEqual(tuple(buf[120, 10]), (0, 0, 0))

        lane.ground = GroundType.SAFE
        lane.draw_ground(buf)
        self.assertEqual(tuple(buf[90, 10]), GROUND_COLORS[GroundType.SAFE][0])


if __name__ == "__main__":
    unittest.main()
