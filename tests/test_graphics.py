"""Tests for color shading and the block drawing primitives."""

import unittest

import numpy as np

from roadhop.graphics.primitives import blend_rect, dim, draw_polygon, draw_rect, draw_text, measure_text
from roadhop.graphics.shading import hex_to_rgb, hsl_to_rgb, rgb_to_hex, shade_color
from roadhop.graphics.text_utils import draw_centered_text
from roadhop.graphics.voxel import draw_cube


def blank(width=100, height=100):
    return np.zeros((height, width, 3), dtype=np.uint8)


class TestShadeColor(unittest.TestCase):
    """shade_color moves channels toward white or black."""

    def test_lighten_black(self):
        self.assertEqual(shade_color("#000000", 0.2), (51, 51, 51))

    def test_darken_white(self):
        self.assertEqual(shade_color("#ffffff", -0.2), (204, 204, 204))

    def test_zero_percent_is_identity(self):
        self.assertEqual(shade_color((12, 200, 99), 0.0), (12, 200, 99))

    def test_full_percent_hits_extremes(self):
        self.assertEqual(shade_color((12, 200, 99), 1.0), (255, 255, 255))
        self.assertEqual(shade_color((12, 200, 99), -1.0), (0, 0, 0))

    def test_tuple_and_hex_agree(self):
        self.assertEqual(shade_color("#228b22", 0.1), shade_color((0x22, 0x8B, 0x22), 0.1))

    def test_per_channel_rounding(self):
        # (255 - 100) * 0.2 = 31, (0 - 100) * 0.2 = -20
        self.assertEqual(shade_color((100, 100, 100), 0.2), (131, 131, 131))
        self.assertEqual(shade_color((100, 100, 100), -0.2), (80, 80, 80))


class TestColorHelpers(unittest.TestCase):

    def test_hex_to_rgb(self):
        self.assertEqual(hex_to_rgb("#7cfc00"), (124, 252, 0))
        self.assertEqual(hex_to_rgb("#555"), (85, 85, 85))

    def test_hex_round_trip(self):
        self.assertEqual(rgb_to_hex(hex_to_rgb("#ff9800")), "#ff9800")

    def test_bad_hex_raises(self):
        with self.assertRaises(ValueError):
            hex_to_rgb("#12345")

    def test_hsl_primaries(self):
        self.assertEqual(hsl_to_rgb(0, 1.0, 0.5), (255, 0, 0))
        self.assertEqual(hsl_to_rgb(120, 1.0, 0.5), (0, 255, 0))
        self.assertEqual(hsl_to_rgb(360, 1.0, 0.5), (255, 0, 0))


class TestPrimitives(unittest.TestCase):

    def test_draw_rect_clips_to_buffer(self):
        buf = blank(10, 10)
        draw_rect(buf, -5, -5, 8, 8, (255, 0, 0))
        self.assertEqual(tuple(buf[0, 0]), (255, 0, 0))
        self.assertEqual(tuple(buf[2, 2]), (255, 0, 0))
        self.assertEqual(tuple(buf[3, 3]), (0, 0, 0))

    def test_draw_rect_outside_is_noop(self):
        buf = blank(10, 10)
        draw_rect(buf, 20, 20, 5, 5, (255, 0, 0))
        self.assertFalse(buf.any())

    def test_draw_rect_outline(self):
        buf = blank(10, 10)
        draw_rect(buf, 0, 0, 10, 10, (9, 9, 9), filled=False)
        self.assertEqual(tuple(buf[0, 5]), (9, 9, 9))
        self.assertEqual(tuple(buf[5, 9]), (9, 9, 9))
        self.assertEqual(tuple(buf[5, 5]), (0, 0, 0))

    def test_polygon_fills_square_either_winding(self):
        for points in ([(2, 2), (8, 2), (8, 8), (2, 8)], [(2, 2), (2, 8), (8, 8), (8, 2)]):
            buf = blank(10, 10)
            draw_polygon(buf, points, (1, 2, 3))
            self.assertEqual(tuple(buf[5, 5]), (1, 2, 3))
            self.assertEqual(tuple(buf[0, 0]), (0, 0, 0))
            self.assertEqual(tuple(buf[9, 9]), (0, 0, 0))

    def test_polygon_parallelogram(self):
        buf = blank(20, 20)
        draw_polygon(buf, [(5, 10), (10, 5), (15, 5), (10, 10)], (7, 7, 7))
        self.assertEqual(tuple(buf[7, 10]), (7, 7, 7))
        # Left of the slanted edge
        self.assertEqual(tuple(buf[6, 5]), (0, 0, 0))

    def test_blend_rect_half_black(self):
        buf = blank(4, 4)
        buf[:, :] = 200
        blend_rect(buf, 0, 0, 2, 2, (0, 0, 0), 0.5)
        self.assertEqual(tuple(buf[0, 0]), (100, 100, 100))
        self.assertEqual(tuple(buf[3, 3]), (200, 200, 200))

    def test_dim(self):
        buf = blank(2, 2)
        buf[:, :] = 100
        dim(buf, 0.5)
        self.assertEqual(tuple(buf[1, 1]), (50, 50, 50))

    def test_text_measure_matches_draw(self):
        buf = blank(200, 20)
        drawn = draw_text(buf, "SCORE 12", 0, 0, (255, 255, 255), scale=2)
        self.assertEqual(drawn, measure_text("SCORE 12", scale=2))
        self.assertTrue(buf.any())

    def test_centered_text_is_centered(self):
        buf = blank(100, 10)
        width, _ = draw_centered_text(buf, "AB", 0, (255, 255, 255))
        cols = np.nonzero(buf.any(axis=(0, 2)))[0]
        left = cols.min()
        self.assertEqual(left, (100 - width) // 2)


class TestDrawCube(unittest.TestCase):
    """Front face, lit top and shaded right side."""

    def setUp(self):
        self.buf = blank()
        self.color = (100, 100, 100)
        # Front face spans x 20..50, y 40..60; depth 20 gives a 12px top band
        # and an 8px skew for the side and top parallelograms
        draw_cube(self.buf, 20, 40, 30, 20, 20, self.color)

    def test_front_face_is_base_color(self):
        self.assertEqual(tuple(self.buf[50, 35]), self.color)

    def test_top_band_is_lit(self):
        self.assertEqual(tuple(self.buf[30, 25]), (131, 131, 131))

    def test_top_parallelogram_extends_right(self):
        self.assertEqual(tuple(self.buf[36, 52]), (131, 131, 131))

    def test_right_side_is_shaded(self):
        self.assertEqual(tuple(self.buf[48, 54]), (80, 80, 80))

    def test_nothing_left_of_block(self):
        self.assertEqual(tuple(self.buf[50, 10]), (0, 0, 0))

    def test_accepts_hex_color(self):
        buf = blank()
        draw_cube(buf, 20, 40, 30, 20, 20, "#646464")
        self.assertTrue(np.array_equal(buf, self.buf))


if __name__ == "__main__":
    unittest.main()
