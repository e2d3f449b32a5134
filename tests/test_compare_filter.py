"""
Tests for image comparison.
"""

import unittest

from FT_Libs.constants import BLACK, WHITE
from FT_Libs.ImageEditingLib.compare_filter import count_differing_pixels
from FT_Libs.ImageEditingLib.image_models import DimensionMismatchError, PixelGrid


class TestCountDifferingPixels(unittest.TestCase):
    """Test pixel difference counting."""

    def setUp(self):
        self.grid = PixelGrid([[0x010203, 0x040506], [0x070809, 0x0A0B0C]])

    def test_identical_grids(self):
        self.assertEqual(count_differing_pixels(self.grid, self.grid), 0)
        self.assertEqual(count_differing_pixels(self.grid, PixelGrid(self.grid.pixels)), 0)

    def test_single_change(self):
        changed = self.grid.with_pixel(1, 0, 0x070808)

        self.assertEqual(count_differing_pixels(self.grid, changed), 1)

    def test_all_changed(self):
        white = PixelGrid.filled(3, 3, WHITE)
        black = PixelGrid.filled(3, 3, BLACK)

        self.assertEqual(count_differing_pixels(white, black), 9)

    def test_symmetric(self):
        other = self.grid.with_pixel(0, 0, WHITE).with_pixel(1, 1, WHITE)

        self.assertEqual(count_differing_pixels(self.grid, other), 2)
        self.assertEqual(count_differing_pixels(other, self.grid), 2)

    def test_dimension_mismatch_rejected(self):
        with self.assertRaises(DimensionMismatchError):
            count_differing_pixels(self.grid, PixelGrid.filled(2, 3, WHITE))
        with self.assertRaises(DimensionMismatchError):
            count_differing_pixels(self.grid, PixelGrid.filled(3, 2, WHITE))

    def test_dimension_mismatch_is_value_error(self):
        with self.assertRaises(ValueError):
            count_differing_pixels(self.grid, PixelGrid.filled(1, 1, WHITE))


if __name__ == "__main__":
    unittest.main()
