"""
Tests for the edge detection filter.

Tests cover:
- Uniform grids produce no edges
- A single differing pixel marks itself and its in-bounds neighbours
- Border and corner handling without padding
- Strict threshold comparison
- Determinism and validation
"""

import unittest
from unittest.mock import patch

import numpy as np

from FT_Libs.constants import BLACK, WHITE
from FT_Libs.ImageEditingLib import edge_filter
from FT_Libs.ImageEditingLib.color_distance import color_distance, color_distance_array
from FT_Libs.ImageEditingLib.edge_filter import apply_edge_detection
from FT_Libs.ImageEditingLib.image_models import InvalidParameterError, PixelGrid


def black_cells(grid):
    return {
        (row, col)
        for row in range(grid.num_rows)
        for col in range(grid.num_cols)
        if grid[row, col] == BLACK
    }


class TestEdgeDetection(unittest.TestCase):
    """Test edge detection output."""

    def test_uniform_grid_is_all_white(self):
        for color in (WHITE, BLACK, 0x3366CC):
            for threshold in (1, 50, 255):
                result = apply_edge_detection(PixelGrid.filled(4, 6, color), threshold)
                self.assertEqual(result, PixelGrid.filled(4, 6, WHITE))

    def test_single_black_pixel_in_middle(self):
        grid = PixelGrid.filled(5, 5, WHITE).with_pixel(2, 2, BLACK)

        result = apply_edge_detection(grid, 1)

        expected = {(row, col) for row in range(1, 4) for col in range(1, 4)}
        self.assertEqual(black_cells(result), expected)

    def test_single_black_pixel_in_corner(self):
        grid = PixelGrid.filled(4, 4, WHITE).with_pixel(0, 0, BLACK)

        result = apply_edge_detection(grid, 1)

        self.assertEqual(black_cells(result), {(0, 0), (0, 1), (1, 0), (1, 1)})

    def test_single_black_pixel_on_top_edge(self):
        grid = PixelGrid.filled(3, 5, WHITE).with_pixel(0, 2, BLACK)

        result = apply_edge_detection(grid, 1)

        expected = {(0, 1), (0, 2), (0, 3), (1, 1), (1, 2), (1, 3)}
        self.assertEqual(black_cells(result), expected)

    def test_single_black_pixel_on_right_edge(self):
        grid = PixelGrid.filled(5, 3, WHITE).with_pixel(2, 2, BLACK)

        result = apply_edge_detection(grid, 1)

        expected = {(1, 1), (1, 2), (2, 1), (2, 2), (3, 1), (3, 2)}
        self.assertEqual(black_cells(result), expected)

    def test_threshold_is_strictly_exceeded(self):
        # Channel difference of exactly 20
        grid = PixelGrid([[0x000000, 0x140000]])

        self.assertEqual(black_cells(apply_edge_detection(grid, 20)), set())
        self.assertEqual(black_cells(apply_edge_detection(grid, 19)), {(0, 0), (0, 1)})

    def test_vertical_boundary(self):
        grid = PixelGrid([[0x000000, 0x000000, 0xFFFFFF, 0xFFFFFF]] * 3)

        result = apply_edge_detection(grid, 100)

        expected = {(row, col) for row in range(3) for col in (1, 2)}
        self.assertEqual(black_cells(result), expected)

    def test_no_wraparound(self):
        # Left and right columns differ only from each other, never adjacent
        grid = PixelGrid([[0xFF0000, 0x808080, 0x808080, 0x808080, 0x0000FF]])

        result = apply_edge_detection(grid, 200)

        self.assertEqual(black_cells(result), set())

    def test_output_is_black_and_white(self):
        grid = PixelGrid([[0x102030, 0xA0B0C0], [0x405060, 0x000000]])

        result = apply_edge_detection(grid, 30)

        values = {value for row in result.rows() for value in row}
        self.assertTrue(values <= {BLACK, WHITE})
        self.assertEqual(result.shape, grid.shape)

    def test_deterministic(self):
        grid = PixelGrid([[0x102030, 0xA0B0C0, 0x000000], [0x405060, 0x000000, 0xFFFFFF]])

        self.assertEqual(apply_edge_detection(grid, 40), apply_edge_detection(grid, 40))

    def test_single_pixel_grid_is_white(self):
        result = apply_edge_detection(PixelGrid([[BLACK]]), 1)

        self.assertEqual(result[0, 0], WHITE)


class TestEdgeDetectionReference(unittest.TestCase):
    """Compare against a cell-by-cell evaluation using the scalar distance."""

    @staticmethod
    def reference_edges(grid, threshold):
        expected = set()
        for row in range(grid.num_rows):
            for col in range(grid.num_cols):
                for row_offset, col_offset in edge_filter.NEIGHBOR_OFFSETS:
                    neighbor_row, neighbor_col = row + row_offset, col + col_offset
                    if not grid.in_bounds(neighbor_row, neighbor_col):
                        continue
                    if color_distance(grid[row, col], grid[neighbor_row, neighbor_col]) > threshold:
                        expected.add((row, col))
                        break
        return expected

    def test_matches_reference_on_random_grids(self):
        rng = np.random.default_rng(1234)
        for trial in range(40):
            num_rows, num_cols = rng.integers(1, 8, size=2)
            # Few distinct colors so both edges and flat areas occur
            palette = rng.integers(0, 0x1000000, size=3)
            grid = PixelGrid(rng.choice(palette, size=(num_rows, num_cols)))
            threshold = int(rng.integers(1, 256))

            with self.subTest(trial=trial):
                result = apply_edge_detection(grid, threshold)
                self.assertEqual(black_cells(result), self.reference_edges(grid, threshold))

    def test_uses_shared_color_distance(self):
        grid = PixelGrid([[0x000000, 0xFFFFFF], [0x808080, 0x101010]])

        with patch.object(edge_filter, "color_distance_array", wraps=color_distance_array) as distance:
            apply_edge_detection(grid, 10)

        self.assertEqual(distance.call_count, len(edge_filter.NEIGHBOR_OFFSETS))


class TestEdgeDetectionValidation(unittest.TestCase):
    """Test threshold validation."""

    def test_zero_threshold_rejected(self):
        with self.assertRaises(InvalidParameterError):
            apply_edge_detection(PixelGrid.filled(2, 2, WHITE), 0)

    def test_negative_threshold_rejected(self):
        with self.assertRaises(InvalidParameterError):
            apply_edge_detection(PixelGrid.filled(2, 2, WHITE), -5)


if __name__ == "__main__":
    unittest.main()
