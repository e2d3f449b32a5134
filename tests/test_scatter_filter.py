"""
Tests for the scatter filter.

Tests cover:
- Output dimensions
- Source cells stay inside the radius window and the grid
- Rejection sampling of out-of-bounds candidates
- Seeded repeatability
- Parameter validation
"""

import unittest

import numpy as np

from FT_Libs.ImageEditingLib.image_models import InvalidParameterError, PixelGrid
from FT_Libs.ImageEditingLib.scatter_filter import (
    NumpyRandomSource,
    ScatterSamplingError,
    apply_scatter,
)
from FT_Libs.ImageEditingLib import scatter_filter

from conftest import ScriptedRandomSource


class RecordingRandomSource:
    """Wraps NumpyRandomSource and records every draw."""

    def __init__(self, seed):
        self._source = NumpyRandomSource(seed)
        self.draws = []

    def next_int_in_range(self, low, high):
        value = self._source.next_int_in_range(low, high)
        self.draws.append((low, high, value))
        return value


class TestScatterFilter(unittest.TestCase):
    """Test scatter output."""

    def setUp(self):
        # Every cell holds a unique value encoding its position
        self.rows, self.cols = 9, 7
        self.grid = PixelGrid([[row * 256 + col for col in range(self.cols)] for row in range(self.rows)])

    def _source_of(self, value):
        return value // 256, value % 256

    def test_dimensions_preserved(self):
        result = apply_scatter(self.grid, 3, NumpyRandomSource(seed=1))

        self.assertEqual(result.shape, self.grid.shape)

    def test_sources_within_radius_and_bounds(self):
        for radius in (1, 2, 5, 100):
            result = apply_scatter(self.grid, radius, NumpyRandomSource(seed=radius))
            for row in range(self.rows):
                for col in range(self.cols):
                    source_row, source_col = self._source_of(result[row, col])
                    self.assertTrue(self.grid.in_bounds(source_row, source_col))
                    self.assertLessEqual(abs(source_row - row), radius)
                    self.assertLessEqual(abs(source_col - col), radius)

    def test_draws_use_closed_window_around_cell(self):
        source = RecordingRandomSource(seed=3)

        apply_scatter(self.grid, 2, source)

        for low, high, value in source.draws:
            self.assertEqual(high - low, 4)
            self.assertTrue(low <= value <= high)

    def test_seeded_runs_repeat(self):
        first = apply_scatter(self.grid, 4, NumpyRandomSource(seed=42))
        second = apply_scatter(self.grid, 4, NumpyRandomSource(seed=42))

        self.assertEqual(first, second)

    def test_input_not_modified(self):
        before = self.grid.pixels.copy()

        apply_scatter(self.grid, 5, NumpyRandomSource(seed=0))

        self.assertTrue(np.array_equal(self.grid.pixels, before))

    def test_default_random_source(self):
        result = apply_scatter(self.grid, 1)

        self.assertEqual(result.shape, self.grid.shape)

    def test_single_pixel_grid(self):
        grid = PixelGrid([[0xABCDEF]])

        result = apply_scatter(grid, 1, NumpyRandomSource(seed=5))

        self.assertEqual(result, grid)


class TestScatterRejectionSampling(unittest.TestCase):
    """Test that out-of-bounds candidates are redrawn, not clamped."""

    def test_out_of_bounds_candidate_is_redrawn(self):
        grid = PixelGrid([[0x000001, 0x000002], [0x000003, 0x000004]])
        # Cell (0,0): (-1,0) rejected, then (1,1) accepted.
        # Remaining cells each accept their first draw.
        source = ScriptedRandomSource([
            -1, 0, 1, 1,
            0, 0,
            1, 0,
            0, 1,
        ])

        result = apply_scatter(grid, 1, source)

        self.assertEqual(result[0, 0], 0x000004)
        self.assertEqual(result[0, 1], 0x000001)
        self.assertEqual(result[1, 0], 0x000003)
        self.assertEqual(result[1, 1], 0x000002)
        # Both coordinates are redrawn after a rejection
        self.assertEqual(source.calls[2][:2], (-1, 1))
        self.assertEqual(source.calls[3][:2], (-1, 1))

    def test_retry_bound_raises(self):
        class AlwaysOutside:
            def next_int_in_range(self, low, high):
                return low - 1

        original = scatter_filter.MAX_SCATTER_ATTEMPTS
        scatter_filter.MAX_SCATTER_ATTEMPTS = 10
        try:
            with self.assertRaises(ScatterSamplingError):
                apply_scatter(PixelGrid([[1, 2]]), 1, AlwaysOutside())
        finally:
            scatter_filter.MAX_SCATTER_ATTEMPTS = original


class TestScatterValidation(unittest.TestCase):
    """Test radius validation."""

    def setUp(self):
        self.grid = PixelGrid.filled(3, 3, 0x123456)

    def test_radius_zero_rejected(self):
        with self.assertRaises(InvalidParameterError):
            apply_scatter(self.grid, 0)

    def test_radius_too_large_rejected(self):
        with self.assertRaises(InvalidParameterError):
            apply_scatter(self.grid, 101)

    def test_non_integer_radius_rejected(self):
        with self.assertRaises(InvalidParameterError):
            apply_scatter(self.grid, 2.5)

    def test_invalid_radius_draws_nothing(self):
        source = ScriptedRandomSource([])

        with self.assertRaises(InvalidParameterError):
            apply_scatter(self.grid, -3, source)
        self.assertEqual(source.calls, [])


if __name__ == "__main__":
    unittest.main()
