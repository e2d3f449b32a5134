"""
Pytest configuration and shared test helpers for Fauxtoshop tests.

Forces matplotlib onto the non-interactive Agg backend and provides the
helpers shared by the TestCase modules: a scripted random source, sample
colors and a gradient grid builder.
"""

import matplotlib

matplotlib.use("Agg")

from FT_Libs.ImageEditingLib.image_models import PixelGrid

# Sample packed colors
SAMPLE_COLORS = [
    0xFF0000,  # Red
    0x00FF00,  # Green
    0x0000FF,  # Blue
    0xFFFFFF,  # White
    0x000000,  # Black
    0x808080,  # Gray
]


class ScriptedRandomSource:
    """Random source that replays a fixed list of integers."""

    def __init__(self, values):
        self._values = list(values)
        self.calls = []

    def next_int_in_range(self, low, high):
        value = self._values.pop(0)
        self.calls.append((low, high, value))
        return value


def make_gradient_grid():
    """A 4x5 grid where every cell has a distinct color."""
    return PixelGrid([[(row * 40) << 16 | (col * 50) for col in range(5)] for row in range(4)])


def identity_scatter_values(grid):
    """Random draws that make Scatter copy every cell from itself."""
    values = []
    for row in range(grid.num_rows):
        for col in range(grid.num_cols):
            values.extend([row, col])
    return values
