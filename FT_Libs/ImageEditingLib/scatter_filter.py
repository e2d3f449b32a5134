"""
Scatter Filter.

Replaces every pixel with a randomly chosen pixel from the square window
of the given radius around it. Candidates that fall outside the image are
rejected and redrawn rather than clamped, so pixels near the border draw
more often from the interior.

Example:
    >>> from FT_Libs.ImageEditingLib.image_io import load_grid
    >>> grid = load_grid("photo.png")
    >>> scattered = apply_scatter(grid, radius=5, random_source=NumpyRandomSource(seed=7))
"""

import logging
from typing import Optional, Protocol, Tuple

import numpy as np

from FT_Libs.constants import MAX_SCATTER_ATTEMPTS, SCATTER_RADIUS_MAX, SCATTER_RADIUS_MIN
from FT_Libs.ImageEditingLib.image_models import PixelGrid, validate_int_parameter

logger = logging.getLogger(__name__)


class ScatterSamplingError(RuntimeError):
    """Raised when no in-bounds source cell was drawn within the retry bound."""


class RandomSource(Protocol):
    def next_int_in_range(self, low: int, high: int) -> int:
        """Return a uniformly distributed integer in [low, high]."""
        ...


class NumpyRandomSource:
    """RandomSource backed by a numpy Generator; pass a seed for repeatable output."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def next_int_in_range(self, low: int, high: int) -> int:
        return int(self._rng.integers(low, high, endpoint=True))


def apply_scatter(
    grid: PixelGrid,
    radius: int,
    random_source: Optional[RandomSource] = None,
) -> PixelGrid:
    """
    Scatter the pixels of a grid.

    Args:
        grid: Source pixel grid
        radius: Scatter radius in pixels (1-100)
        random_source: Source of random integers (default: unseeded NumpyRandomSource)

    Returns:
        New PixelGrid with the same dimensions

    Raises:
        InvalidParameterError: If radius is not an integer in [1, 100]
        ScatterSamplingError: If a cell exhausts MAX_SCATTER_ATTEMPTS draws
    """
    radius = validate_int_parameter("radius", radius, SCATTER_RADIUS_MIN, SCATTER_RADIUS_MAX)
    if random_source is None:
        random_source = NumpyRandomSource()

    num_rows, num_cols = grid.shape
    source = grid.pixels
    scattered = np.empty((num_rows, num_cols), dtype=np.uint32)

    for row in range(num_rows):
        for col in range(num_cols):
            source_row, source_col = _draw_source_cell(
                row, col, radius, num_rows, num_cols, random_source
            )
            scattered[row, col] = source[source_row, source_col]

    logger.debug(f"Scattered {num_rows}x{num_cols} grid with radius {radius}")
    return PixelGrid(scattered)


def _draw_source_cell(
    row: int,
    col: int,
    radius: int,
    num_rows: int,
    num_cols: int,
    random_source: RandomSource,
) -> Tuple[int, int]:
    for _ in range(MAX_SCATTER_ATTEMPTS):
        source_row = random_source.next_int_in_range(row - radius, row + radius)
        source_col = random_source.next_int_in_range(col - radius, col + radius)
        if 0 <= source_row < num_rows and 0 <= source_col < num_cols:
            return source_row, source_col

    raise ScatterSamplingError(
        f"No in-bounds source for cell ({row}, {col}) after {MAX_SCATTER_ATTEMPTS} draws"
    )
