"""
Edge Detection Filter.

A pixel is an edge (black) when any of its in-bounds 8-neighbours differs
from it by more than the threshold; otherwise it is white. Border pixels
are only compared against the neighbours that exist, with no padding or
wraparound.
"""

import logging

import numpy as np

from FT_Libs.constants import BLACK, EDGE_THRESHOLD_MIN, WHITE
from FT_Libs.ImageEditingLib.color_distance import color_distance_array
from FT_Libs.ImageEditingLib.image_models import PixelGrid, validate_int_parameter

logger = logging.getLogger(__name__)

# (row offset, column offset) of the 8-neighbourhood
NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def apply_edge_detection(grid: PixelGrid, threshold: int) -> PixelGrid:
    """
    Mark edges of a grid in black on a white background.

    Args:
        grid: Source pixel grid
        threshold: Color distance a neighbour must exceed to mark an edge (> 0)

    Returns:
        New PixelGrid of WHITE/BLACK pixels with the same dimensions

    Raises:
        InvalidParameterError: If threshold is not a positive integer
    """
    threshold = validate_int_parameter("threshold", threshold, EDGE_THRESHOLD_MIN)

    num_rows, num_cols = grid.shape
    pixels = grid.pixels
    edges = np.zeros((num_rows, num_cols), dtype=bool)

    for row_offset, col_offset in NEIGHBOR_OFFSETS:
        # Cells whose neighbour at this offset is inside the grid
        row_start, row_stop = max(0, -row_offset), num_rows - max(0, row_offset)
        col_start, col_stop = max(0, -col_offset), num_cols - max(0, col_offset)
        if row_start >= row_stop or col_start >= col_stop:
            continue

        cells = pixels[row_start:row_stop, col_start:col_stop]
        neighbors = pixels[
            row_start + row_offset:row_stop + row_offset,
            col_start + col_offset:col_stop + col_offset,
        ]
        distance = color_distance_array(cells, neighbors)
        edges[row_start:row_stop, col_start:col_stop] |= distance > threshold

    logger.debug(
        f"Edge detection on {num_rows}x{num_cols} grid, threshold {threshold}: "
        f"{int(edges.sum())} edge pixels"
    )
    return PixelGrid(np.where(edges, BLACK, WHITE))
