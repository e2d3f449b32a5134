"""
Image comparison by exact pixel count.
"""

import numpy as np

from FT_Libs.ImageEditingLib.image_models import DimensionMismatchError, PixelGrid


def count_differing_pixels(grid1: PixelGrid, grid2: PixelGrid) -> int:
    """
    Count positions whose packed colors differ.

    Raises:
        DimensionMismatchError: If the grids do not have the same dimensions
    """
    if grid1.shape != grid2.shape:
        raise DimensionMismatchError(
            f"Cannot compare a {grid1.num_rows}x{grid1.num_cols} image "
            f"with a {grid2.num_rows}x{grid2.num_cols} image"
        )
    return int(np.count_nonzero(grid1.pixels != grid2.pixels))
