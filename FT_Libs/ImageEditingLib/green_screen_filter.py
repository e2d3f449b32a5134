"""
Green Screen Filter.

Composites an overlay ("sticker") onto a background at a given row and
column. Overlay pixels close to pure green are treated as backing and let
the background through; all other overlay pixels replace the background.
Parts of the overlay that fall outside the background are cropped.

Example:
    >>> background = PixelGrid.filled(4, 4, 0x0000FF)
    >>> sticker = PixelGrid([[0xFF0000, 0x00FF00]])
    >>> result = apply_green_screen(background, sticker, tolerance=10, place_row=1, place_col=1)
    >>> hex(result[1, 1]), hex(result[1, 2])
    ('0xff0000', '0xff')
"""

import logging

import numpy as np

from FT_Libs.constants import GREEN, GREEN_SCREEN_TOLERANCE_MIN
from FT_Libs.ImageEditingLib.color_distance import color_distance_array
from FT_Libs.ImageEditingLib.image_models import PixelGrid, validate_int_parameter

logger = logging.getLogger(__name__)


def apply_green_screen(
    background: PixelGrid,
    overlay: PixelGrid,
    tolerance: int,
    place_row: int,
    place_col: int,
) -> PixelGrid:
    """
    Composite ``overlay`` onto ``background`` with its top-left at (place_row, place_col).

    Args:
        background: Background pixel grid; defines the output size
        overlay: Sticker pixel grid with a green backing
        tolerance: Overlay pixels whose distance from GREEN is <= tolerance
                   are treated as backing (> 0)
        place_row: Background row of the overlay's top edge (may be negative)
        place_col: Background column of the overlay's left edge (may be negative)

    Returns:
        New PixelGrid with the background's dimensions

    Raises:
        InvalidParameterError: If tolerance is not a positive integer
    """
    tolerance = validate_int_parameter("tolerance", tolerance, GREEN_SCREEN_TOLERANCE_MIN)
    place_row = int(place_row)
    place_col = int(place_col)

    screened = background.pixels.copy()

    # Overlap of the placement rectangle with the background
    row_start = max(place_row, 0)
    row_stop = min(place_row + overlay.num_rows, background.num_rows)
    col_start = max(place_col, 0)
    col_stop = min(place_col + overlay.num_cols, background.num_cols)

    if row_start < row_stop and col_start < col_stop:
        sticker = overlay.pixels[
            row_start - place_row:row_stop - place_row,
            col_start - place_col:col_stop - place_col,
        ]
        foreground = color_distance_array(sticker, GREEN) > tolerance
        screened[row_start:row_stop, col_start:col_stop] = np.where(
            foreground,
            sticker,
            screened[row_start:row_stop, col_start:col_stop],
        )
    else:
        logger.debug(f"Overlay placed at ({place_row}, {place_col}) misses the background")

    return PixelGrid(screened)
