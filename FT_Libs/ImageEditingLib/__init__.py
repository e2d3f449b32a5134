"""
ImageEditingLib - Pixel grids, image I/O and the Fauxtoshop filters.
"""

from FT_Libs.ImageEditingLib.image_models import (
    PixelGrid,
    InvalidParameterError,
    DimensionMismatchError,
    pack_rgb,
    unpack_rgb,
)
from FT_Libs.ImageEditingLib.color_distance import color_distance, color_distance_array
from FT_Libs.ImageEditingLib.scatter_filter import (
    NumpyRandomSource,
    RandomSource,
    ScatterSamplingError,
    apply_scatter,
)
from FT_Libs.ImageEditingLib.edge_filter import apply_edge_detection
from FT_Libs.ImageEditingLib.green_screen_filter import apply_green_screen
from FT_Libs.ImageEditingLib.compare_filter import count_differing_pixels
from FT_Libs.ImageEditingLib.image_io import grid_to_image, image_to_grid, load_grid, save_grid

__all__ = [
    "PixelGrid",
    "InvalidParameterError",
    "DimensionMismatchError",
    "pack_rgb",
    "unpack_rgb",
    "color_distance",
    "color_distance_array",
    "NumpyRandomSource",
    "RandomSource",
    "ScatterSamplingError",
    "apply_scatter",
    "apply_edge_detection",
    "apply_green_screen",
    "count_differing_pixels",
    "grid_to_image",
    "image_to_grid",
    "load_grid",
    "save_grid",
]
