"""
Chebyshev color distance shared by edge detection and green screen.

The distance between two packed colors is the largest absolute difference
of their red, green and blue channels.
"""

from typing import Any

import numpy as np

from FT_Libs.ImageEditingLib.image_models import split_channels, unpack_rgb


def color_distance(color1: int, color2: int) -> int:
    """
    Return max(|R1-R2|, |G1-G2|, |B1-B2|) for two packed colors.

    Example:
        >>> color_distance(0xFFFFFF, 0x000000)
        255
        >>> color_distance(0x102030, 0x122a30)
        10
    """
    red1, green1, blue1 = unpack_rgb(color1)
    red2, green2, blue2 = unpack_rgb(color2)
    return max(abs(red1 - red2), abs(green1 - green2), abs(blue1 - blue2))


def color_distance_array(pixels1: Any, pixels2: Any) -> np.ndarray:
    """
    Element-wise color_distance over arrays of packed colors.

    Either argument may be a scalar color; shapes broadcast like numpy.
    """
    channels1 = split_channels(pixels1)
    channels2 = split_channels(pixels2)
    return np.abs(channels1 - channels2).max(axis=-1)
