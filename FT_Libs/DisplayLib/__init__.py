"""
DisplayLib - Image window and mouse click capture.
"""

from FT_Libs.DisplayLib.image_window import (
    DisplayClosedError,
    ImageWindow,
    NullDisplay,
    click_to_cell,
)

__all__ = [
    "DisplayClosedError",
    "ImageWindow",
    "NullDisplay",
    "click_to_cell",
]
