"""
Image display and mouse click capture using matplotlib.

Classes:
    ImageWindow: A matplotlib figure showing one PixelGrid at a time
    NullDisplay: Display that shows nothing, for headless runs
    DisplayClosedError: The window closed while waiting for a click

Functions:
    click_to_cell: Map a click in image coordinates to (row, col)
"""

from typing import Optional, Sequence, Tuple
import logging
import math

import matplotlib.pyplot as plt

from FT_Libs.constants import WINDOW_TITLE
from FT_Libs.ImageEditingLib.image_models import PixelGrid

logger = logging.getLogger(__name__)


class DisplayClosedError(RuntimeError):
    """Raised when the window is closed before a click is captured."""


def click_to_cell(point: Sequence[float]) -> Tuple[int, int]:
    """
    Convert an (x, y) click in image coordinates to (row, col).

    Pixel centers sit on integer coordinates in an imshow axes, so a click
    is rounded to the nearest pixel. No scaling is applied.
    """
    x, y = point
    return int(math.floor(y + 0.5)), int(math.floor(x + 0.5))


class ImageWindow:
    """
    A single matplotlib window used to show images and capture clicks.

    Example:
        >>> window = ImageWindow()
        >>> window.show(grid)
        >>> row, col = window.wait_for_click()
    """

    supports_clicks = True

    def __init__(self, title: str = WINDOW_TITLE):
        self.title = title
        self.figure, self.axes = plt.subplots()
        self.figure.canvas.manager.set_window_title(title)
        self._image = None

    def show(self, grid: PixelGrid, title: Optional[str] = None) -> None:
        """Draw ``grid`` in the window, replacing any image already shown."""
        rgb = grid.to_rgb_array()
        if self._image is None:
            self._image = self.axes.imshow(rgb, interpolation="nearest")
            self.axes.set_axis_off()
        else:
            self._image.set_data(rgb)
            self._image.set_extent((-0.5, grid.num_cols - 0.5, grid.num_rows - 0.5, -0.5))

        self.axes.set_title(title or self.title)
        self.figure.canvas.draw_idle()
        plt.show(block=False)
        plt.pause(0.001)
        logger.debug(f"Displayed {grid.num_cols}x{grid.num_rows} image")

    def wait_for_click(self) -> Tuple[int, int]:
        """
        Block until the user clicks inside the window.

        Returns:
            (row, col) of the clicked pixel

        Raises:
            DisplayClosedError: If the window is closed first
        """
        if not plt.fignum_exists(self.figure.number):
            raise DisplayClosedError("Window was closed")

        plt.figure(self.figure.number)
        points = plt.ginput(1, timeout=0)
        if not points:
            raise DisplayClosedError("Window closed before a click was captured")

        row, col = click_to_cell(points[0])
        logger.debug(f"Mouse click at row {row}, col {col}")
        return row, col

    def close(self) -> None:
        plt.close(self.figure)


class NullDisplay:
    """Display that shows nothing and cannot capture clicks."""

    supports_clicks = False

    def show(self, grid: PixelGrid, title: Optional[str] = None) -> None:
        pass

    def wait_for_click(self) -> Tuple[int, int]:
        raise DisplayClosedError("No window is available to click in")

    def close(self) -> None:
        pass
