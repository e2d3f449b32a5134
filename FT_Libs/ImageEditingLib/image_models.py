"""
Image data models for Fauxtoshop.

This module defines the core data structures shared by every filter.

Classes:
    PixelGrid: Immutable 2-D grid of 24-bit packed RGB colors
    InvalidParameterError: A filter parameter is outside its documented range
    DimensionMismatchError: Two grids were expected to have the same size

Functions:
    pack_rgb: Pack three 8-bit channels into a 24-bit color
    unpack_rgb: Split a 24-bit color into its channels
    validate_int_parameter: Range check shared by the filters

Type Aliases:
    RgbColor: A tuple of 3 integers representing RGB color values (0-255)
"""

import numbers
from typing import Any, Iterator, Optional, Tuple

import numpy as np

from FT_Libs.constants import CHANNEL_MAX, MAX_PACKED_COLOR

RgbColor = Tuple[int, int, int]


class InvalidParameterError(ValueError):
    """Raised when a filter parameter violates its documented range."""


class DimensionMismatchError(ValueError):
    """Raised when two grids must share dimensions but do not."""


def pack_rgb(red: int, green: int, blue: int) -> int:
    """
    Pack red, green and blue channels into a 24-bit color.

    Raises:
        ValueError: If any channel is outside 0-255
    """
    for name, value in (("red", red), ("green", green), ("blue", blue)):
        if not 0 <= value <= CHANNEL_MAX:
            raise ValueError(f"{name} channel must be in 0-255, got {value}")
    return (int(red) << 16) | (int(green) << 8) | int(blue)


def unpack_rgb(color: int) -> RgbColor:
    """Split a 24-bit packed color into (red, green, blue)."""
    color = int(color)
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def validate_int_parameter(
    name: str,
    value: Any,
    minimum: int,
    maximum: Optional[int] = None,
) -> int:
    """
    Check that a filter parameter is an integer within [minimum, maximum].

    Args:
        name: Parameter name used in the error message
        value: Value to check
        minimum: Smallest allowed value
        maximum: Largest allowed value (None = unbounded)

    Returns:
        The value as a plain int

    Raises:
        InvalidParameterError: If value is not an integer or is out of range
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")

    value = int(value)
    if value < minimum or (maximum is not None and value > maximum):
        bounds = f">= {minimum}" if maximum is None else f"in [{minimum}, {maximum}]"
        raise InvalidParameterError(f"{name} must be {bounds}, got {value}")
    return value


class PixelGrid:
    """
    Immutable grid of packed RGB colors indexed as ``grid[row, col]``.

    The backing array is a read-only ``uint32`` numpy array of shape
    (rows, cols). Every constructor copies its input, so a grid never
    shares writable memory with its caller.
    """

    __slots__ = ("_pixels",)

    def __init__(self, pixels: Any):
        try:
            array = np.array(pixels, dtype=np.int64)
        except ValueError as e:
            raise ValueError(f"Pixel rows must all have the same length: {e}") from e

        if array.ndim != 2:
            raise ValueError(f"PixelGrid needs a 2-D array, got {array.ndim} dimension(s)")

        if array.size and (array.min() < 0 or array.max() > MAX_PACKED_COLOR):
            raise ValueError("Pixel values must be 24-bit packed RGB (0x000000-0xFFFFFF)")

        array = array.astype(np.uint32)
        array.setflags(write=False)
        self._pixels = array

    @classmethod
    def filled(cls, num_rows: int, num_cols: int, color: int) -> "PixelGrid":
        """Create a grid with every cell set to ``color``."""
        return cls(np.full((num_rows, num_cols), color, dtype=np.int64))

    @classmethod
    def from_rgb_array(cls, rgb: Any) -> "PixelGrid":
        """Pack an (rows, cols, 3) array of 8-bit channels into a grid."""
        rgb = np.asarray(rgb)
        if rgb.ndim != 3 or rgb.shape[2] != 3:
            raise ValueError(f"Expected an (rows, cols, 3) array, got shape {rgb.shape}")

        channels = rgb.astype(np.uint32)
        packed = (channels[..., 0] << 16) | (channels[..., 1] << 8) | channels[..., 2]
        return cls(packed)

    def to_rgb_array(self) -> np.ndarray:
        """Return a writable (rows, cols, 3) ``uint8`` array of channels."""
        return split_channels(self._pixels).astype(np.uint8)

    @property
    def pixels(self) -> np.ndarray:
        """Read-only view of the packed pixel values."""
        return self._pixels

    @property
    def num_rows(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def num_cols(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.num_rows, self.num_cols

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.num_rows and 0 <= col < self.num_cols

    def with_pixel(self, row: int, col: int, color: int) -> "PixelGrid":
        """Return a copy of this grid with one cell replaced."""
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) is outside a {self.num_rows}x{self.num_cols} grid")
        pixels = self._pixels.astype(np.int64)
        pixels[row, col] = color
        return PixelGrid(pixels)

    def rows(self) -> Iterator[Tuple[int, ...]]:
        for row in self._pixels:
            yield tuple(int(value) for value in row)

    def __getitem__(self, index: Tuple[int, int]) -> int:
        row, col = index
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) is outside a {self.num_rows}x{self.num_cols} grid")
        return int(self._pixels[row, col])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._pixels, other._pixels))

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelGrid(rows={self.num_rows}, cols={self.num_cols})"


def split_channels(pixels: Any) -> np.ndarray:
    """
    Split packed colors into a trailing channel axis.

    Returns:
        int16 array of shape ``pixels.shape + (3,)`` holding (R, G, B)
    """
    packed = np.asarray(pixels).astype(np.int64)
    return np.stack(
        ((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF),
        axis=-1,
    ).astype(np.int16)
