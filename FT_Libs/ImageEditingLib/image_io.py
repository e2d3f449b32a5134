"""
Image file I/O for Fauxtoshop.

Decoding and encoding are delegated to Pillow; this module only converts
between PIL images and PixelGrids. Alpha channels are dropped on load.

Functions:
    image_to_grid: Convert a PIL Image into a PixelGrid
    grid_to_image: Convert a PixelGrid into an RGB PIL Image
    load_grid: Load an image file as a PixelGrid
    save_grid: Save a PixelGrid to an image file
    normalize_save_format: Map a format name or file suffix to a Pillow format
    is_supported_format: Check a path's extension against the supported formats
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import numpy as np
from PIL import Image

from FT_Libs.constants import DEFAULT_JPEG_QUALITY, DEFAULT_OUTPUT_FORMAT, SUPPORTED_STANDARD_IMAGES
from FT_Libs.ImageEditingLib.image_models import PixelGrid

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def get_supported_image_formats() -> List[str]:
    """
    Get list of supported standard image formats.

    Returns:
        List of file extensions (e.g., ['.bmp', '.gif', ...])
    """
    return sorted(SUPPORTED_STANDARD_IMAGES)


def is_supported_format(file_path: PathLike) -> bool:
    return Path(file_path).suffix.lower() in SUPPORTED_STANDARD_IMAGES


def image_to_grid(image: Any) -> PixelGrid:
    """Convert a PIL Image of any mode into a PixelGrid (alpha dropped)."""
    if not hasattr(image, "convert"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")

    if image.mode != "RGB":
        image = image.convert("RGB")
    return PixelGrid.from_rgb_array(np.asarray(image))


def grid_to_image(grid: PixelGrid) -> Image.Image:
    """Convert a PixelGrid into a new RGB PIL Image."""
    if not isinstance(grid, PixelGrid):
        raise TypeError(f"Expected PixelGrid, got {type(grid)}")
    return Image.fromarray(grid.to_rgb_array())


def load_grid(file_path: PathLike) -> PixelGrid:
    """
    Load an image file as a PixelGrid.

    Args:
        file_path: Path to the image file

    Returns:
        PixelGrid of the decoded image

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If the extension is not supported or Pillow cannot decode the file
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Image file not found: {path}")

    if not is_supported_format(path):
        supported = ", ".join(get_supported_image_formats())
        raise OSError(f"Unsupported image format '{path.suffix}' for {path}. Supported: {supported}")

    try:
        with Image.open(path) as image:
            grid = image_to_grid(image)
    except OSError as e:
        raise OSError(f"Failed to load image from {path}: {e}") from e

    logger.info(f"Loaded {path} ({grid.num_cols}x{grid.num_rows})")
    return grid


def normalize_save_format(save_format: Optional[str], file_path: Optional[PathLike] = None) -> str:
    """
    Resolve the Pillow format name used to save an image.

    An explicit ``save_format`` wins; otherwise the file suffix is used,
    falling back to DEFAULT_OUTPUT_FORMAT. "JPG" becomes "JPEG".
    """
    if not save_format and file_path is not None:
        suffix = Path(file_path).suffix.lower()
        save_format = Image.registered_extensions().get(suffix)

    save_format = (save_format or DEFAULT_OUTPUT_FORMAT).upper()
    if save_format == "JPG":
        save_format = "JPEG"
    return save_format


def get_save_kwargs(save_format: str, quality: int = DEFAULT_JPEG_QUALITY) -> Dict[str, Any]:
    """Get PIL Image.save() kwargs for a format."""
    kwargs: Dict[str, Any] = {"format": save_format}
    if save_format == "JPEG":
        kwargs["quality"] = max(1, min(100, int(quality)))
    return kwargs


def save_grid(
    grid: PixelGrid,
    file_path: PathLike,
    save_format: Optional[str] = None,
    quality: int = DEFAULT_JPEG_QUALITY,
) -> Path:
    """
    Save a PixelGrid to disk.

    Args:
        grid: Pixel grid to encode
        file_path: Destination path
        save_format: Pillow format name (default: inferred from the suffix)
        quality: JPEG quality 1-100

    Returns:
        Path the image was written to

    Raises:
        OSError: If the file cannot be written or encoded
    """
    path = Path(file_path)
    if not path.name:
        raise OSError("Output filename is empty")

    kwargs = get_save_kwargs(normalize_save_format(save_format, path), quality)
    try:
        grid_to_image(grid).save(path, **kwargs)
    except (OSError, ValueError, KeyError) as e:
        raise OSError(f"Failed to save image to {path}: {e}") from e

    logger.info(f"Saved {grid.num_cols}x{grid.num_rows} image to {path}")
    return path
