"""
Output handling for Fauxtoshop.

Saves a filtered PixelGrid to disk with support for dynamic filenames using
delimited tags.

Supported tags (case-insensitive):
- {DATE} or {DATE:format} - Current date (default: YYYY-MM-DD)
- {TIME} or {TIME:format} - Current time (default: HH-MM-SS)
- {DATETIME} or {DATETIME:format} - Combined date and time
- {FILTER} - Name of the applied filter, e.g. "edge_detection"

Classes:
    OutputConfig: Configuration for saving a result
    OutputHandler: Handles tag substitution, path validation and saving
"""

from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional
import logging
import re

from FT_Libs.constants import DEFAULT_JPEG_QUALITY
from FT_Libs.ImageEditingLib.image_io import save_grid
from FT_Libs.ImageEditingLib.image_models import PixelGrid

logger = logging.getLogger(__name__)


@dataclass
class OutputConfig:
    """Configuration for saving a filtered image.

    Attributes:
        output_path: Output path or filename with optional tags
        save_format: Image format to save as (None = infer from the suffix)
        quality: JPEG quality 1-100 (only for JPG)
        create_directories: Create output directories if they don't exist
        overwrite: Overwrite existing files
        base_directory: Optional absolute directory that outputs must stay within
    """
    output_path: str = "output.png"
    save_format: Optional[str] = None
    quality: int = DEFAULT_JPEG_QUALITY
    create_directories: bool = True
    overwrite: bool = False
    base_directory: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OutputConfig":
        """Create from dictionary, ignoring unknown keys."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)


class OutputHandler:
    """Handles dynamic filename generation and file I/O for filter results."""

    # Regex patterns for tag detection
    DATETIME_PATTERN = r'\{DATETIME(?::([^\}]*))?\}'
    DATE_PATTERN = r'\{DATE(?::([^\}]*))?\}'
    TIME_PATTERN = r'\{TIME(?::([^\}]*))?\}'
    FILTER_PATTERN = r'\{FILTER\}'

    # Default format strings
    DEFAULT_DATE_FORMAT = "%Y-%m-%d"
    DEFAULT_TIME_FORMAT = "%H-%M-%S"
    DEFAULT_DATETIME_FORMAT = "%Y-%m-%d_%H-%M-%S"

    def __init__(self, config: OutputConfig, now: Optional[datetime] = None):
        """
        Initialize handler with configuration.

        Args:
            config: Output configuration
            now: Timestamp used for date/time tags (default: current time)

        Raises:
            ValueError: If base_directory is not absolute
        """
        self.config = config
        self._now = now
        self._base_dir = None
        if config.base_directory:
            base_path = Path(config.base_directory)
            if not base_path.is_absolute():
                raise ValueError(f"base_directory must be an absolute path: {config.base_directory}")
            self._base_dir = base_path.resolve()

    def resolve_filename(self, filter_type: str = "") -> Path:
        """
        Resolve the output filename with tag substitution and path validation.

        Raises:
            ValueError: If the path is empty, contains '..' or leaves base_directory
        """
        filename = self.config.output_path.strip()
        if not filename:
            raise ValueError("output_path cannot be empty")

        now = self._now or datetime.now()
        filename = self._replace_timestamp(filename, self.DATETIME_PATTERN, self.DEFAULT_DATETIME_FORMAT, now)
        filename = self._replace_timestamp(filename, self.DATE_PATTERN, self.DEFAULT_DATE_FORMAT, now)
        filename = self._replace_timestamp(filename, self.TIME_PATTERN, self.DEFAULT_TIME_FORMAT, now)
        filename = re.sub(
            self.FILTER_PATTERN,
            lambda match: self._filter_slug(filter_type),
            filename,
            flags=re.IGNORECASE,
        )

        return self._validate_output_path(filename)

    def _validate_output_path(self, path_str: str) -> Path:
        path = Path(path_str)

        if ".." in path.parts:
            raise ValueError(f"Path traversal detected: output_path contains '..': {path_str}")

        if path.is_absolute():
            resolved_path = path.resolve()
        elif self._base_dir:
            resolved_path = (self._base_dir / path).resolve()
        else:
            resolved_path = path.resolve()

        if self._base_dir:
            try:
                resolved_path.relative_to(self._base_dir)
            except ValueError:
                raise ValueError(
                    f"output_path '{path_str}' resolves to '{resolved_path}' "
                    f"which is outside the allowed base directory '{self._base_dir}'"
                )

        return resolved_path

    def save(self, grid: PixelGrid, filter_type: str = "") -> Path:
        """
        Save a grid to the resolved output path.

        Returns:
            Path where the image was saved

        Raises:
            TypeError: If grid is not a PixelGrid
            ValueError: If the file exists and overwrite is False
            OSError: If the file cannot be written
        """
        if not isinstance(grid, PixelGrid):
            raise TypeError(f"Expected PixelGrid, got {type(grid)}")

        output_file = self.resolve_filename(filter_type)

        if self.config.create_directories:
            output_file.parent.mkdir(parents=True, exist_ok=True)

        if output_file.exists() and not self.config.overwrite:
            raise ValueError(
                f"Output file already exists: {output_file}. "
                f"Set overwrite=True to replace."
            )

        save_grid(grid, output_file, self.config.save_format, self.config.quality)
        logger.debug(f"Output handler wrote {output_file}")
        return output_file

    @staticmethod
    def _replace_timestamp(text: str, pattern: str, default_format: str, now: datetime) -> str:
        def replacer(match):
            fmt = match.group(1) or default_format
            try:
                return now.strftime(fmt)
            except ValueError:
                return now.strftime(default_format)

        return re.sub(pattern, replacer, text, flags=re.IGNORECASE)

    @staticmethod
    def _filter_slug(filter_type: str) -> str:
        slug = re.sub(r"[^a-z0-9]+", "_", filter_type.lower()).strip("_")
        return slug or "filtered"
