"""
Headless filter pipeline.

Runs Source -> Selector -> Filter -> Sink in one call, with every parameter
supplied up front. The interactive console gathers the same inputs through
prompts; this module is what scripts and the ``--filter`` command line use.

Example:
    >>> result = run_filter(
    ...     "Edge Detection",
    ...     "photo.png",
    ...     {"threshold": 30},
    ...     output_path="edges_{DATE}.png",
    ... )
    >>> result.output_file
    PosixPath('/home/me/edges_2015-10-02.png')
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging
import time

from FT_Libs.constants import FIELD_NODE_ID, FIELD_NODE_TYPE
from FT_Libs.ImageEditingLib.image_io import load_grid
from FT_Libs.ImageEditingLib.image_models import PixelGrid
from FT_Libs.PipelineLib.filter_registry import FilterRegistry, get_default_registry
from FT_Libs.PipelineLib.output_handler import OutputConfig, OutputHandler

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class FilterRunResult:
    """Outcome of one pipeline run.

    Attributes:
        filter_type: Registered name of the filter that ran
        grid: Output grid (the unchanged source grid for Compare)
        difference_count: Differing pixel count (Compare only)
        output_file: Where the grid was saved, if it was
    """
    filter_type: str
    grid: PixelGrid
    difference_count: Optional[int] = None
    output_file: Optional[Path] = None


def run_filter(
    filter_type: str,
    source_path: PathLike,
    node_params: Optional[Dict[str, Any]] = None,
    secondary_path: Optional[PathLike] = None,
    output_path: Optional[str] = None,
    registry: Optional[FilterRegistry] = None,
    random_source: Optional[Any] = None,
    overwrite: bool = True,
) -> FilterRunResult:
    """
    Load, filter and optionally save an image.

    Args:
        filter_type: Menu number or filter name (e.g. "1", "scatter")
        source_path: Image to filter
        node_params: Filter parameters (radius, threshold, tolerance, place_row, place_col)
        secondary_path: Sticker image for Green Screen, other image for Compare
        output_path: Where to save the result (tags allowed); None skips saving
        registry: Filter registry (default: global registry)
        random_source: Random source passed to Scatter
        overwrite: Replace an existing output file

    Returns:
        FilterRunResult

    Raises:
        KeyError: If filter_type is unknown
        ValueError: If a second image is required but missing, or parameters are invalid
        OSError: If an image cannot be loaded or saved
    """
    registry = registry or get_default_registry()
    resolved_type = registry.resolve_choice(filter_type)
    metadata = registry.get_metadata(resolved_type)

    inputs = [load_grid(source_path)]
    if metadata["input_count"] > 1:
        if secondary_path is None:
            raise ValueError(f"{resolved_type} needs a second image")
        inputs.append(load_grid(secondary_path))

    node: Dict[str, Any] = {
        FIELD_NODE_ID: f"{resolved_type.lower().replace(' ', '-')}-1",
        FIELD_NODE_TYPE: resolved_type,
    }
    node.update(node_params or {})
    if random_source is not None:
        node["random_source"] = random_source

    start = time.time()
    outcome = registry.execute(resolved_type, node, inputs)
    logger.debug(f"{resolved_type} finished in {time.time() - start:.3f}s")

    if metadata["produces_image"]:
        result = FilterRunResult(resolved_type, outcome)
    else:
        result = FilterRunResult(resolved_type, inputs[0], difference_count=int(outcome))

    if output_path:
        handler = OutputHandler(OutputConfig(output_path=output_path, overwrite=overwrite))
        result.output_file = handler.save(result.grid, resolved_type)

    return result
