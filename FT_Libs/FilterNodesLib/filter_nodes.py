"""
Filter Nodes for the Fauxtoshop Pipeline.

Wraps the four filter algorithms so they can be dispatched through the
filter registry. Every executor has the signature ``(node, inputs)``
where ``node`` is the filter configuration dict and ``inputs`` is a list
of PixelGrids.

Example:
    >>> from FT_Libs.FilterNodesLib.filter_nodes import create_scatter_node
    >>> from FT_Libs.PipelineLib.filter_registry import get_default_registry
    >>>
    >>> node = create_scatter_node("scatter-1", radius=8, seed=42)
    >>> registry = get_default_registry()
    >>> result = registry.execute("Scatter", node, [grid])
"""

from typing import Any, Dict, List, Optional

from FT_Libs.constants import (
    FIELD_NODE_ID,
    FIELD_NODE_TYPE,
    FIELD_PLACE_COL,
    FIELD_PLACE_ROW,
    FIELD_RADIUS,
    FIELD_THRESHOLD,
    FIELD_TOLERANCE,
    FILTER_COMPARE,
    FILTER_EDGE_DETECTION,
    FILTER_GREEN_SCREEN,
    FILTER_SCATTER,
)
from FT_Libs.ImageEditingLib.compare_filter import count_differing_pixels
from FT_Libs.ImageEditingLib.edge_filter import apply_edge_detection
from FT_Libs.ImageEditingLib.green_screen_filter import apply_green_screen
from FT_Libs.ImageEditingLib.image_models import PixelGrid
from FT_Libs.ImageEditingLib.scatter_filter import NumpyRandomSource, apply_scatter


def _require_grids(filter_type: str, inputs: List[Any], count: int) -> List[PixelGrid]:
    if not inputs or len(inputs) < count:
        noun = "image input" if count == 1 else f"{count} image inputs"
        raise ValueError(f"{filter_type} node requires {noun}")

    grids = list(inputs[:count])
    for grid in grids:
        if not isinstance(grid, PixelGrid):
            raise TypeError(f"Expected PixelGrid, got {type(grid)}")
    return grids


def _require_field(filter_type: str, node: Dict[str, Any], field: str) -> Any:
    if node.get(field) is None:
        raise ValueError(f"{filter_type} node missing required '{field}' field")
    return node[field]


def execute_scatter_node(node: Dict[str, Any], inputs: List[Any]) -> PixelGrid:
    """
    Execute scatter node in pipeline.

    Node dict should contain:
        - 'radius': Scatter radius (1-100)
        - 'random_source' (optional): Object with next_int_in_range(low, high)
        - 'seed' (optional): Seed for the default random source

    Inputs:
        - [0]: PixelGrid to scatter

    Returns:
        Scattered PixelGrid
    """
    (grid,) = _require_grids(FILTER_SCATTER, inputs, 1)
    try:
        radius = _require_field(FILTER_SCATTER, node, FIELD_RADIUS)
        random_source = node.get("random_source") or NumpyRandomSource(node.get("seed"))
        return apply_scatter(grid, radius, random_source)
    except (ValueError, TypeError) as e:
        raise type(e)(f"Scatter node error: {e}") from e


def execute_edge_detection_node(node: Dict[str, Any], inputs: List[Any]) -> PixelGrid:
    """
    Execute edge detection node in pipeline.

    Node dict should contain:
        - 'threshold': Color distance threshold (> 0)

    Inputs:
        - [0]: PixelGrid to trace

    Returns:
        Black-on-white edge PixelGrid
    """
    (grid,) = _require_grids(FILTER_EDGE_DETECTION, inputs, 1)
    try:
        threshold = _require_field(FILTER_EDGE_DETECTION, node, FIELD_THRESHOLD)
        return apply_edge_detection(grid, threshold)
    except (ValueError, TypeError) as e:
        raise type(e)(f"Edge detection node error: {e}") from e


def execute_green_screen_node(node: Dict[str, Any], inputs: List[Any]) -> PixelGrid:
    """
    Execute green screen node in pipeline.

    Node dict should contain:
        - 'tolerance': Distance from green treated as backing (> 0)
        - 'place_row', 'place_col': Overlay top-left position (default 0, 0)

    Inputs:
        - [0]: Background PixelGrid
        - [1]: Overlay (sticker) PixelGrid

    Returns:
        Composited PixelGrid with the background's dimensions
    """
    background, overlay = _require_grids(FILTER_GREEN_SCREEN, inputs, 2)
    try:
        tolerance = _require_field(FILTER_GREEN_SCREEN, node, FIELD_TOLERANCE)
        return apply_green_screen(
            background,
            overlay,
            tolerance,
            int(node.get(FIELD_PLACE_ROW, 0)),
            int(node.get(FIELD_PLACE_COL, 0)),
        )
    except (ValueError, TypeError) as e:
        raise type(e)(f"Green screen node error: {e}") from e


def execute_compare_node(node: Dict[str, Any], inputs: List[Any]) -> int:
    """
    Execute compare node in pipeline.

    Inputs:
        - [0], [1]: PixelGrids of identical dimensions

    Returns:
        Number of pixel locations that differ
    """
    first, second = _require_grids(FILTER_COMPARE, inputs, 2)
    try:
        return count_differing_pixels(first, second)
    except ValueError as e:
        raise type(e)(f"Compare node error: {e}") from e


def _create_node(node_id: str, filter_type: str, **params: Any) -> Dict[str, Any]:
    node = {
        FIELD_NODE_ID: node_id,
        FIELD_NODE_TYPE: filter_type,
    }
    node.update({key: value for key, value in params.items() if value is not None})
    return node


def create_scatter_node(
    node_id: str,
    radius: int,
    seed: Optional[int] = None,
    random_source: Optional[Any] = None,
) -> Dict[str, Any]:
    """Create scatter node dict. ``random_source`` takes precedence over ``seed``."""
    return _create_node(
        node_id,
        FILTER_SCATTER,
        radius=radius,
        seed=seed,
        random_source=random_source,
    )


def create_edge_detection_node(node_id: str, threshold: int) -> Dict[str, Any]:
    return _create_node(node_id, FILTER_EDGE_DETECTION, threshold=threshold)


def create_green_screen_node(
    node_id: str,
    tolerance: int,
    place_row: int = 0,
    place_col: int = 0,
) -> Dict[str, Any]:
    return _create_node(
        node_id,
        FILTER_GREEN_SCREEN,
        tolerance=tolerance,
        place_row=place_row,
        place_col=place_col,
    )


def create_compare_node(node_id: str) -> Dict[str, Any]:
    return _create_node(node_id, FILTER_COMPARE)
