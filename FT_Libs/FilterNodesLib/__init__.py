"""
Fauxtoshop Filter Nodes Library.

Filter nodes wrap the pixel grid algorithms in the ``(node, inputs)``
executor shape used by the filter registry.

Modules:
    filter_nodes: Scatter, Edge Detection, Green Screen and Compare nodes
"""

from FT_Libs.FilterNodesLib.filter_nodes import (
    execute_scatter_node,
    execute_edge_detection_node,
    execute_green_screen_node,
    execute_compare_node,
    create_scatter_node,
    create_edge_detection_node,
    create_green_screen_node,
    create_compare_node,
)

__all__ = [
    "execute_scatter_node",
    "execute_edge_detection_node",
    "execute_green_screen_node",
    "execute_compare_node",
    "create_scatter_node",
    "create_edge_detection_node",
    "create_green_screen_node",
    "create_compare_node",
]
