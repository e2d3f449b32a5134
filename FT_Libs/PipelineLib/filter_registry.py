"""
Filter Registry and Selector.

This module provides a centralized registry for filter executors. It maps a
menu choice or filter name to the executor that runs it.

Classes:
    FilterRegistry: Registry for filter executors

Functions:
    get_default_registry: Get the global default registry (singleton)
    register_default_filters: Register the four built-in filters
"""

from typing import Any, Callable, Dict, List, Optional
import logging

from FT_Libs.constants import (
    FILTER_COMPARE,
    FILTER_EDGE_DETECTION,
    FILTER_GREEN_SCREEN,
    FILTER_MENU,
    FILTER_SCATTER,
)

logger = logging.getLogger(__name__)

# Type alias for executor function
ExecutorFunction = Callable[[Dict[str, Any], List[Any]], Any]


class FilterRegistry:
    """
    Registry for filter executors.

    Example:
        >>> registry = FilterRegistry()
        >>> registry.register("Scatter", execute_scatter_node, input_count=1)
        >>> registry.execute("Scatter", {"radius": 4}, [grid])
    """

    def __init__(self, menu: Optional[Dict[str, str]] = None):
        """Initialize an empty registry with an optional number -> filter menu."""
        self._executors: Dict[str, ExecutorFunction] = {}
        self._filter_metadata: Dict[str, Dict[str, Any]] = {}
        self._menu: Dict[str, str] = dict(menu) if menu else {}

    def register(
        self,
        filter_type: str,
        executor: ExecutorFunction,
        description: str = "",
        input_count: int = 1,
        produces_image: bool = True,
        tags: Optional[List[str]] = None,
        menu_label: str = "",
    ) -> None:
        """
        Register a filter executor.

        Args:
            filter_type: Unique filter name (e.g., "Scatter")
            executor: Callable accepting (node_dict, inputs)
            description: Human-readable description of the filter
            input_count: Number of PixelGrid inputs the filter needs
            produces_image: False for filters that return a value instead of a grid
            tags: Optional list of tags for categorization
            menu_label: Text shown for the filter in the console menu (default: filter_type)

        Raises:
            ValueError: If filter_type is empty or executor is not callable
            RuntimeError: If filter_type is already registered
        """
        filter_type = str(filter_type).strip()

        if not filter_type:
            raise ValueError("filter_type cannot be empty")

        if not callable(executor):
            raise ValueError(f"executor must be callable, got {type(executor)}")

        if filter_type in self._executors:
            raise RuntimeError(
                f"Filter type '{filter_type}' is already registered. "
                f"Use unregister() first to replace it."
            )

        self._executors[filter_type] = executor
        self._filter_metadata[filter_type] = {
            "description": str(description),
            "input_count": int(input_count),
            "produces_image": bool(produces_image),
            "tags": list(tags) if tags else [],
            "menu_label": str(menu_label) or filter_type,
        }

        logger.debug(f"Registered executor for filter type: {filter_type}")

    def unregister(self, filter_type: str) -> bool:
        """
        Unregister a filter executor.

        Returns:
            True if unregistered, False if filter_type was not registered
        """
        filter_type = str(filter_type).strip()

        if filter_type in self._executors:
            del self._executors[filter_type]
            del self._filter_metadata[filter_type]
            logger.debug(f"Unregistered executor for filter type: {filter_type}")
            return True

        return False

    def get_executor(self, filter_type: str) -> ExecutorFunction:
        """
        Get an executor for a filter type.

        Raises:
            KeyError: If filter_type is not registered
        """
        filter_type = str(filter_type).strip()

        if filter_type not in self._executors:
            available = ", ".join(self.list_filter_types())
            raise KeyError(
                f"No executor registered for filter type '{filter_type}'. "
                f"Available types: {available}"
            )

        return self._executors[filter_type]

    def has_executor(self, filter_type: str) -> bool:
        return str(filter_type).strip() in self._executors

    def resolve_choice(self, choice: str) -> str:
        """
        Map a menu number or filter name (case-insensitive) to a filter type.

        Raises:
            KeyError: If the choice matches no registered filter
        """
        choice = str(choice).strip()

        filter_type = self._menu.get(choice)
        if filter_type is not None and filter_type in self._executors:
            return filter_type

        for registered in self._executors:
            if registered.lower() == choice.lower():
                return registered

        raise KeyError(f"Unknown filter choice: '{choice}'")

    def execute(
        self,
        filter_type: str,
        node_dict: Dict[str, Any],
        inputs: List[Any],
    ) -> Any:
        """
        Execute a filter by looking up its executor.

        Args:
            filter_type: The filter type to execute
            node_dict: Filter configuration dictionary
            inputs: PixelGrid inputs

        Returns:
            Result from the executor

        Raises:
            KeyError: If filter_type is not registered
            Exception: Any exception raised by the executor
        """
        executor = self.get_executor(filter_type)
        return executor(node_dict, inputs)

    def list_filter_types(self) -> List[str]:
        """Get sorted list of all registered filter types."""
        return sorted(self._executors.keys())

    def menu_items(self) -> List[tuple]:
        """Get (number, filter_type) pairs for registered filters in menu order."""
        ordered = sorted(self._menu.items(), key=lambda item: (len(item[0]), item[0]))
        return [
            (number, filter_type)
            for number, filter_type in ordered
            if filter_type in self._executors
        ]

    def get_metadata(self, filter_type: str) -> Dict[str, Any]:
        """
        Get metadata for a filter type.

        Returns:
            Dictionary with description, input_count, produces_image, tags, menu_label

        Raises:
            KeyError: If filter_type is not registered
        """
        filter_type = str(filter_type).strip()

        if filter_type not in self._filter_metadata:
            raise KeyError(f"No metadata for filter type: {filter_type}")

        return dict(self._filter_metadata[filter_type])

    def filter_by_tag(self, tag: str) -> List[str]:
        """Get sorted filter types carrying a tag."""
        tag = str(tag).strip().lower()
        return sorted([
            filter_type
            for filter_type, meta in self._filter_metadata.items()
            if tag in [t.lower() for t in meta.get("tags", [])]
        ])

    def clear(self) -> None:
        """Clear all registered executors. Use with caution."""
        self._executors.clear()
        self._filter_metadata.clear()
        logger.warning("Filter registry cleared")


# Global singleton registry
_default_registry: Optional[FilterRegistry] = None


def get_default_registry() -> FilterRegistry:
    """
    Get the global default registry (singleton).

    Creates the registry on first call and registers the built-in filters.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = FilterRegistry(menu=FILTER_MENU)
        register_default_filters(_default_registry)

    return _default_registry


def register_default_filters(registry: FilterRegistry) -> None:
    """
    Register the built-in filters: Scatter, Edge Detection, Green Screen, Compare.

    Args:
        registry: The registry to register executors with
    """
    from FT_Libs.FilterNodesLib.filter_nodes import (
        execute_compare_node,
        execute_edge_detection_node,
        execute_green_screen_node,
        execute_scatter_node,
    )

    registry.register(
        filter_type=FILTER_SCATTER,
        executor=execute_scatter_node,
        description="Replace each pixel with a random nearby pixel",
        input_count=1,
        tags=["processing", "random", "filter"],
    )

    registry.register(
        filter_type=FILTER_EDGE_DETECTION,
        executor=execute_edge_detection_node,
        description="Mark pixels that differ from a neighbour in black",
        input_count=1,
        tags=["processing", "edges", "filter"],
    )

    registry.register(
        filter_type=FILTER_GREEN_SCREEN,
        executor=execute_green_screen_node,
        description="Composite a green-backed sticker onto the image",
        input_count=2,
        tags=["processing", "composition", "filter"],
        menu_label="\"Green Screen\" with another image",
    )

    registry.register(
        filter_type=FILTER_COMPARE,
        executor=execute_compare_node,
        description="Count pixel locations that differ from another image",
        input_count=2,
        produces_image=False,
        tags=["analysis", "compare"],
        menu_label="Compare image with another image",
    )

    logger.info("Registered default filters")
