"""JSON output strategy for hierarchy rendering."""

import json

from hierarchy_filter.hierarchy.base_hierarchy import Hierarchy

from .base_strategy import OutputStrategy


class JSONOutputStrategy(OutputStrategy):
    """Output strategy that renders a hierarchy as a JSON array.

    Each entry becomes an object with the following structure, in DFS order:
    {
        "id": 1,
        "depth": 0
    }

    Attributes:
        encoder: JSON encoder instance used for consistent output.

    Example:
        >>> from hierarchy_filter.hierarchy.array_hierarchy import ArrayBasedHierarchy
        >>> JSONOutputStrategy().format(ArrayBasedHierarchy([1, 2], [0, 1]))
        '[{"id": 1, "depth": 0}, {"id": 2, "depth": 1}]'
    """

    def __init__(self) -> None:
        self.encoder = json.JSONEncoder()

    def format(self, hierarchy: Hierarchy) -> str:
        return self.encoder.encode([{"id": node_id, "depth": depth} for node_id, depth in hierarchy])

    def get_file_extension(self) -> str:
        return ".json"
