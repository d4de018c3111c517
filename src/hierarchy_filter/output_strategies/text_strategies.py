"""Plain text output strategies."""

from hierarchy_filter.hierarchy.base_hierarchy import Hierarchy
from hierarchy_filter.hierarchy.forest import get_tree_representation, stream_outline_representation

from .base_strategy import OutputStrategy


class FlatOutputStrategy(OutputStrategy):
    """Renders the canonical ``[id:depth, ...]`` notation.

    Example:
        >>> from hierarchy_filter.hierarchy.array_hierarchy import ArrayBasedHierarchy
        >>> FlatOutputStrategy().format(ArrayBasedHierarchy([1, 2], [0, 1]))
        '[1:0, 2:1]'
    """

    def format(self, hierarchy: Hierarchy) -> str:
        return hierarchy.format_string()

    def get_file_extension(self) -> str:
        return ".txt"


class TreeOutputStrategy(OutputStrategy):
    """Renders a connector-style tree drawing; requires a well-formed hierarchy."""

    def format(self, hierarchy: Hierarchy) -> str:
        return get_tree_representation(hierarchy)

    def get_file_extension(self) -> str:
        return ".txt"


class OutlineOutputStrategy(OutputStrategy):
    """Renders a hyphen outline, one ``- `` per level of depth.

    Example:
        >>> from hierarchy_filter.hierarchy.array_hierarchy import ArrayBasedHierarchy
        >>> print(OutlineOutputStrategy().format(ArrayBasedHierarchy([1, 2, 3], [0, 1, 2])))
        1
        - 2
        - - 3
    """

    def format(self, hierarchy: Hierarchy) -> str:
        return "\n".join(stream_outline_representation(hierarchy))

    def get_file_extension(self) -> str:
        return ".txt"
