"""Array-backed Hierarchy implementation."""

from typing import Any, Sequence, Tuple

from hierarchy_filter.exceptions import (
    HierarchyIndexError,
    HierarchyLengthMismatchError,
    InvalidDepthError,
    InvalidEntryTypeError,
)
from hierarchy_filter.hierarchy.base_hierarchy import Hierarchy


class ArrayBasedHierarchy(Hierarchy):
    """Hierarchy backed by two fixed-size sequences of node ids and depths.

    The input sequences are copied into tuples, so later changes to the caller's lists
    do not affect the hierarchy. Depth-first well-formedness is not enforced here; use
    ``check_well_formed`` for that.

    Attributes:
        node_ids (Tuple[int, ...]): Node ids in DFS order.
        depths (Tuple[int, ...]): Depths matching ``node_ids`` position by position.

    Example:
        >>> forest = ArrayBasedHierarchy([1, 2, 3], [0, 1, 0])
        >>> forest.node_id(1), forest.depth(1)
        (2, 1)
        >>> ArrayBasedHierarchy([], []).format_string()
        '[]'
    """

    def __init__(self, node_ids: Sequence[int], depths: Sequence[int]) -> None:
        """Initialize an ArrayBasedHierarchy.

        Args:
            node_ids: Node ids in depth-first order.
            depths: Depth of each node, same length as node_ids.

        Raises:
            HierarchyLengthMismatchError: If node_ids and depths differ in length.
            InvalidEntryTypeError: If any node id or depth is not an integer.
            InvalidDepthError: If any depth is negative.
        """
        if len(node_ids) != len(depths):
            raise HierarchyLengthMismatchError(len(node_ids), len(depths))
        for index, node_id in enumerate(node_ids):
            if not _is_integer(node_id):
                raise InvalidEntryTypeError("node id", index, node_id)
        for index, depth in enumerate(depths):
            if not _is_integer(depth):
                raise InvalidEntryTypeError("depth", index, depth)
            if depth < 0:
                raise InvalidDepthError(index, depth)

        self._node_ids: Tuple[int, ...] = tuple(node_ids)
        self._depths: Tuple[int, ...] = tuple(depths)

    @property
    def node_ids(self) -> Tuple[int, ...]:
        return self._node_ids

    @property
    def depths(self) -> Tuple[int, ...]:
        return self._depths

    def size(self) -> int:
        return len(self._depths)

    def node_id(self, index: int) -> int:
        self._check_index(index)
        return self._node_ids[index]

    def depth(self, index: int) -> int:
        self._check_index(index)
        return self._depths[index]

    def _check_index(self, index: int) -> None:
        # Tuples accept negative indices; a hierarchy position does not.
        if not 0 <= index < len(self._depths):
            raise HierarchyIndexError(index, len(self._depths))


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
