"""Filtering of depth-first encoded hierarchies by node id."""

from typing import List

from hierarchy_filter.hierarchy.array_hierarchy import ArrayBasedHierarchy
from hierarchy_filter.hierarchy.base_hierarchy import Hierarchy
from hierarchy_filter.types import NodeIdPredicate


def filter_hierarchy(hierarchy: Hierarchy, predicate: NodeIdPredicate) -> Hierarchy:
    """Return the entries of a hierarchy that survive a prefix scan with a predicate.

    The entry at position i is kept only if the predicate accepts the node id at every
    position 0..i. In other words, the first rejected node, whatever its depth, excludes
    itself and every node after it in traversal order. For a well-formed DFS encoding
    this keeps every node whose ancestors and predecessors all pass; the rule is applied
    to the raw sequence and does not look at depths, so malformed input is handled the
    same way.

    Kept entries keep their order and their original depths. The input is not modified.

    Args:
        hierarchy: The hierarchy to filter.
        predicate: Callable returning True for node ids that pass.

    Returns:
        A new ArrayBasedHierarchy with the kept entries.

    Raises:
        Any exception raised by the predicate is propagated and no result is built.

    Example:
        >>> forest = ArrayBasedHierarchy([2, 4, 6, 7, 8], [0, 1, 0, 1, 0])
        >>> filter_hierarchy(forest, lambda node_id: node_id % 2 == 0).format_string()
        '[2:0, 4:1, 6:0]'
        >>> filter_hierarchy(forest, lambda node_id: node_id != 2).format_string()
        '[]'
    """
    filtered_node_ids: List[int] = []
    filtered_depths: List[int] = []

    # The predicate is total and side-effect free, so the verdict for the prefix 0..i
    # extends the verdict for 0..i-1 and a single failure ends the scan.
    for i in range(hierarchy.size()):
        if not predicate(hierarchy.node_id(i)):
            break
        filtered_node_ids.append(hierarchy.node_id(i))
        filtered_depths.append(hierarchy.depth(i))

    return ArrayBasedHierarchy(filtered_node_ids, filtered_depths)
