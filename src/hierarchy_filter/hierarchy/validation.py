"""Structural checks for depth-first encoded hierarchies."""

from hierarchy_filter.exceptions import MalformedHierarchyError
from hierarchy_filter.hierarchy.base_hierarchy import Hierarchy


def check_well_formed(hierarchy: Hierarchy) -> None:
    """Verify that a hierarchy is a valid depth-first encoding of a forest.

    The first entry must have depth 0 and no entry may be more than one level deeper
    than the entry before it. An empty hierarchy is well formed.

    Args:
        hierarchy: The hierarchy to check.

    Raises:
        MalformedHierarchyError: At the first entry violating either rule.

    Example:
        >>> from hierarchy_filter.hierarchy.array_hierarchy import ArrayBasedHierarchy
        >>> check_well_formed(ArrayBasedHierarchy([1, 2, 3], [0, 1, 0]))
        >>> try:
        ...     check_well_formed(ArrayBasedHierarchy([1, 2], [0, 2]))
        ... except MalformedHierarchyError as error:
        ...     print(error.index, error.previous_depth, error.depth)
        1 0 2
    """
    if hierarchy.size() == 0:
        return
    if hierarchy.depth(0) != 0:
        raise MalformedHierarchyError(0, hierarchy.depth(0), None)

    previous_depth = 0
    for index in range(1, hierarchy.size()):
        depth = hierarchy.depth(index)
        if depth > previous_depth + 1:
            raise MalformedHierarchyError(index, depth, previous_depth)
        previous_depth = depth


def is_well_formed(hierarchy: Hierarchy) -> bool:
    """Return True if ``check_well_formed`` accepts the hierarchy."""
    try:
        check_well_formed(hierarchy)
    except MalformedHierarchyError:
        return False
    return True
