"""Tree views and text renderings of depth-first encoded hierarchies.

This module turns a flat hierarchy into anytree nodes and renders it either as a
connector-style tree, similar to the Unix ``tree`` command, or as a hyphen outline.
"""

from typing import Iterator, List

from hierarchy_filter.hierarchy.base_hierarchy import Hierarchy
from hierarchy_filter.hierarchy.hierarchy_node import HierarchyNode
from hierarchy_filter.hierarchy.validation import check_well_formed


def to_forest(hierarchy: Hierarchy) -> List[HierarchyNode]:
    """Build the trees encoded by a hierarchy.

    Args:
        hierarchy: A well-formed hierarchy.

    Returns:
        The root nodes in order. Each root carries its subtree as anytree children.

    Raises:
        MalformedHierarchyError: If the hierarchy is not a valid depth-first encoding.

    Example:
        >>> from hierarchy_filter.hierarchy.array_hierarchy import ArrayBasedHierarchy
        >>> roots = to_forest(ArrayBasedHierarchy([1, 2, 3, 4], [0, 1, 1, 0]))
        >>> [root.node_id for root in roots]
        [1, 4]
        >>> [child.node_id for child in roots[0].children]
        [2, 3]
    """
    check_well_formed(hierarchy)

    roots: List[HierarchyNode] = []
    # Path from the current root down to the most recently created node
    ancestors: List[HierarchyNode] = []
    for index in range(hierarchy.size()):
        depth = hierarchy.depth(index)
        del ancestors[depth:]
        parent = ancestors[-1] if ancestors else None
        node = HierarchyNode(hierarchy.node_id(index), depth=depth, index=index, parent=parent)
        if parent is None:
            roots.append(node)
        ancestors.append(node)
    return roots


def stream_tree_representation(hierarchy: Hierarchy) -> Iterator[str]:
    """Generate a tree drawing of the forest one line at a time.

    Each root is printed on its own line without a connector; descendants are drawn
    with ``├──``/``└──`` connectors in DFS order.

    Args:
        hierarchy: A well-formed hierarchy.

    Yields:
        Lines of the tree representation.

    Raises:
        MalformedHierarchyError: If the hierarchy is not a valid depth-first encoding.

    Example:
        >>> from hierarchy_filter.hierarchy.array_hierarchy import ArrayBasedHierarchy
        >>> forest = ArrayBasedHierarchy([1, 2, 3, 4, 5], [0, 1, 2, 1, 0])
        >>> for line in stream_tree_representation(forest):
        ...     print(line)
        1
        ├── 2
        │   └── 3
        └── 4
        5
    """

    def write_node(
        node: HierarchyNode, prefix: str = "", is_last: bool = True, is_root: bool = False
    ) -> Iterator[str]:
        if is_root:
            yield node.name
        else:
            connector = "└── " if is_last else "├── "
            yield f"{prefix}{connector}{node.name}"

        children = node.children
        for i, child in enumerate(children):
            is_last_child = i == len(children) - 1

            # Direct children of a root get no leading indentation
            if is_root:
                new_prefix = ""
            else:
                new_prefix = prefix + ("    " if is_last else "│   ")

            yield from write_node(child, new_prefix, is_last_child, is_root=False)

    for root in to_forest(hierarchy):
        yield from write_node(root, is_root=True)


def get_tree_representation(hierarchy: Hierarchy) -> str:
    """Get the complete tree drawing of a hierarchy as a single string.

    Args:
        hierarchy: A well-formed hierarchy.

    Returns:
        The lines of ``stream_tree_representation`` joined by newlines; empty for an
        empty hierarchy.
    """
    return "\n".join(stream_tree_representation(hierarchy))


def stream_outline_representation(hierarchy: Hierarchy) -> Iterator[str]:
    """Generate a hyphen outline where each entry is prefixed by one ``- `` per level.

    The outline is read straight from the flat entries, so it also works for
    hierarchies that are not well formed.

    Example:
        >>> from hierarchy_filter.hierarchy.array_hierarchy import ArrayBasedHierarchy
        >>> list(stream_outline_representation(ArrayBasedHierarchy([1, 2, 3, 4], [0, 1, 2, 0])))
        ['1', '- 2', '- - 3', '4']
    """
    for node_id, depth in hierarchy:
        yield "- " * depth + str(node_id)
