"""Node representation for entries of a hierarchy viewed as a tree."""

from typing import Any, Optional

from anytree import Node


class HierarchyNode(Node):  # type: ignore
    """Node class representing one entry of a depth-first encoded forest.

    Extends anytree.Node with the node id, depth and DFS position of the entry it was
    built from. Inherits tree traversal and manipulation capabilities from anytree.Node.

    Attributes:
        name (str): The node id rendered as text.
        node_id (int): The node id.
        encoded_depth (int): Depth stored in the flat hierarchy; roots have depth 0.
            For a well-formed hierarchy this equals anytree's computed ``depth``.
        index (int): Position of the entry in the flat hierarchy.
        parent (Optional[HierarchyNode]): The parent node in the forest.
        children (tuple[HierarchyNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = HierarchyNode(1, depth=0, index=0)
        >>> child = HierarchyNode(2, depth=1, index=1, parent=root)
        >>> root.name
        '1'
        >>> child.parent.node_id
        1
    """

    def __init__(
        self,
        node_id: int,
        depth: int,
        index: int,
        parent: Optional["HierarchyNode"] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(str(node_id), parent, **kwargs)
        self.node_id = node_id
        # anytree exposes a read-only ``depth`` property computed from the parent chain,
        # so the encoded depth is stored separately.
        self.encoded_depth = depth
        self.index = index
