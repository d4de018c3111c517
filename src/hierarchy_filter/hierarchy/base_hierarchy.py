"""Abstract read-only view over a depth-first encoded forest."""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Tuple


class Hierarchy(ABC):
    """
    Abstract base class for a forest stored as (node id, depth) pairs in DFS order.

    A Hierarchy stores an ordered collection of ordered trees as a sequence indexed by
    depth-first traversal. Parent-child relationships are implied by position and depth:
    roots have depth 0, their children depth 1, and so on. If the entry at index i has
    depth D, the entry at i + 1 has depth D + 1 when it is the first child of entry i,
    depth D when it is a sibling, or a smaller depth when it closes one or more subtrees.

    Concrete subclasses provide ``size``, ``node_id`` and ``depth``. Everything else,
    including the canonical string rendering and equality, is derived from those three.

    Example:
        >>> from hierarchy_filter.hierarchy.array_hierarchy import ArrayBasedHierarchy
        >>> forest = ArrayBasedHierarchy([1, 2, 3, 4], [0, 1, 1, 0])
        >>> forest.size()
        4
        >>> forest.format_string()
        '[1:0, 2:1, 3:1, 4:0]'
        >>> list(forest)[:2]
        [(1, 0), (2, 1)]
    """

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of entries in the hierarchy.

        Returns:
            int: Entry count, zero for an empty forest.
        """
        pass

    @abstractmethod
    def node_id(self, index: int) -> int:
        """
        Return the node id stored at a position.

        Args:
            index (int): Position in DFS order, in ``[0, size())``.

        Returns:
            int: The node id at that position.

        Raises:
            HierarchyIndexError: If index is outside ``[0, size())``.
        """
        pass

    @abstractmethod
    def depth(self, index: int) -> int:
        """
        Return the depth stored at a position.

        Args:
            index (int): Position in DFS order, in ``[0, size())``.

        Returns:
            int: The depth at that position, 0 for roots.

        Raises:
            HierarchyIndexError: If index is outside ``[0, size())``.
        """
        pass

    def format_string(self) -> str:
        """
        Render the hierarchy as ``[id:depth, id:depth, ...]``.

        This is the canonical form used to compare hierarchies. An empty hierarchy
        renders as ``[]``.

        Returns:
            str: The flat rendering of every entry in order.
        """
        entries = (f"{self.node_id(i)}:{self.depth(i)}" for i in range(self.size()))
        return "[" + ", ".join(entries) + "]"

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        for i in range(self.size()):
            yield (self.node_id(i), self.depth(i))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Hierarchy):
            return NotImplemented
        return self.format_string() == other.format_string()

    def __hash__(self) -> int:
        return hash(self.format_string())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.format_string()})"
