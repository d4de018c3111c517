from typing import Optional


class HierarchyError(Exception):
    """
    Base class for all errors raised by hierarchy_filter.

    Each concrete error also derives from the matching builtin exception
    (``IndexError``, ``ValueError`` or ``TypeError``) so callers may catch either.
    """

    pass


class HierarchyIndexError(HierarchyError, IndexError):
    """
    Exception raised when a hierarchy lookup uses a position outside ``[0, size)``.

    Attributes:
        index (int): The requested position.
        size (int): Number of entries in the hierarchy.

    Example:
        >>> error = HierarchyIndexError(5, 3)
        >>> str(error)
        'Index 5 out of range for hierarchy of size 3'
    """

    def __init__(self, index: int, size: int) -> None:
        """
        Initialize the exception with the offending index.

        Args:
            index (int): The requested position.
            size (int): Number of entries in the hierarchy.
        """
        self.index = index
        self.size = size
        super().__init__(f"Index {index} out of range for hierarchy of size {size}")


class HierarchyLengthMismatchError(HierarchyError, ValueError):
    """
    Exception raised when node ids and depths of different lengths are combined.

    Attributes:
        node_id_count (int): Number of node ids supplied.
        depth_count (int): Number of depths supplied.

    Example:
        >>> error = HierarchyLengthMismatchError(3, 2)
        >>> str(error)
        'Node ids and depths must have equal length (got 3 node ids and 2 depths)'
    """

    def __init__(self, node_id_count: int, depth_count: int) -> None:
        self.node_id_count = node_id_count
        self.depth_count = depth_count
        super().__init__(
            f"Node ids and depths must have equal length "
            f"(got {node_id_count} node ids and {depth_count} depths)"
        )


class InvalidDepthError(HierarchyError, ValueError):
    """
    Exception raised when a depth is negative.

    Example:
        >>> str(InvalidDepthError(2, -1))
        'Depth at index 2 must be non-negative, got -1'
    """

    def __init__(self, index: int, depth: int) -> None:
        self.index = index
        self.depth = depth
        super().__init__(f"Depth at index {index} must be non-negative, got {depth}")


class MalformedHierarchyError(HierarchyError, ValueError):
    """
    Exception raised when a hierarchy is not a valid depth-first encoding.

    A well-formed hierarchy starts at depth 0 and never increases depth by more
    than one between consecutive entries.

    Attributes:
        index (int): Position of the first offending entry.
        depth (int): Depth found at that position.
        previous_depth (Optional[int]): Depth of the preceding entry, or None for index 0.

    Example:
        >>> str(MalformedHierarchyError(0, 1, None))
        'First entry must have depth 0, got 1'
        >>> str(MalformedHierarchyError(3, 4, 2))
        'Depth at index 3 jumps from 2 to 4; a child may only be one level deeper'
    """

    def __init__(self, index: int, depth: int, previous_depth: Optional[int]) -> None:
        self.index = index
        self.depth = depth
        self.previous_depth = previous_depth
        if previous_depth is None:
            message = f"First entry must have depth 0, got {depth}"
        else:
            message = (
                f"Depth at index {index} jumps from {previous_depth} to {depth}; "
                "a child may only be one level deeper"
            )
        super().__init__(message)


class FlatFormatError(HierarchyError, ValueError):
    """
    Exception raised when text cannot be parsed as a flat ``[id:depth, ...]`` hierarchy.

    Attributes:
        text (str): The fragment that failed to parse.
        reason (str): Why it was rejected.

    Example:
        >>> str(FlatFormatError("1-0", "expected 'id:depth'"))
        "Invalid flat hierarchy entry '1-0': expected 'id:depth'"
    """

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid flat hierarchy entry '{text}': {reason}")



class InvalidEntryTypeError(HierarchyError, TypeError):
    """
    Exception raised when a node id or depth is not an integer.

    Booleans are rejected as well, even though ``bool`` subclasses ``int``.

    Attributes:
        field (str): Either "node id" or "depth".
        index (int): Position of the offending value.
        value (object): The value that was supplied.

    Example:
        >>> str(InvalidEntryTypeError("node id", 0, 1.5))
        'Node id at index 0 must be an integer, got float 1.5'
    """

    def __init__(self, field: str, index: int, value: object) -> None:
        self.field = field
        self.index = index
        self.value = value
        super().__init__(
            f"{field.capitalize()} at index {index} must be an integer, got {type(value).__name__} {value!r}"
        )
