"""Predicates that test node ids directly."""

from typing import FrozenSet, Iterable

from .base_predicates import BaseNodePredicate


class NodeIdSetPredicate(BaseNodePredicate):
    """Predicate based on membership in a fixed set of node ids.

    With ``include=True`` (the default) the set is an allow-list: only listed ids pass.
    With ``include=False`` it is a deny-list: every id passes except the listed ones.

    Attributes:
        node_ids (FrozenSet[int]): The listed ids.
        include (bool): Whether listed ids pass (allow-list) or fail (deny-list).

    Example:
        >>> allow = NodeIdSetPredicate([1, 2, 3])
        >>> allow.accepts(2), allow.accepts(7)
        (True, False)
        >>> deny = NodeIdSetPredicate([1, 2, 3], include=False)
        >>> deny.accepts(2), deny.accepts(7)
        (False, True)
    """

    def __init__(self, node_ids: Iterable[int], include: bool = True) -> None:
        self.node_ids: FrozenSet[int] = frozenset(node_ids)
        self.include = include

    def accepts(self, node_id: int) -> bool:
        return (node_id in self.node_ids) == self.include

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({sorted(self.node_ids)}, include={self.include})"


class DivisibleByPredicate(BaseNodePredicate):
    """Predicate passing node ids that are exact multiples of a divisor.

    Attributes:
        divisor (int): The non-zero divisor.

    Example:
        >>> by_three = DivisibleByPredicate(3)
        >>> [n for n in range(10) if by_three(n)]
        [0, 3, 6, 9]
    """

    def __init__(self, divisor: int) -> None:
        """Initialize the predicate.

        Args:
            divisor: Non-zero integer divisor. Negative divisors behave like their
                absolute value.

        Raises:
            ValueError: If divisor is zero.
        """
        if divisor == 0:
            raise ValueError("Divisor cannot be zero")
        self.divisor = divisor

    def accepts(self, node_id: int) -> bool:
        return node_id % self.divisor == 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.divisor})"
