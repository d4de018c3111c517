"""Composite predicates for combining node id tests."""

from typing import List, Sequence

from hierarchy_filter.types import NodeIdPredicate

from .base_predicates import BaseNodePredicate


class CompositePredicate(BaseNodePredicate):
    """Base class for predicates combining several constituent predicates.

    Constituents may be BaseNodePredicate instances or any other callable taking a
    node id, such as a lambda. They are evaluated in the order given, with
    short-circuiting.

    Attributes:
        predicates (List[NodeIdPredicate]): Constituent predicates.
    """

    def __init__(self, predicates: Sequence[NodeIdPredicate]) -> None:
        """Initialize the composite.

        Args:
            predicates: Sequence of callables to combine.

        Raises:
            ValueError: If predicates is empty.
            TypeError: If any element is not callable.
        """
        if not predicates:
            raise ValueError("At least one predicate must be provided")

        for i, predicate in enumerate(predicates):
            if not callable(predicate):
                raise TypeError(f"Predicate at index {i} must be callable, got {type(predicate)}")

        self.predicates: List[NodeIdPredicate] = list(predicates)

    def add_predicate(self, predicate: NodeIdPredicate) -> None:
        """Append another constituent predicate.

        Raises:
            TypeError: If predicate is not callable.
        """
        if not callable(predicate):
            raise TypeError(f"Predicate must be callable, got {type(predicate)}")
        self.predicates.append(predicate)

    def get_predicate_count(self) -> int:
        return len(self.predicates)

    def get_predicates(self) -> List[NodeIdPredicate]:
        """Get a copy of the constituent predicate list."""
        return list(self.predicates)


class AnyOfPredicate(CompositePredicate):
    """Passes a node id if ANY constituent predicate passes it.

    Example:
        >>> from hierarchy_filter.predicates.id_predicates import DivisibleByPredicate
        >>> multiple_of_3_or_4 = AnyOfPredicate([DivisibleByPredicate(4), DivisibleByPredicate(3)])
        >>> [n for n in range(1, 13) if multiple_of_3_or_4(n)]
        [3, 4, 6, 8, 9, 12]
    """

    def accepts(self, node_id: int) -> bool:
        return any(predicate(node_id) for predicate in self.predicates)


class AllOfPredicate(CompositePredicate):
    """Passes a node id only if ALL constituent predicates pass it.

    Example:
        >>> from hierarchy_filter.predicates.id_predicates import DivisibleByPredicate, NodeIdSetPredicate
        >>> even_but_not_four = AllOfPredicate([DivisibleByPredicate(2), NodeIdSetPredicate([4], include=False)])
        >>> [n for n in range(1, 9) if even_but_not_four(n)]
        [2, 6, 8]
    """

    def accepts(self, node_id: int) -> bool:
        return all(predicate(node_id) for predicate in self.predicates)


class NotPredicate(BaseNodePredicate):
    """Inverts another predicate.

    Example:
        >>> from hierarchy_filter.predicates.id_predicates import DivisibleByPredicate
        >>> odd = NotPredicate(DivisibleByPredicate(2))
        >>> odd(3), odd(4)
        (True, False)
    """

    def __init__(self, predicate: NodeIdPredicate) -> None:
        if not callable(predicate):
            raise TypeError(f"Predicate must be callable, got {type(predicate)}")
        self.predicate = predicate

    def accepts(self, node_id: int) -> bool:
        return not self.predicate(node_id)
