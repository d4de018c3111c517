from abc import ABC, abstractmethod


class BaseNodePredicate(ABC):
    """
    Abstract base class defining the interface for node id predicates.

    This class serves as a contract for reusable predicates (e.g., id allow-lists,
    divisibility tests, combinations of other predicates) that decide which node ids
    pass a hierarchy filter. Instances are callable, so they can be handed directly to
    ``filter_hierarchy`` wherever a plain function is accepted.

    Example:
        >>> from hierarchy_filter.predicates.id_predicates import DivisibleByPredicate
        >>> even = DivisibleByPredicate(2)
        >>> even.accepts(4)
        True
        >>> even(3)
        False
    """

    @abstractmethod
    def accepts(self, node_id: int) -> bool:
        """
        Determine whether a node id passes this predicate.

        This method must be implemented by concrete subclasses.

        Args:
            node_id (int): The node id to test.

        Returns:
            bool: True if the node id passes, False if it is rejected.

        Example:
            >>> class PositivePredicate(BaseNodePredicate):
            ...     def accepts(self, node_id: int) -> bool:
            ...         return node_id > 0
            >>> PositivePredicate().accepts(-1)
            False
        """
        pass

    def __call__(self, node_id: int) -> bool:
        return self.accepts(node_id)
