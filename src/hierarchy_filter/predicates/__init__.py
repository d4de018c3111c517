"""Reusable node id predicates for filtering hierarchies."""

from .base_predicates import BaseNodePredicate
from .composite_predicates import AllOfPredicate, AnyOfPredicate, CompositePredicate, NotPredicate
from .id_predicates import DivisibleByPredicate, NodeIdSetPredicate

__all__ = [
    "AllOfPredicate",
    "AnyOfPredicate",
    "BaseNodePredicate",
    "CompositePredicate",
    "DivisibleByPredicate",
    "NodeIdSetPredicate",
    "NotPredicate",
]
