"""Depth-first encoded forest representation.

This module provides the abstract Hierarchy view, its array-backed implementation,
parsing of the flat ``[id:depth, ...]`` notation, structural validation, and tree
views built on anytree.
"""

from .array_hierarchy import ArrayBasedHierarchy
from .base_hierarchy import Hierarchy
from .flat_format import parse_format_string
from .forest import get_tree_representation, stream_outline_representation, stream_tree_representation, to_forest
from .hierarchy_node import HierarchyNode
from .validation import check_well_formed, is_well_formed

__all__ = [
    "ArrayBasedHierarchy",
    "Hierarchy",
    "HierarchyNode",
    "check_well_formed",
    "get_tree_representation",
    "is_well_formed",
    "parse_format_string",
    "stream_outline_representation",
    "stream_tree_representation",
    "to_forest",
]
