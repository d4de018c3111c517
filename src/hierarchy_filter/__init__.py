"""Depth-encoded forest utilities.

This package stores an ordered forest as a flat sequence of (node id, depth)
pairs in depth-first order and filters such forests by a predicate on node ids.
"""

from importlib.metadata import PackageNotFoundError, version

from hierarchy_filter.filter import filter_hierarchy
from hierarchy_filter.hierarchy import ArrayBasedHierarchy, Hierarchy, parse_format_string

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("hierarchy-filter")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "ArrayBasedHierarchy",
    "Hierarchy",
    "filter_hierarchy",
    "parse_format_string",
]
