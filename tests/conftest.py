"""Test configuration and fixtures for hierarchy_filter."""

import pytest

from hierarchy_filter.hierarchy.array_hierarchy import ArrayBasedHierarchy


@pytest.fixture
def sample_forest():
    """Forest used throughout the documentation.

    1
    ├── 2
    │   └── 3
    │       └── 4
    └── 5
    6
    └── 7
    8
    ├── 9
    └── 10
        └── 11
    """
    return ArrayBasedHierarchy(
        [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11],
        [0, 1, 2, 3, 1, 0, 1, 0, 1, 1, 2],
    )


@pytest.fixture
def extended_forest():
    """The sample forest with a twelfth node attached under 8."""
    return ArrayBasedHierarchy(
        [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12],
        [0, 1, 2, 3, 1, 0, 1, 0, 1, 1, 2, 1],
    )


@pytest.fixture
def empty_hierarchy():
    return ArrayBasedHierarchy([], [])
