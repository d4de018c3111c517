from enum import Enum
from typing import Callable

# Any callable deciding whether a node id passes a filter
NodeIdPredicate = Callable[[int], bool]


class OutputFormat(Enum):
    """Enumeration of the renderings available for a hierarchy.

    Attributes:
        FLAT: The canonical ``[id:depth, ...]`` string.
        TREE: Connector-style tree drawing, one root per top-level line.
        OUTLINE: Hyphen outline where the hyphen count equals the depth.
        JSON: A JSON array of ``{"id": ..., "depth": ...}`` objects.
    """

    FLAT = "flat"
    TREE = "tree"
    OUTLINE = "outline"
    JSON = "json"
