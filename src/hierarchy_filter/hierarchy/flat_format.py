"""Parsing of the flat ``[id:depth, ...]`` hierarchy notation."""

import re
from typing import List

from hierarchy_filter.exceptions import FlatFormatError
from hierarchy_filter.hierarchy.array_hierarchy import ArrayBasedHierarchy

_INTEGER = re.compile(r"^[+-]?[0-9]+$")


def parse_format_string(text: str) -> ArrayBasedHierarchy:
    """Parse the output of ``Hierarchy.format_string`` back into a hierarchy.

    Whitespace around the brackets, commas and colons is ignored. Node ids may be
    negative; depths may not.

    Args:
        text: Flat notation such as ``"[1:0, 2:1, 3:0]"`` or ``"[]"``.

    Returns:
        A new ArrayBasedHierarchy holding the parsed entries.

    Raises:
        FlatFormatError: If the text is not bracketed or an entry is not ``id:depth``.
        InvalidDepthError: If a parsed depth is negative.

    Example:
        >>> parse_format_string("[1:0, 2:1, 3:0]").node_ids
        (1, 2, 3)
        >>> parse_format_string(" [ ] ").size()
        0
        >>> parse_format_string("[4:0,5:1]").format_string()
        '[4:0, 5:1]'
    """
    stripped = text.strip()
    if not (stripped.startswith("[") and stripped.endswith("]")):
        raise FlatFormatError(stripped, "expected text enclosed in '[' and ']'")

    body = stripped[1:-1].strip()
    node_ids: List[int] = []
    depths: List[int] = []
    if not body:
        return ArrayBasedHierarchy(node_ids, depths)

    for entry in body.split(","):
        entry = entry.strip()
        parts = entry.split(":")
        if len(parts) != 2:
            raise FlatFormatError(entry, "expected 'id:depth'")
        raw_id, raw_depth = (part.strip() for part in parts)
        if not _INTEGER.match(raw_id):
            raise FlatFormatError(entry, f"node id '{raw_id}' is not an integer")
        if not _INTEGER.match(raw_depth):
            raise FlatFormatError(entry, f"depth '{raw_depth}' is not an integer")
        node_ids.append(int(raw_id))
        depths.append(int(raw_depth))

    return ArrayBasedHierarchy(node_ids, depths)
