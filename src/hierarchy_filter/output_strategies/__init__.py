"""Output strategies for rendering hierarchies."""

from typing import Dict, Type, Union

from hierarchy_filter.types import OutputFormat

from .base_strategy import OutputStrategy
from .json_strategy import JSONOutputStrategy
from .text_strategies import FlatOutputStrategy, OutlineOutputStrategy, TreeOutputStrategy

_STRATEGIES: Dict[OutputFormat, Type[OutputStrategy]] = {
    OutputFormat.FLAT: FlatOutputStrategy,
    OutputFormat.TREE: TreeOutputStrategy,
    OutputFormat.OUTLINE: OutlineOutputStrategy,
    OutputFormat.JSON: JSONOutputStrategy,
}


def get_output_strategy(output_format: Union[OutputFormat, str]) -> OutputStrategy:
    """Create the strategy for an output format.

    Args:
        output_format: An OutputFormat member or its value ("flat", "tree", "outline", "json").

    Returns:
        A new strategy instance.

    Raises:
        ValueError: If the format name is unknown.

    Example:
        >>> type(get_output_strategy("json")).__name__
        'JSONOutputStrategy'
    """
    return _STRATEGIES[OutputFormat(output_format)]()


__all__ = [
    "FlatOutputStrategy",
    "JSONOutputStrategy",
    "OutlineOutputStrategy",
    "OutputStrategy",
    "TreeOutputStrategy",
    "get_output_strategy",
]
