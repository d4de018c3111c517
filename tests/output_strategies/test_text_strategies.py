import pytest

from hierarchy_filter.exceptions import MalformedHierarchyError
from hierarchy_filter.hierarchy.array_hierarchy import ArrayBasedHierarchy
from hierarchy_filter.output_strategies import (
    FlatOutputStrategy,
    JSONOutputStrategy,
    OutlineOutputStrategy,
    TreeOutputStrategy,
    get_output_strategy,
)
from hierarchy_filter.types import OutputFormat


def test_flat_strategy(sample_forest):
    assert FlatOutputStrategy().format(sample_forest) == sample_forest.format_string()


def test_tree_strategy():
    output = TreeOutputStrategy().format(ArrayBasedHierarchy([1, 2, 3], [0, 1, 0]))

    assert output == "1\n└── 2\n3"


def test_tree_strategy_requires_well_formed_input():
    with pytest.raises(MalformedHierarchyError):
        TreeOutputStrategy().format(ArrayBasedHierarchy([1, 2], [0, 5]))


def test_outline_strategy():
    output = OutlineOutputStrategy().format(ArrayBasedHierarchy([1, 2, 3], [0, 1, 2]))

    assert output == "1\n- 2\n- - 3"


@pytest.mark.parametrize("strategy_class", [FlatOutputStrategy, TreeOutputStrategy, OutlineOutputStrategy])
def test_text_file_extension(strategy_class):
    assert strategy_class().get_file_extension() == ".txt"


@pytest.mark.parametrize(
    "output_format, strategy_class",
    [
        ("flat", FlatOutputStrategy),
        ("tree", TreeOutputStrategy),
        ("outline", OutlineOutputStrategy),
        ("json", JSONOutputStrategy),
        (OutputFormat.TREE, TreeOutputStrategy),
    ],
)
def test_get_output_strategy(output_format, strategy_class):
    assert isinstance(get_output_strategy(output_format), strategy_class)


def test_get_output_strategy_unknown_format():
    with pytest.raises(ValueError):
        get_output_strategy("xml")
