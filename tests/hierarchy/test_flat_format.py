"""Unit tests for parsing the flat hierarchy notation."""

import pytest

from hierarchy_filter.exceptions import FlatFormatError, InvalidDepthError
from hierarchy_filter.hierarchy.flat_format import parse_format_string


def test_parse_canonical_text(sample_forest):
    text = sample_forest.format_string()
    parsed = parse_format_string(text)

    assert parsed == sample_forest
    assert parsed.format_string() == text


def test_parse_empty():
    assert parse_format_string("[]").size() == 0
    assert parse_format_string("  [   ]\n").size() == 0


def test_parse_tolerates_whitespace():
    parsed = parse_format_string(" [ 1 : 0 ,2:1,\t3 :2 ]\n")
    assert parsed.node_ids == (1, 2, 3)
    assert parsed.depths == (0, 1, 2)


def test_parse_negative_and_signed_ids():
    parsed = parse_format_string("[-4:0, +5:1]")
    assert parsed.node_ids == (-4, 5)


@pytest.mark.parametrize(
    "text",
    [
        "1:0, 2:1",
        "[1:0, 2:1",
        "1:0]",
        "",
    ],
)
def test_parse_requires_brackets(text):
    with pytest.raises(FlatFormatError, match="enclosed in"):
        parse_format_string(text)


@pytest.mark.parametrize(
    "text, fragment",
    [
        ("[1-0]", "1-0"),
        ("[1:0:2]", "1:0:2"),
        ("[1:0, ]", ""),
        ("[1:0,, 2:1]", ""),
    ],
)
def test_parse_rejects_malformed_entries(text, fragment):
    with pytest.raises(FlatFormatError) as exc_info:
        parse_format_string(text)
    assert exc_info.value.text == fragment


def test_parse_rejects_non_integer_values():
    with pytest.raises(FlatFormatError, match="node id 'a' is not an integer"):
        parse_format_string("[a:0]")
    with pytest.raises(FlatFormatError, match="depth '1.5' is not an integer"):
        parse_format_string("[1:1.5]")


def test_parse_rejects_negative_depth():
    with pytest.raises(InvalidDepthError):
        parse_format_string("[1:0, 2:-1]")


@pytest.mark.parametrize("text", ["[١:0]", "[1:٠]", "[１:0]"])
def test_parse_rejects_non_ascii_digits(text):
    """Only ASCII digits form ids and depths, so parsed text renders back unchanged."""
    with pytest.raises(FlatFormatError, match="is not an integer"):
        parse_format_string(text)
