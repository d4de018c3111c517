"""Unit tests for the argument parser module in the hierarchy-filter CLI."""

import argparse
from pathlib import Path

import pytest

from hierarchy_filter.cli.argparser import build_predicate, create_parser, has_predicate, validate_args
from hierarchy_filter.predicates import AllOfPredicate


@pytest.fixture
def parser():
    return create_parser()


def test_create_parser(parser):
    assert isinstance(parser, argparse.ArgumentParser)
    assert parser.prog == "hierarchy-filter"


def test_defaults(parser):
    args = parser.parse_args([])

    assert args.hierarchy == "-"
    assert args.include_id is None
    assert args.exclude_id is None
    assert args.divisible_by is None
    assert args.format == "flat"
    assert args.output is None
    assert args.check is False
    assert args.summary is False


def test_all_options(parser):
    args = parser.parse_args(
        ["-i", "1", "--include-id", "2", "-x", "3", "-d", "4", "-f", "json", "-o", "out.json", "-c", "-s", "[1:0]"]
    )

    assert args.hierarchy == "[1:0]"
    assert args.include_id == [1, 2]
    assert args.exclude_id == [3]
    assert args.divisible_by == [4]
    assert args.format == "json"
    assert args.output == Path("out.json")
    assert args.check is True
    assert args.summary is True


def test_invalid_format(parser):
    with pytest.raises(SystemExit):
        parser.parse_args(["-f", "xml", "[]"])


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("hierarchy-filter ")


def test_validate_args_rejects_zero_divisor(parser):
    with pytest.raises(ValueError, match="non-zero divisor"):
        validate_args(parser.parse_args(["-d", "2", "-d", "0"]))


def test_validate_args_accepts_valid_arguments(parser):
    validate_args(parser.parse_args(["-d", "2", "-x", "0"]))


def test_build_predicate_without_options_accepts_everything(parser):
    args = parser.parse_args([])
    predicate = build_predicate(args)

    assert not has_predicate(args)
    assert all(predicate(n) for n in (-5, 0, 7, 10**9))


def test_build_predicate_combines_groups(parser):
    args = parser.parse_args(["-i", "3", "-i", "4", "-i", "6", "-d", "2"])
    predicate = build_predicate(args)

    assert has_predicate(args)
    assert isinstance(predicate, AllOfPredicate)
    assert [n for n in range(10) if predicate(n)] == [4, 6]


def test_build_predicate_divisors_are_or_ed(parser):
    predicate = build_predicate(parser.parse_args(["-d", "3", "-d", "5"]))

    assert [n for n in range(1, 16) if predicate(n)] == [3, 5, 6, 9, 10, 12, 15]
