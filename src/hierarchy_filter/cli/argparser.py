"""Command-line argument parsing for hierarchy-filter.

This module defines the command-line interface for hierarchy-filter,
handling argument parsing, validation and predicate construction.
"""

import argparse
from pathlib import Path
from typing import List

from hierarchy_filter import __version__
from hierarchy_filter.predicates import AllOfPredicate, AnyOfPredicate, DivisibleByPredicate, NodeIdSetPredicate
from hierarchy_filter.types import NodeIdPredicate, OutputFormat


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with hierarchy-filter's options.
    """
    description = """
    hierarchy-filter: filter a depth-first encoded forest by node id.

    The forest is given in flat notation, "[id:depth, id:depth, ...]", listing nodes
    in depth-first order with roots at depth 0. A node is kept only while every node
    read so far, from the first entry up to and including it, passes the predicate.
    The first rejected node therefore ends the output.

    Predicate options of the same kind are combined with OR; different kinds are
    combined with AND. Without any predicate option every node is kept.
    """

    epilog = """
    Examples:
      # Keep the leading run of even node ids
      hierarchy-filter -d 2 "[2:0, 4:1, 5:1, 6:0]"

      # Read from stdin and draw the result as a tree
      echo "[1:0, 2:1, 3:2]" | hierarchy-filter -x 9 -f tree

      # Keep only listed ids, refusing malformed input
      hierarchy-filter --check -i 1 -i 2 "[1:0, 2:1]"

      # Print how many nodes were kept to stderr
      hierarchy-filter -s -d 3 "[3:0, 6:1, 7:0]"

      # Display version information and exit
      hierarchy-filter -V
    """

    parser = argparse.ArgumentParser(
        prog="hierarchy-filter",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"hierarchy-filter {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "hierarchy",
        nargs="?",
        default="-",
        metavar="HIERARCHY",
        help='Hierarchy in flat notation, e.g. "[1:0, 2:1]". Use "-" or omit to read from stdin.',
    )
    parser.add_argument(
        "-i",
        "--include-id",
        type=int,
        action="append",
        metavar="ID",
        help="Node id that passes the predicate (can be specified multiple times).",
    )
    parser.add_argument(
        "-x",
        "--exclude-id",
        type=int,
        action="append",
        metavar="ID",
        help="Node id that fails the predicate (can be specified multiple times).",
    )
    parser.add_argument(
        "-d",
        "--divisible-by",
        type=int,
        action="append",
        metavar="N",
        help="Node ids that are multiples of N pass (can be specified multiple times).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[output_format.value for output_format in OutputFormat],
        default=OutputFormat.FLAT.value,
        help="Output format for the filtered hierarchy (default: flat).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-c",
        "--check",
        action="store_true",
        help="Fail if the input is not a well-formed depth-first encoding.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print the number of kept and total nodes to stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.divisible_by and 0 in args.divisible_by:
        raise ValueError("--divisible-by requires a non-zero divisor")


def build_predicate(args: argparse.Namespace) -> NodeIdPredicate:
    """Combine the predicate options into a single predicate.

    Args:
        args: Parsed and validated command-line arguments.

    Returns:
        A predicate that is the AND of every given option group, or one that accepts
        every node id when no predicate option was given.

    Example:
        >>> args = create_parser().parse_args(["-d", "3", "-d", "4", "-x", "12", "[]"])
        >>> predicate = build_predicate(args)
        >>> [n for n in range(1, 13) if predicate(n)]
        [3, 4, 6, 8, 9]
    """
    groups: List[NodeIdPredicate] = []
    if args.include_id:
        groups.append(NodeIdSetPredicate(args.include_id))
    if args.exclude_id:
        groups.append(NodeIdSetPredicate(args.exclude_id, include=False))
    if args.divisible_by:
        groups.append(AnyOfPredicate([DivisibleByPredicate(divisor) for divisor in args.divisible_by]))

    if not groups:
        return NodeIdSetPredicate([], include=False)
    return AllOfPredicate(groups)


def has_predicate(args: argparse.Namespace) -> bool:
    """Return True if any predicate option was given."""
    return bool(args.include_id or args.exclude_id or args.divisible_by)
