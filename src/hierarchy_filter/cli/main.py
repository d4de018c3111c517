"""Command-line interface for hierarchy-filter.

This module provides the command-line interface for hierarchy-filter, allowing users to
filter a forest given in flat ``[id:depth, ...]`` notation and render the result. It
handles argument parsing, input reading, output formatting and error reporting.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution (including unparsable or malformed input)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Keep the leading run of even node ids
    $ hierarchy-filter -d 2 "[2:0, 4:1, 5:1, 6:0]"
    [2:0, 4:1]

    # Display version information
    $ hierarchy-filter --version
"""

import sys
from typing import Optional, Sequence

from hierarchy_filter.cli.argparser import build_predicate, create_parser, has_predicate, validate_args
from hierarchy_filter.filter import filter_hierarchy
from hierarchy_filter.hierarchy.flat_format import parse_format_string
from hierarchy_filter.hierarchy.validation import check_well_formed
from hierarchy_filter.output_strategies import get_output_strategy


def read_hierarchy_text(source: str) -> str:
    """Return the hierarchy text given on the command line, or stdin for ``-``."""
    if source == "-":
        return sys.stdin.read()
    return source


def format_summary(kept: int, total: int) -> str:
    """Format the kept/total counts into a human-readable string.

    Example:
        >>> format_summary(3, 11)
        'Kept: 3\\nTotal: 11\\nRemoved: 8'
    """
    return "\n".join([f"Kept: {kept}", f"Total: {total}", f"Removed: {total - kept}"])


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the hierarchy-filter command-line interface.

    Args:
        argv: Argument list to parse instead of ``sys.argv[1:]``.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    parser = create_parser()
    # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
    args = parser.parse_args(argv)

    try:
        validate_args(args)

        hierarchy = parse_format_string(read_hierarchy_text(args.hierarchy))
        if args.check:
            check_well_formed(hierarchy)

        if not has_predicate(args):
            print("Warning: No predicate options given; every node is kept.", file=sys.stderr)

        filtered = filter_hierarchy(hierarchy, build_predicate(args))
        strategy = get_output_strategy(args.format)
        output = strategy.format(filtered)

        if args.output:
            expected_extension = strategy.get_file_extension()
            if args.output.suffix.lower() != expected_extension:
                print(
                    f"Warning: Output file '{args.output}' does not use the {expected_extension} extension "
                    f"expected for {args.format} output.",
                    file=sys.stderr,
                )
            args.output.write_text(output + "\n" if output else "", encoding="utf-8")
        elif output:
            sys.stdout.write(output + "\n")
            sys.stdout.flush()

        if args.summary:
            print(format_summary(filtered.size(), hierarchy.size()), file=sys.stderr)

    except BrokenPipeError:
        sys.exit(141)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
