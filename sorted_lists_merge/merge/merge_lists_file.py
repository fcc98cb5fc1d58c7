#!/usr/bin/env python3
"""
Merge Lists File - merge the N sorted lists of a lists file into one line

Reads N sorted integer lists from an input file, merges them with a min-heap
k-way merge and writes the merged values as a single space-separated line.

Usage Examples:
    # Merge the lists in input.txt into output.txt
    merge-sorted-lists input.txt output.txt

    # Read from stdin, write to stdout
    cat input.txt | merge-sorted-lists - -

    # Reject input lists that are not sorted
    merge-sorted-lists input.txt output.txt --strict

    # Progress and statistics on stderr
    merge-sorted-lists input.txt - -v 2> merge.log | tr ' ' '\\n' | head

Input format:
    3
    1 4 5
    2 6 8 9
    0 3 7 10 11

Output:
    0 1 2 3 4 5 6 7 8 9 10 11

Exit status is 1 when the input cannot be opened, the count or a value cannot
be parsed, the input ends early, or the output cannot be written.
"""

import argparse
import sys

from ..lists_file.read_lists_file import read_sorted_lists
from ..lists_file.write_lists_file import write_merged_list
from ..utils import DEFAULT_BUFFER_SIZE, log_progress
from .merge_sorted_lists import iter_merged_lists


def merge_lists_file(
    input_path,
    output_path,
    strict=False,
    buffer_size=DEFAULT_BUFFER_SIZE,
    verbose=False,
):
    """
    Read sorted lists from input_path, merge them and write the result.

    Args:
        input_path: Input lists file, or '-' for stdin
        output_path: Output file, or '-' for stdout
        strict: Reject input lists that are not non-decreasing
        buffer_size: I/O buffer size in bytes (default: 1MB)
        verbose: Whether to log progress to stderr

    Returns:
        int: Number of values written

    Raises:
        OSError: Input or output cannot be opened
        ValueError: Malformed input
        EOFError: Input ends before all N lists were read
    """
    sorted_lists = read_sorted_lists(
        input_path, strict=strict, buffer_size=buffer_size, verbose=verbose
    )

    log_progress(f"[MERGE] Starting merge of {len(sorted_lists)} lists...", verbose)
    values_written = write_merged_list(
        iter_merged_lists(sorted_lists), output_path, buffer_size=buffer_size
    )
    log_progress(f"[MERGE] Complete: {values_written} values written", verbose)

    return values_written


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Merge the N sorted integer lists of a lists file into one sorted line.",
        epilog="Examples:\n"
        "  merge-sorted-lists input.txt output.txt\n"
        "  merge-sorted-lists input.txt - --strict -v\n"
        "  cat input.txt | merge-sorted-lists - - > merged.txt",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", help="Input lists file (use '-' for stdin)")
    parser.add_argument("output", help="Output file name (use '-' for stdout)")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if an input list is not sorted in non-decreasing order",
    )
    parser.add_argument(
        "--buffer-size",
        type=int,
        default=DEFAULT_BUFFER_SIZE,
        metavar="BYTES",
        help="I/O buffer size in bytes (default: 1MB)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output to stderr (progress, statistics)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress all stderr progress output (overrides --verbose)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for command-line usage."""
    args = parse_args(argv)

    # Determine verbosity (quiet overrides verbose)
    verbose = args.verbose and not args.quiet

    try:
        merge_lists_file(
            args.input,
            args.output,
            strict=args.strict,
            buffer_size=args.buffer_size,
            verbose=verbose,
        )
    except KeyboardInterrupt:
        print("\n# Interrupted by user", file=sys.stderr)
        sys.exit(1)
    except (OSError, ValueError, EOFError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
