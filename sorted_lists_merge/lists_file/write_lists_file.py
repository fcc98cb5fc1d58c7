#!/usr/bin/env python3
"""
write_lists_file.py

Write integer lists as flat whitespace-delimited text.

Two writers live here:

    write_merged_list  - the merged result: one line of space-separated
                         integers ending in a single newline
    write_lists_file   - the input format read by read_sorted_lists: the count
                         N on the first line, then one list per line

PYTHON API
==========

    from sorted_lists_merge.lists_file.write_lists_file import (
        write_lists_file,
        write_merged_list,
    )

    write_lists_file([[1, 4, 5], [], [2, 3]], 'input.txt')
    written = write_merged_list([1, 2, 3, 4, 5], 'output.txt')
    write_merged_list([1, 2, 3], '-')  # stdout
"""

from typing import Iterable, Sequence

from ..utils import DEFAULT_BUFFER_SIZE, close_unless_std, open_output


def format_list_line(values: Iterable[int]) -> str:
    """Join integers with single spaces (empty string for no values)."""
    return " ".join(str(value) for value in values)


def write_merged_list(
    values: Iterable[int],
    output_path: str,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> int:
    """
    Write the merged values as one space-separated line.

    The line always ends with exactly one newline, so an empty merge produces
    a file containing only "\\n".

    Args:
        values: Integers to write (any iterable, consumed once)
        output_path: Output file, or '-' for stdout
        buffer_size: I/O buffer size in bytes (default: 1MB)

    Returns:
        int: Number of values written

    Raises:
        OSError: If the output file cannot be opened or written
    """
    values_written = 0
    output_fh = open_output(output_path, buffer_size)
    try:
        for value in values:
            if values_written:
                output_fh.write(" ")
            output_fh.write(str(value))
            values_written += 1
        output_fh.write("\n")
        output_fh.flush()
    finally:
        close_unless_std(output_fh, output_path)

    return values_written


def write_lists_file(lists: Sequence[Sequence[int]], output_path: str) -> None:
    """
    Write lists in the input format understood by read_sorted_lists.

    Args:
        lists: Integer lists to write; an empty list becomes an empty line
        output_path: Output file, or '-' for stdout

    Raises:
        OSError: If the output file cannot be opened or written
    """
    output_fh = open_output(output_path)
    try:
        output_fh.write(f"{len(lists)}\n")
        for values in lists:
            output_fh.write(format_list_line(values) + "\n")
    finally:
        close_unless_std(output_fh, output_path)
