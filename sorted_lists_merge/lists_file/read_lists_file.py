#!/usr/bin/env python3
"""
read_lists_file.py

Read N sorted integer lists from a flat text file into memory.

INPUT FORMAT
============

The first token is the number of lists N. Anything after it on the same line
is ignored. Each of the next N lines holds one list as whitespace-separated
integers; an empty line is an empty list. Lines after the N-th are ignored.

    3
    1 4 5
    2 6 8 9
    0 3 7 10 11

A file with no count at all (empty, or only whitespace) holds zero lists.

ERRORS
======

    OSError      - the input file cannot be opened
    ValueError   - the count is not an integer or is negative, a list line
                   holds a token that is not an integer, or (strict mode) a
                   list is not in non-decreasing order
    EOFError     - the input ends before N list lines were read

PYTHON API
==========

    from sorted_lists_merge.lists_file.read_lists_file import read_sorted_lists

    lists = read_sorted_lists('input.txt')
    lists = read_sorted_lists('-', strict=True)  # stdin, check ordering
"""

from typing import Iterable, List

from ..utils import DEFAULT_BUFFER_SIZE, close_unless_std, log_progress, open_input


def parse_list_line(line: str, line_num: int) -> List[int]:
    """
    Parse one list line into integers.

    Args:
        line: Text of the line (may be empty)
        line_num: 1-based line number, used in error messages

    Returns:
        List of integers in the order they appear

    Raises:
        ValueError: If a token is not an integer
    """
    values = []
    for token in line.split():
        try:
            values.append(int(token))
        except ValueError:
            raise ValueError(
                f"Invalid integer {token!r} on line {line_num}"
            ) from None
    return values


def is_non_decreasing(values: List[int]) -> bool:
    """Return True if every value is <= the one after it."""
    return all(a <= b for a, b in zip(values, values[1:]))


def parse_sorted_lists(lines: Iterable[str], strict: bool = False) -> List[List[int]]:
    """
    Parse the lists file format from an iterable of lines.

    Args:
        lines: Lines of the input (with or without trailing newlines)
        strict: Raise ValueError for a list that is not non-decreasing

    Returns:
        List of N integer lists, in file order

    Raises:
        ValueError: Bad count, bad integer token, or unsorted list in strict mode
        EOFError: Fewer than N list lines after the count

    Example:
        >>> parse_sorted_lists(["2\\n", "1 3\\n", "2\\n"])
        [[1, 3], [2]]
    """
    line_iter = iter(lines)
    line_num = 0

    # The count may be preceded by blank lines
    count_token = None
    for line in line_iter:
        line_num += 1
        tokens = line.split()
        if tokens:
            count_token = tokens[0]
            break

    if count_token is None:
        return []

    try:
        n = int(count_token)
    except ValueError:
        raise ValueError(
            f"Could not read the number of lists N: {count_token!r} on line {line_num}"
        ) from None
    if n < 0:
        raise ValueError(f"Number of lists N must not be negative, got {n}")

    sorted_lists = []
    for line in line_iter:
        if len(sorted_lists) == n:
            break
        line_num += 1
        values = parse_list_line(line, line_num)
        if strict and not is_non_decreasing(values):
            raise ValueError(f"List on line {line_num} is not sorted in non-decreasing order")
        sorted_lists.append(values)

    if len(sorted_lists) < n:
        raise EOFError(
            f"Unexpected end of input: expected {n} lists, got {len(sorted_lists)}"
        )

    return sorted_lists


def read_sorted_lists(
    input_path: str,
    strict: bool = False,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    verbose: bool = False,
) -> List[List[int]]:
    """
    Read N sorted lists from a lists file.

    Args:
        input_path: Input file, or '-' for stdin
        strict: Raise ValueError for a list that is not non-decreasing
        buffer_size: I/O buffer size in bytes (default: 1MB)
        verbose: Whether to log progress to stderr

    Returns:
        List of N integer lists

    Raises:
        OSError: If the input file cannot be opened
        ValueError: See parse_sorted_lists
        EOFError: See parse_sorted_lists
    """
    log_progress(f"[READ] Reading lists from {input_path}", verbose)
    input_fh = open_input(input_path, buffer_size)
    try:
        sorted_lists = parse_sorted_lists(input_fh, strict=strict)
    finally:
        close_unless_std(input_fh, input_path)

    total = sum(len(values) for values in sorted_lists)
    log_progress(f"[READ] {len(sorted_lists)} lists, {total} values", verbose)
    return sorted_lists
