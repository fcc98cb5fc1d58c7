#!/usr/bin/env python3
"""
Merge Sorted Lists - min-heap k-way merge of in-memory integer lists

Merges N individually sorted integer lists into one sorted list. The heap holds
at most one candidate per list, the next unconsumed element of that list, so
the smallest remaining value is always at the top of the heap.

Usage Examples:
    >>> merge_sorted_lists([[1, 4, 5], [2, 6, 8, 9], [0, 3, 7, 10, 11]])
    [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11]

    >>> merge_sorted_lists([[10, 20], [], [5, 15]])
    [5, 10, 15, 20]

    >>> merge_sorted_lists([])
    []

Requirements:
    - Every input list must be sorted in non-decreasing order. This is not
      checked; unsorted input gives an unspecified ordering.

Performance:
    - Time Complexity: O(M log N) where M is total elements, N is number of lists
    - Space Complexity: O(N) for the heap, plus the output list
"""

import heapq
from typing import Iterator, List, Sequence


def iter_merged_lists(lists: Sequence[Sequence[int]]) -> Iterator[int]:
    """
    Yield the values of several sorted lists in globally sorted order.

    Args:
        lists: Sequence of sorted integer sequences (any of them may be empty)

    Yields:
        int: Next smallest value across all lists

    Algorithm:
        1. Push the first element of every non-empty list onto the heap
        2. Pop the smallest candidate and yield its value
        3. Push the next element from the same list, if there is one
        4. Continue until the heap is empty

    Equal values leave the heap in ascending list index order, since heap
    entries are compared as (value, list_index, position) tuples.
    """
    # Heap elements are tuples: (value, list_index, position)
    heap = []
    for list_idx, values in enumerate(lists):
        if len(values) > 0:
            heap.append((values[0], list_idx, 0))
    heapq.heapify(heap)

    while heap:
        value, list_idx, position = heap[0]
        yield value

        next_position = position + 1
        source = lists[list_idx]
        if next_position < len(source):
            # Replace the top in place: one sift instead of pop + push
            heapq.heapreplace(heap, (source[next_position], list_idx, next_position))
        else:
            heapq.heappop(heap)


def merge_sorted_lists(lists: Sequence[Sequence[int]]) -> List[int]:
    """
    Merge multiple sorted integer lists into a single new sorted list.

    The input lists are only read, never modified. The result contains every
    element of every input list, so its length is the sum of the input lengths.

    Args:
        lists: Sequence of sorted integer sequences

    Returns:
        list: New list with all values in non-decreasing order
    """
    return list(iter_merged_lists(lists))
