"""
Sorted Lists Merge

A Python package for merging N sorted integer lists into one sorted list.
Provides an in-memory min-heap k-way merge plus readers and writers for the
flat whitespace-delimited lists file format.

Modules:
    merge: K-way merge of sorted lists and the merge-sorted-lists command
    lists_file: Reading and writing lists files
    utils: Shared utilities
"""

__version__ = "1.0.0"

from .lists_file.read_lists_file import parse_sorted_lists, read_sorted_lists
from .lists_file.write_lists_file import write_lists_file, write_merged_list
from .merge.merge_lists_file import merge_lists_file
from .merge.merge_sorted_lists import iter_merged_lists, merge_sorted_lists

__all__ = [
    "merge_sorted_lists",
    "iter_merged_lists",
    "merge_lists_file",
    "read_sorted_lists",
    "parse_sorted_lists",
    "write_merged_list",
    "write_lists_file",
    "__version__",
]
