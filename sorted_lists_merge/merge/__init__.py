"""Merge module - K-way merge of sorted integer lists."""

from .merge_lists_file import merge_lists_file
from .merge_sorted_lists import iter_merged_lists, merge_sorted_lists

__all__ = ["merge_sorted_lists", "iter_merged_lists", "merge_lists_file"]
