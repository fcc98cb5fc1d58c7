"""Lists file module - Read and write flat whitespace-delimited integer lists."""

from .read_lists_file import parse_sorted_lists, read_sorted_lists
from .write_lists_file import write_lists_file, write_merged_list

__all__ = ["read_sorted_lists", "parse_sorted_lists", "write_merged_list", "write_lists_file"]
