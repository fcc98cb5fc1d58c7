"""
Shared helpers for the command-line tools: progress logging and '-' handling.
"""

import sys

DEFAULT_BUFFER_SIZE = 1024 * 1024


def log_progress(message, verbose=False):
    """
    Log progress message to stderr if verbose is enabled.

    Args:
        message: Message to log
        verbose: Whether to output the message
    """
    if verbose:
        print(message, file=sys.stderr)


def open_input(input_path, buffer_size=DEFAULT_BUFFER_SIZE):
    """Open input_path for reading text, or return stdin for '-'."""
    if input_path == "-":
        return sys.stdin
    return open(input_path, "r", encoding="utf-8", buffering=buffer_size)


def open_output(output_path, buffer_size=DEFAULT_BUFFER_SIZE):
    """Open output_path for writing text, or return stdout for '-'."""
    if output_path == "-":
        return sys.stdout
    return open(output_path, "w", encoding="utf-8", buffering=buffer_size)


def close_unless_std(fh, path):
    """Close a handle from open_input/open_output, leaving stdin/stdout open."""
    if path != "-":
        fh.close()
