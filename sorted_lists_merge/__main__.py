"""Allow running the merge command with ``python -m sorted_lists_merge``."""

from .merge.merge_lists_file import main

if __name__ == "__main__":
    main()
