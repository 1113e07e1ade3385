"""Classification helpers for directory entries."""

import os
import stat
from collections.abc import Iterable

from dirls.listing.models import DirectoryEntry


def is_hidden(entry: DirectoryEntry) -> bool:
    """Check if an entry is a dotfile, which is hidden by default.

    Names that cannot be decoded are treated as visible.
    """
    name = entry.display_name
    return name is not None and name.startswith(".")


def is_directory(path: bytes) -> bool:
    """Check if a path resolves to a directory, following symlinks.

    A dangling symlink resolves to nothing and is not a directory.
    """
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except OSError:
        return False


def block_count(entry: DirectoryEntry) -> int:
    """Get the number of storage blocks used by an entry (0 without metadata)."""
    if entry.metadata is None:
        return 0
    return entry.metadata.blocks


def total_blocks(entries: Iterable[DirectoryEntry]) -> int:
    """Sum block counts over entries."""
    return sum(block_count(entry) for entry in entries)
