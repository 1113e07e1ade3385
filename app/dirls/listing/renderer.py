"""Text rendering of directory listings.

Two modes are supported: a compact tab-separated list of names, and a
detailed listing with one line per entry in the spirit of ``ls -l``.
"""

import logging
import os
from datetime import UTC, datetime

from dirls.listing.classifier import total_blocks
from dirls.listing.identity import IdentityResolver
from dirls.listing.mode import format_mode
from dirls.listing.models import DirectoryEntry, Partition

logger = logging.getLogger(__name__)

MTIME_FORMAT = "%b %d %H:%M"
UNKNOWN_MTIME = "Unknown"


def format_mtime(timestamp: float | None) -> str:
    """Format a modification time as ``Jan 05 14:32`` in UTC.

    Args:
        timestamp: Seconds since the epoch, or None if unavailable.

    Returns:
        Formatted time, or ``Unknown`` when no usable timestamp exists.
    """
    if timestamp is None:
        return UNKNOWN_MTIME
    try:
        return datetime.fromtimestamp(timestamp, tz=UTC).strftime(MTIME_FORMAT)
    except (OverflowError, OSError, ValueError):
        return UNKNOWN_MTIME


def read_link_target(path: bytes) -> str | None:
    """Read where a symlink points, as returned by the OS.

    Returns:
        The link target decoded for display, or None if the path is
        not a readable symlink.
    """
    try:
        target = os.readlink(path)
    except OSError:
        return None
    return target.decode(errors="replace")


class ListingRenderer:
    """Renders a partition of entries as text.

    Args:
        list_output: True for the detailed format, False for the compact one.
        resolver: Identity resolver used for owner and group names.
    """

    def __init__(self, *, list_output: bool, resolver: IdentityResolver) -> None:
        self._list_output = list_output
        self._resolver = resolver

    def render(self, partition: Partition) -> str:
        """Render files first, then directories, ending with a newline."""
        if self._list_output:
            return self.render_detailed(partition)
        return self.render_compact(partition)

    def render_compact(self, partition: Partition) -> str:
        """Render names separated by tabs, skipping undecodable names."""
        parts: list[str] = []
        for entry in partition.ordered():
            name = entry.display_name
            if name is None:
                logger.debug("Skipping undecodable name %r", entry.name)
                continue
            parts.append(f"{name}\t")
        parts.append("\n")
        return "".join(parts)

    def render_detailed(self, partition: Partition) -> str:
        """Render a ``total`` line followed by one line per entry.

        The total only counts blocks of the files partition.
        """
        lines = [f"total {total_blocks(partition.files)}\n"]
        for entry in partition.ordered():
            line = self.format_entry(entry)
            if line is not None:
                lines.append(f"{line}\n")
        lines.append("\n")
        return "".join(lines)

    def format_entry(self, entry: DirectoryEntry) -> str | None:
        """Format one detailed line, or None if the entry has no metadata."""
        metadata = entry.metadata
        if metadata is None:
            return None

        line = "\t".join(
            (
                format_mode(metadata.mode),
                str(metadata.nlink),
                self._resolver.resolve_user(metadata.uid),
                self._resolver.resolve_group(metadata.gid),
                str(metadata.size),
                format_mtime(metadata.mtime),
                entry.display_name or "",
            )
        )

        if metadata.is_symlink:
            target = read_link_target(entry.path)
            if target is not None:
                line = f"{line} -> {target}"

        return line
