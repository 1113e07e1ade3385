"""Directory reading for the listing pipeline.

Reads the immediate children of a target directory, drops hidden
entries, sorts the rest by path bytes, and partitions them into files
and directories before handing them to the renderer.
"""

import logging
import os
import stat
from collections.abc import Iterable

from dirls.listing.classifier import is_directory, is_hidden
from dirls.listing.errors import NotAccessibleError, PartitionError
from dirls.listing.identity import IdentityResolver
from dirls.listing.models import DirectoryEntry, EntryMetadata, ListingConfig, Partition
from dirls.listing.renderer import ListingRenderer

logger = logging.getLogger(__name__)


def _os_error_message(error: OSError) -> str:
    """Get the human-readable part of an OSError."""
    return error.strerror or str(error)


def sort_entries(entries: Iterable[DirectoryEntry]) -> list[DirectoryEntry]:
    """Sort entries by full path, comparing raw bytes."""
    return sorted(entries, key=lambda entry: entry.path)


def partition_entries(entries: list[DirectoryEntry]) -> Partition:
    """Split sorted entries into files and directories in one pass.

    Relative order within each group is preserved.

    Args:
        entries: Entries to partition, typically already sorted.

    Returns:
        Partition holding every entry exactly once.

    Raises:
        PartitionError: If the partition does not account for every entry.
    """
    files: list[DirectoryEntry] = []
    directories: list[DirectoryEntry] = []

    for entry in entries:
        if entry.is_directory:
            directories.append(entry)
        else:
            files.append(entry)

    partition = Partition(files=tuple(files), directories=tuple(directories))
    if len(partition) != len(entries):
        msg = f"Partition holds {len(partition)} entries, expected {len(entries)}"
        raise PartitionError(msg)
    return partition


class DirectoryReader:
    """Reads and renders target paths.

    Args:
        config: Resolved listing configuration.
        resolver: Identity resolver shared by all paths of the run.
            A fresh resolver is created if omitted.
    """

    def __init__(self, config: ListingConfig, resolver: IdentityResolver | None = None) -> None:
        self._config = config
        self._renderer = ListingRenderer(
            list_output=config.list_output,
            resolver=resolver if resolver is not None else IdentityResolver(),
        )

    def read(self, path: str) -> str:
        """Read a target path and return its rendered listing.

        A regular file renders as its own path. A directory renders as
        the listing of its visible children.

        Args:
            path: Target path as given by the caller.

        Returns:
            Rendered listing text, including the trailing newline.

        Raises:
            NotAccessibleError: If the path cannot be stat'ed or opened.
        """
        try:
            target = os.stat(path)
        except OSError as e:
            raise NotAccessibleError(path, _os_error_message(e)) from e

        if stat.S_ISREG(target.st_mode):
            return f"{path}\n"

        partition = self.collect(path)
        return self._renderer.render(partition)

    def collect(self, path: str) -> Partition:
        """Collect the visible children of a directory as a partition.

        Args:
            path: Directory to enumerate.

        Returns:
            Sorted partition of files and directories.

        Raises:
            NotAccessibleError: If the directory cannot be opened.
        """
        entries = [entry for entry in self._scan(path) if not is_hidden(entry)]
        return partition_entries(sort_entries(entries))

    def _scan(self, path: str) -> list[DirectoryEntry]:
        """Enumerate immediate children, skipping unreadable ones."""
        entries: list[DirectoryEntry] = []

        try:
            with os.scandir(os.fsencode(path)) as it:
                for child in it:
                    try:
                        metadata = EntryMetadata.from_stat(child.stat(follow_symlinks=False))
                    except OSError as e:
                        logger.debug("Skipping unreadable entry %r: %s", child.path, e)
                        continue

                    entries.append(
                        DirectoryEntry(
                            name=child.name,
                            path=child.path,
                            is_directory=is_directory(child.path),
                            metadata=metadata,
                        )
                    )
        except OSError as e:
            raise NotAccessibleError(path, _os_error_message(e)) from e

        logger.debug("Read %d entries from %s", len(entries), path)
        return entries


def read_directory(
    path: str,
    config: ListingConfig,
    resolver: IdentityResolver | None = None,
) -> str:
    """Read and render a single target path.

    Convenience wrapper around :class:`DirectoryReader`.

    Raises:
        NotAccessibleError: If the path cannot be stat'ed or opened.
    """
    return DirectoryReader(config, resolver).read(path)
