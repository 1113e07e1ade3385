"""Listing domain models.

This module defines the data structures that flow through the listing
pipeline: per-entry metadata, directory entries with raw byte names,
the files/directories partition, and the resolved run configuration.
"""

from __future__ import annotations

import os
import stat
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class EntryMetadata:
    """Metadata of a single filesystem entry, taken without following symlinks.

    Attributes:
        mode: POSIX ``st_mode`` value (file type and permission bits).
        nlink: Number of hard links.
        uid: Numeric owner id.
        gid: Numeric group id.
        size: Size in bytes.
        blocks: Number of storage blocks allocated (``st_blocks``).
        mtime: Modification time in seconds since the epoch (None if unavailable).
    """

    mode: int
    nlink: int
    uid: int
    gid: int
    size: int
    blocks: int
    mtime: float | None

    @classmethod
    def from_stat(cls, result: os.stat_result) -> EntryMetadata:
        """Build metadata from an ``os.stat_result``."""
        return cls(
            mode=result.st_mode,
            nlink=result.st_nlink,
            uid=result.st_uid,
            gid=result.st_gid,
            size=result.st_size,
            blocks=getattr(result, "st_blocks", 0),
            mtime=result.st_mtime,
        )

    @property
    def is_symlink(self) -> bool:
        """Check if the entry itself is a symbolic link."""
        return stat.S_ISLNK(self.mode)


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """A single child of a listed directory.

    Names and paths are kept as raw bytes because filenames are not
    guaranteed to be valid text.

    Attributes:
        name: Raw filename.
        path: Raw path of the entry (parent joined with name).
        is_directory: True if the entry resolves to a directory (symlinks followed).
        metadata: Metadata of the entry itself, or None if it could not be read.
    """

    name: bytes
    path: bytes
    is_directory: bool
    metadata: EntryMetadata | None = None

    @property
    def display_name(self) -> str | None:
        """Decode the filename as text.

        Returns:
            The decoded name, or None if it is not valid in the
            filesystem encoding.
        """
        try:
            return self.name.decode(sys.getfilesystemencoding())
        except UnicodeDecodeError:
            return None


@dataclass(frozen=True, slots=True)
class Partition:
    """Entries of one directory split into files and directories.

    Both sequences are sorted by path bytes.
    """

    files: tuple[DirectoryEntry, ...] = ()
    directories: tuple[DirectoryEntry, ...] = ()

    def ordered(self) -> Iterator[DirectoryEntry]:
        """Iterate files first, then directories."""
        yield from self.files
        yield from self.directories

    def __len__(self) -> int:
        return len(self.files) + len(self.directories)


@dataclass(frozen=True, slots=True)
class ListingConfig:
    """Resolved configuration of a listing run.

    Attributes:
        paths: Target paths in the order given. Defaults to the current directory.
        list_output: True for detailed (``-l``) output.
        show_directory_name: True when more than one path was requested.
    """

    paths: tuple[str, ...] = (".",)
    list_output: bool = False
    show_directory_name: bool = field(init=False)

    def __post_init__(self) -> None:
        """Apply defaults and derive the header flag."""
        if not self.paths:
            object.__setattr__(self, "paths", (".",))
        object.__setattr__(self, "show_directory_name", len(self.paths) > 1)

    @classmethod
    def from_args(cls, paths: Sequence[str] | None, list_output: bool = False) -> ListingConfig:
        """Create a config from command-line style arguments."""
        return cls(paths=tuple(paths or ()), list_output=list_output)
