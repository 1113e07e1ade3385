"""Directory listing pipeline.

This module provides entry collection, classification, sorting,
partitioning and rendering of directory listings.
"""

from dirls.listing.classifier import block_count, is_directory, is_hidden, total_blocks
from dirls.listing.errors import ListingError, NotAccessibleError, PartitionError
from dirls.listing.identity import IdentityResolver
from dirls.listing.mode import format_mode
from dirls.listing.models import DirectoryEntry, EntryMetadata, ListingConfig, Partition
from dirls.listing.reader import DirectoryReader, partition_entries, read_directory, sort_entries
from dirls.listing.renderer import ListingRenderer, format_mtime

__all__ = [
    "DirectoryEntry",
    "DirectoryReader",
    "EntryMetadata",
    "IdentityResolver",
    "ListingConfig",
    "ListingError",
    "ListingRenderer",
    "NotAccessibleError",
    "Partition",
    "PartitionError",
    "block_count",
    "format_mode",
    "format_mtime",
    "is_directory",
    "is_hidden",
    "partition_entries",
    "read_directory",
    "sort_entries",
    "total_blocks",
]
