"""Exceptions raised by the listing pipeline.

Only failures that make a whole target path unlistable are raised.
Per-entry anomalies (vanished children, undecodable names, unknown
owners, missing timestamps) degrade gracefully inside the pipeline.
"""


class ListingError(Exception):
    """Base exception for listing errors."""


class NotAccessibleError(ListingError):
    """Raised when a target path cannot be stat'ed or opened.

    Attributes:
        path: The target path as requested by the caller.
        reason: The operating system error message.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class PartitionError(ListingError):
    """Raised when partitioning loses or duplicates entries."""
