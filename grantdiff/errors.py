"""Exceptions for caller faults.

Discrepancies between snapshots are never raised; they are recorded.  The
classes here cover inputs the engine cannot work with.
"""

from __future__ import annotations

from pathlib import Path


class GrantDiffError(Exception):
    """Base class for all grantdiff exceptions."""


class UnsortedGrantsError(GrantDiffError):
    """Raised by the order check when keys are not strictly increasing."""

    def __init__(self, kind: str, index: int, previous_key: str, key: str) -> None:
        super().__init__(
            f"{kind} grants are not sorted by key: {key!r} at index {index} "
            f"does not sort after {previous_key!r}"
        )
        self.kind = kind
        self.index = index
        self.previous_key = previous_key
        self.key = key


class SnapshotFormatError(GrantDiffError):
    """Raised when a snapshot file cannot be read as a permission snapshot."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Invalid snapshot file {path}: {reason}")
        self.path = str(path)
        self.reason = reason
