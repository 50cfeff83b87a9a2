"""Error taxonomy for loading, classifying and reconciling tree data."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .model import NaturalKey


class TreeSyncError(RuntimeError):
    """Base class for treesync domain errors."""


class LoadError(TreeSyncError):
    """Raised when source data is malformed or cannot be reached."""


class UnknownSourceError(TreeSyncError):
    """Raised when a loading strategy or loader variant key does not exist."""

    def __init__(self, kind: str, key: str, *, known: Sequence[str] = ()) -> None:
        message = f"Unknown {kind}: {key}"
        if known:
            message += f" (expected one of: {', '.join(known)})"
        super().__init__(message)
        self.kind = kind
        self.key = key


class StoreError(TreeSyncError):
    """Raised when a snapshot store operation fails."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation


class DuplicateNaturalKeyError(TreeSyncError):
    """Raised when an incoming batch contains the same natural key more than once."""

    def __init__(self, keys: Sequence[NaturalKey]) -> None:
        preview = ", ".join(f"{gmlid}@{source}" for gmlid, source in keys[:5])
        if len(keys) > 5:
            preview += f", ... ({len(keys)} total)"
        super().__init__(f"Duplicate natural keys in incoming batch: {preview}")
        self.keys = tuple(keys)


class ClassificationWarning(UserWarning):
    """A genus has no entry in the genus reference; the record proceeds without it."""

    def __init__(self, tree_ref: str | None, genus: str | None) -> None:
        super().__init__(f"No genus description found for genus {genus!r} (tree {tree_ref})")
        self.tree_ref = tree_ref
        self.genus = genus
