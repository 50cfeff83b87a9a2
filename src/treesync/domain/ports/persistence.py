"""Ports for persisting tree records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from treesync.domain.model import CanonicalTreeRecord


@runtime_checkable
class TreeRepository(Protocol):
    """Snapshot store for the ``trees`` table and the rows that reference it.

    Every bulk operation is a no-op when given an empty sequence and returns the
    number of affected rows.
    """

    def read_snapshot(self, source: str) -> list[CanonicalTreeRecord]: ...

    def read_excluding(self, source: str) -> list[CanonicalTreeRecord]: ...

    def delete_dependents(self, ids: Sequence[str]) -> int: ...

    def delete(self, ids: Sequence[str]) -> int: ...

    def update(self, records: Sequence[CanonicalTreeRecord]) -> int: ...

    def insert(self, records: Sequence[CanonicalTreeRecord]) -> int: ...
