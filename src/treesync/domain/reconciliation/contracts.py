"""Result types shared by the diff and mutation stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from treesync.domain.model import CanonicalTreeRecord


@dataclass(slots=True)
class ReconciliationResult:
    """Storage mutations needed to bring a snapshot in line with an incoming batch.

    ``deleted`` holds snapshot records, ``updated`` and ``added`` hold incoming
    records. Matched records without changes appear in none of the lists.
    """

    deleted: list[CanonicalTreeRecord] = field(default_factory=list["CanonicalTreeRecord"])
    updated: list[CanonicalTreeRecord] = field(default_factory=list["CanonicalTreeRecord"])
    added: list[CanonicalTreeRecord] = field(default_factory=list["CanonicalTreeRecord"])

    @property
    def is_empty(self) -> bool:
        return not (self.deleted or self.updated or self.added)

    @property
    def deleted_ids(self) -> list[str]:
        return [record.id for record in self.deleted]


@dataclass(slots=True)
class AppliedMutations:
    """Row counts reported by the store for one applied reconciliation."""

    dependents_deleted: int = 0
    deleted: int = 0
    updated: int = 0
    inserted: int = 0
