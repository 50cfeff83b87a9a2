"""Reusable fakes and builders for tree reconciliation tests."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from treesync.domain.model import CanonicalTreeRecord, TreeRecord, new_id
from treesync.domain.ports.unit_of_work import TreeRepositories

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType

    from treesync.domain.ports.loading import LoadOptions


def make_record(gmlid: str, source: str = "ls", **overrides: object) -> CanonicalTreeRecord:
    """Build a stored-tree row with plausible defaults."""

    record = CanonicalTreeRecord(
        id=new_id(),
        gmlid=gmlid,
        source=source,
        lat="52.123",
        lng="11.123",
        artdtsch="Winter-Linde",
        artbot="Tilia cordata",
        gattungdeutsch="Linde",
        gattung="Tilia",
        strname="Breiter Weg",
        kronedurch="6",
        stammumfg="94",
        baumhoehe="10",
        pflanzjahr=1990,
        geom="SRID=4326;POINT(11.123 52.123)",
    )
    return replace(record, **overrides)  # type: ignore[arg-type]


def make_tree(ref: str, **overrides: object) -> TreeRecord:
    tree = TreeRecord(
        ref=ref,
        location="Öffentliches Grün",
        address="Breiter Weg",
        lat=52.123,
        lon=11.123,
        genus="Tilia",
        species="Tilia cordata",
        common="Winter-Linde",
        height=10,
        crown=6,
        dbh=30,
        planted=1990,
    )
    for name, value in overrides.items():
        setattr(tree, name, value)
    return tree


@dataclass
class InMemoryTreeRepository:
    """Tree repository keeping rows in a list and recording every call."""

    rows: list[CanonicalTreeRecord] = field(default_factory=list[CanonicalTreeRecord])
    dependents: dict[str, int] = field(default_factory=dict[str, int])
    calls: list[str] = field(default_factory=list[str])
    fail_on: str | None = None

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_on == name:
            raise RuntimeError(f"{name} failed")

    def read_snapshot(self, source: str) -> list[CanonicalTreeRecord]:
        self._record("read_snapshot")
        return [row for row in self.rows if row.source == source]

    def read_excluding(self, source: str) -> list[CanonicalTreeRecord]:
        self._record("read_excluding")
        return [row for row in self.rows if row.source != source]

    def delete_dependents(self, ids: Sequence[str]) -> int:
        self._record("delete_dependents")
        return sum(self.dependents.pop(tree_id, 0) for tree_id in ids)

    def delete(self, ids: Sequence[str]) -> int:
        self._record("delete")
        doomed = set(ids)
        before = len(self.rows)
        self.rows = [row for row in self.rows if row.id not in doomed]
        return before - len(self.rows)

    def update(self, records: Sequence[CanonicalTreeRecord]) -> int:
        self._record("update")
        by_key = {record.natural_key: record for record in records}
        changed = 0
        for index, row in enumerate(self.rows):
            new = by_key.get(row.natural_key)
            if new is not None:
                self.rows[index] = replace(new, id=row.id)
                changed += 1
        return changed

    def insert(self, records: Sequence[CanonicalTreeRecord]) -> int:
        self._record("insert")
        self.rows.extend(records)
        return len(records)


class FakeUnitOfWork:
    def __init__(self, repository: InMemoryTreeRepository) -> None:
        self.repositories = TreeRepositories(trees=repository)
        self.committed = False
        self.rolled_back = False
        self.entered = 0

    def __enter__(self) -> FakeUnitOfWork:
        self.entered += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool:
        if exc_type is not None:
            self.rollback()
        return False

    def commit(self) -> None:
        self.committed = True

    def rollback(self) -> None:
        self.rolled_back = True


@dataclass
class StaticLoader:
    trees: list[TreeRecord]
    received: list[LoadOptions] = field(default_factory=list["LoadOptions"])

    def load(self, options: LoadOptions) -> list[TreeRecord]:
        self.received.append(options)
        return [replace(tree, internal_ref=new_id()) for tree in self.trees]
