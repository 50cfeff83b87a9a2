"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import fields
from logging import getLogger
from typing import TYPE_CHECKING, Final

from sqlalchemy import bindparam, delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from treesync.domain.errors import StoreError
from treesync.domain.model import CanonicalTreeRecord

from .mappings import DEPENDENT_TABLES, trees_table

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from sqlalchemy import Row
    from sqlalchemy.orm import Session

log = getLogger(__name__)

ID_CHUNK_SIZE: Final[int] = 500
RECORD_COLUMNS: Final[tuple[str, ...]] = tuple(f.name for f in fields(CanonicalTreeRecord))
MATCHED_COLUMNS: Final[tuple[str, ...]] = ("gmlid", "source")
UPDATED_COLUMNS: Final[tuple[str, ...]] = tuple(
    name for name in RECORD_COLUMNS if name not in {"id", "gmlid", "source"}
)


@contextmanager
def _store_operation(operation: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        raise StoreError(operation, str(exc)) from exc


def _chunks(ids: Sequence[str], size: int = ID_CHUNK_SIZE) -> Iterator[Sequence[str]]:
    for start in range(0, len(ids), size):
        yield ids[start : start + size]


def _to_record(row: Row[tuple[object, ...]]) -> CanonicalTreeRecord:
    mapping = row._mapping  # noqa: SLF001
    return CanonicalTreeRecord(**{name: mapping[name] for name in RECORD_COLUMNS})


class SqlAlchemyTreeRepository:
    """Bulk access to the ``trees`` table and its dependents through SQL Core."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def read_snapshot(self, source: str) -> list[CanonicalTreeRecord]:
        stmt = select(trees_table).where(trees_table.c.source == source)
        with _store_operation("read snapshot"):
            rows = self.session.execute(stmt).all()
        return [_to_record(row) for row in rows]

    def read_excluding(self, source: str) -> list[CanonicalTreeRecord]:
        stmt = select(trees_table).where(trees_table.c.source != source)
        with _store_operation("read trees"):
            rows = self.session.execute(stmt).all()
        return [_to_record(row) for row in rows]

    def delete_dependents(self, ids: Sequence[str]) -> int:
        removed = 0
        with _store_operation("delete dependents"):
            for table in DEPENDENT_TABLES:
                for chunk in _chunks(ids):
                    stmt = delete(table).where(table.c.tree_id.in_(chunk))
                    removed += self.session.connection().execute(stmt).rowcount
        log.debug("Deleted %s dependent rows", removed)
        return removed

    def delete(self, ids: Sequence[str]) -> int:
        removed = 0
        with _store_operation("delete trees"):
            for chunk in _chunks(ids):
                stmt = delete(trees_table).where(trees_table.c.id.in_(chunk))
                removed += self.session.connection().execute(stmt).rowcount
        return removed

    def update(self, records: Sequence[CanonicalTreeRecord]) -> int:
        """Rewrite every row sharing a record's ``(gmlid, source)``; ``id`` is kept."""

        if not records:
            return 0
        stmt = (
            update(trees_table)
            .where(trees_table.c.gmlid == bindparam("b_gmlid"))
            .where(trees_table.c.source == bindparam("b_source"))
            .values({name: bindparam(f"b_{name}") for name in UPDATED_COLUMNS})
        )
        changed = 0
        with _store_operation("update trees"):
            connection = self.session.connection()
            for record in records:
                row = record.as_row()
                params = {f"b_{name}": row[name] for name in MATCHED_COLUMNS + UPDATED_COLUMNS}
                changed += connection.execute(stmt, params).rowcount
        return changed

    def insert(self, records: Sequence[CanonicalTreeRecord]) -> int:
        if not records:
            return 0
        with _store_operation("insert trees"):
            self.session.connection().execute(
                insert(trees_table),
                [record.as_row() for record in records],
            )
        return len(records)
