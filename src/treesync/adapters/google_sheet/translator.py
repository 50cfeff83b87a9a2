"""Translate spreadsheet rows into tree records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from treesync.domain.model import TreeRecord

if TYPE_CHECKING:
    from .schema import SheetRow


def parse_tree(row: SheetRow) -> TreeRecord:
    return TreeRecord(
        ref=row.ref,
        location=None,
        address=row.address,
        lat=row.latitude,
        lon=row.longitude,
        genus=row.genus,
        species=row.species,
        common=row.common,
        height=row.height,
        crown=row.crown,
        dbh=row.dbh,
        planted=row.planted,
    )
