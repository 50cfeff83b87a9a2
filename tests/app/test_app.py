from __future__ import annotations

import json
from typing import TYPE_CHECKING

from tests.helpers.trees import (
    FakeUnitOfWork,
    InMemoryTreeRepository,
    StaticLoader,
    make_record,
    make_tree,
)
from treesync.app import check_tree_locations, sync_source
from treesync.domain.data_integration import SyncRequest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from treesync.adapters.sqlalchemy.unit_of_work import SqlAlchemyTreeUnitOfWork


def test_sync_source_uses_given_collaborators() -> None:
    repository = InMemoryTreeRepository()
    loader = StaticLoader([make_tree("G1")])

    result = sync_source(
        "magdeburg",
        SyncRequest(source="ls", options={"version": "2023", "path": "x.csv"}),
        loader=loader,
        unit_of_work_factory=lambda: FakeUnitOfWork(repository),
    )

    assert result.added == 1
    assert loader.received == [{"version": "2023", "path": "x.csv"}]
    assert [row.gmlid for row in repository.rows] == ["G1"]


def test_sync_source_resolves_loader_from_strategy(
    sqlite_unit_of_work: Callable[[], SqlAlchemyTreeUnitOfWork],
) -> None:
    result = sync_source(
        "fixture",
        SyncRequest(source="test"),
        unit_of_work_factory=sqlite_unit_of_work,
    )

    assert (result.loaded, result.added) == (3, 3)


def test_check_tree_locations_excludes_source(tmp_path: Path) -> None:
    stored = make_record("G1", lat="52.1", lng="11.6")
    osm_copy = make_record("N1", source="osm", lat="52.1", lng="11.6")
    repository = InMemoryTreeRepository(rows=[stored, osm_copy])
    osm_file = tmp_path / "osm.json"
    osm_file.write_text(
        json.dumps({"elements": [{"type": "node", "id": 42, "lat": 52.1, "lon": 11.6}]}),
        encoding="utf-8",
    )
    output = tmp_path / "candidates.json"

    candidates = check_tree_locations(
        osm_file,
        output,
        unit_of_work_factory=lambda: FakeUnitOfWork(repository),
    )

    assert [candidate.nearest_tree_id for candidate in candidates] == [stored.id]
    assert repository.calls == ["read_excluding"]
    written = json.loads(output.read_text(encoding="utf-8"))
    assert written[0]["node_id"] == 42
    assert written[0]["meters_to_nearest_tree"] == 0
