"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from treesync.adapters.loading import get_loader
from treesync.adapters.osm import read_osm_trees, write_candidates
from treesync.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyTreeUnitOfWork,
    is_started,
    startup,
)
from treesync.domain.data_integration import SyncRequest, SyncTreesResult, sync_trees
from treesync.domain.location_check import LocationCandidate, find_nearest_trees
from treesync.domain.ports.unit_of_work import TreeUnitOfWork

if TYPE_CHECKING:
    from pathlib import Path

    from treesync.domain.ports.loading import LoadingStrategy, TreeLoader

UnitOfWorkFactory = Callable[[], TreeUnitOfWork]

DEFAULT_EXCLUDED_SOURCE = "osm"

log = getLogger(__name__)


def sync_source(
    strategy: LoadingStrategy | str,
    request: SyncRequest,
    *,
    loader: TreeLoader | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> SyncTreesResult:
    """Synchronise one source with the tree database using the configured adapters."""

    effective_loader = loader or get_loader(strategy)
    if unit_of_work_factory is None and not is_started():
        startup()
    effective_uow = unit_of_work_factory or SqlAlchemyTreeUnitOfWork
    log.info(
        "Starting sync: strategy=%s, source=%s, swap_coordinates=%s, dry_run=%s",
        strategy,
        request.source,
        request.swap_coordinates,
        request.dry_run,
    )

    result = sync_trees(
        request,
        loader=effective_loader,
        unit_of_work_factory=effective_uow,
    )

    log.info(
        "Finished sync of %s: loaded=%s, stored=%s, deleted=%s, updated=%s, added=%s%s",
        result.source,
        result.loaded,
        result.stored,
        result.deleted,
        result.updated,
        result.added,
        "" if result.committed else " (not committed)",
    )
    return result


def check_tree_locations(
    osm_file: Path,
    output: Path,
    *,
    exclude_source: str = DEFAULT_EXCLUDED_SOURCE,
    max_distance: float | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[LocationCandidate]:
    """Measure each OpenStreetMap tree against the stored trees and write the result."""

    osm_trees = read_osm_trees(osm_file)
    if unit_of_work_factory is None and not is_started():
        startup()
    effective_uow = unit_of_work_factory or SqlAlchemyTreeUnitOfWork

    with effective_uow() as uow:
        current_trees = uow.repositories.trees.read_excluding(exclude_source)

    log.info(
        "Checking %s OpenStreetMap trees against %s stored trees",
        len(osm_trees),
        len(current_trees),
    )
    candidates = find_nearest_trees(osm_trees, current_trees, max_distance=max_distance)
    write_candidates(output, candidates)
    log.info("Wrote %s candidates to %s", len(candidates), output)
    return candidates
