"""Apply a reconciliation result to the snapshot store.

Steps run strictly in this order and never concurrently:

1. delete adoptions and waterings of deleted trees
2. delete the trees themselves
3. update changed trees in place, matched by ``(gmlid, source)``
4. insert new trees

A failing step raises and the remaining steps are skipped. Nothing is rolled
back here; atomicity belongs to the unit of work around the repository.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .contracts import AppliedMutations

if TYPE_CHECKING:
    from treesync.domain.ports.persistence import TreeRepository

    from .contracts import ReconciliationResult

log = getLogger(__name__)


def apply_reconciliation(
    repository: TreeRepository,
    result: ReconciliationResult,
) -> AppliedMutations:
    applied = AppliedMutations()

    deleted_ids = result.deleted_ids
    if deleted_ids:
        applied.dependents_deleted = repository.delete_dependents(deleted_ids)
        applied.deleted = repository.delete(deleted_ids)
        log.info(
            "Deleted %s trees and %s dependent rows",
            applied.deleted,
            applied.dependents_deleted,
        )

    if result.updated:
        applied.updated = repository.update(result.updated)
        log.info("Updated %s trees", applied.updated)

    if result.added:
        applied.inserted = repository.insert(result.added)
        log.info("Inserted %s trees", applied.inserted)

    return applied
