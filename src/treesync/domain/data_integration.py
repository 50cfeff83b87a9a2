"""Application services for synchronising a tree source with the database."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from .conversion import convert_trees
from .reconciliation import AppliedMutations, ReconciliationResult, apply_reconciliation, reconcile

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from .errors import ClassificationWarning
    from .ports.loading import TreeLoader
    from .ports.unit_of_work import TreeUnitOfWork

log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class SyncRequest:
    """One sync run: which source tag to write and how to load it."""

    source: str
    options: Mapping[str, str] = field(default_factory=dict[str, str])
    swap_coordinates: bool = False
    dry_run: bool = False

    def __post_init__(self) -> None:
        if not self.source.strip():
            raise ValueError("Source tag must not be blank")


@dataclass(slots=True)
class SyncTreesResult:
    """Outcome of a tree sync operation."""

    source: str
    loaded: int
    stored: int
    reconciliation: ReconciliationResult
    applied: AppliedMutations | None
    warnings: list[ClassificationWarning] = field(default_factory=list["ClassificationWarning"])

    @property
    def deleted(self) -> int:
        return len(self.reconciliation.deleted)

    @property
    def updated(self) -> int:
        return len(self.reconciliation.updated)

    @property
    def added(self) -> int:
        return len(self.reconciliation.added)

    @property
    def committed(self) -> bool:
        return self.applied is not None


def sync_trees(
    request: SyncRequest,
    *,
    loader: TreeLoader,
    unit_of_work_factory: Callable[[], TreeUnitOfWork],
) -> SyncTreesResult:
    """Load, convert and reconcile trees for ``request.source``.

    Loading and conversion finish before the store is touched, so a
    ``LoadError`` never leaves partial writes. All mutations share one unit of
    work and are committed together.
    """

    trees = loader.load(request.options)
    conversion = convert_trees(
        trees,
        request.source,
        swap_coordinates=request.swap_coordinates,
    )
    log.info(
        "Loaded %s trees for source %r (%s classification warnings)",
        len(trees),
        request.source,
        len(conversion.warnings),
    )

    applied: AppliedMutations | None = None
    with unit_of_work_factory() as uow:
        repository = uow.repositories.trees
        snapshot = repository.read_snapshot(request.source)
        result = reconcile(conversion.records, snapshot)

        if request.dry_run:
            log.info("Dry run: no changes written for source %r", request.source)
        else:
            applied = apply_reconciliation(repository, result)
            uow.commit()

    return SyncTreesResult(
        source=request.source,
        loaded=len(trees),
        stored=len(snapshot),
        reconciliation=result,
        applied=applied,
        warnings=conversion.warnings,
    )
