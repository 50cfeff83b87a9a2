"""Three-way diff between an incoming batch and the stored snapshot of a source."""

from __future__ import annotations

from collections import Counter, defaultdict
from logging import getLogger
from typing import TYPE_CHECKING

from treesync.domain.errors import DuplicateNaturalKeyError

from .contracts import ReconciliationResult
from .policy import has_changes, natural_key

if TYPE_CHECKING:
    from collections.abc import Sequence

    from treesync.domain.model import CanonicalTreeRecord, NaturalKey

log = getLogger(__name__)


def reconcile(
    incoming: Sequence[CanonicalTreeRecord],
    snapshot: Sequence[CanonicalTreeRecord],
) -> ReconciliationResult:
    """Classify records into deleted, updated and added.

    Both inputs are expected to belong to the same source; the caller scopes
    them. Matching still uses the full ``(gmlid, source)`` key, so records of
    different sources never match. Raises ``DuplicateNaturalKeyError`` when
    ``incoming`` repeats a key. Several snapshot rows sharing a key all count
    as matched, and the incoming record is updated if it differs from any of
    them.
    """

    _ensure_unique_keys(incoming)

    snapshot_by_key: defaultdict[NaturalKey, list[CanonicalTreeRecord]] = defaultdict(list)
    for old in snapshot:
        snapshot_by_key[natural_key(old)].append(old)
    incoming_keys = {natural_key(new) for new in incoming}

    result = ReconciliationResult()
    result.deleted = [old for old in snapshot if natural_key(old) not in incoming_keys]
    for new in incoming:
        matches = snapshot_by_key.get(natural_key(new))
        if not matches:
            result.added.append(new)
        elif any(has_changes(old, new) for old in matches):
            result.updated.append(new)

    log.info(
        "Reconciled %s incoming against %s stored trees: deleted=%s, updated=%s, added=%s",
        len(incoming),
        len(snapshot),
        len(result.deleted),
        len(result.updated),
        len(result.added),
    )
    return result


def _ensure_unique_keys(records: Sequence[CanonicalTreeRecord]) -> None:
    counts = Counter(natural_key(record) for record in records)
    duplicates = [key for key, count in counts.items() if count > 1]
    if duplicates:
        raise DuplicateNaturalKeyError(duplicates)
