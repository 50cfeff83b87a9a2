"""Identity and change policy for tree records.

Two records are the same tree when their ``(gmlid, source)`` keys are equal.
A matched pair is changed when any comparable field differs by strict
inequality; values are never normalized before comparing. ``geom`` is derived
from ``lat``/``lng`` and is not compared.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from treesync.domain.model import CanonicalTreeRecord, NaturalKey

COMPARABLE_FIELDS: Final[tuple[str, ...]] = (
    "lat",
    "lng",
    "artdtsch",
    "artbot",
    "gattungdeutsch",
    "gattung",
    "strname",
    "kronedurch",
    "stammumfg",
    "baumhoehe",
    "pflanzjahr",
)


def natural_key(record: CanonicalTreeRecord) -> NaturalKey:
    return record.natural_key


def same_tree(first: CanonicalTreeRecord, second: CanonicalTreeRecord) -> bool:
    return natural_key(first) == natural_key(second)


def changed_fields(old: CanonicalTreeRecord, new: CanonicalTreeRecord) -> tuple[str, ...]:
    return tuple(name for name in COMPARABLE_FIELDS if getattr(old, name) != getattr(new, name))


def has_changes(old: CanonicalTreeRecord, new: CanonicalTreeRecord) -> bool:
    return any(getattr(old, name) != getattr(new, name) for name in COMPARABLE_FIELDS)
