"""Tree records as loaded from a source and as persisted in the tree database."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from uuid import uuid4

type NaturalKey = tuple[str, str]
"""``(gmlid, source)``: the identity of a tree across sync runs."""


def new_id() -> str:
    return str(uuid4())


@dataclass(slots=True, kw_only=True)
class TreeRecord:
    """Source-agnostic tree as produced by a loader.

    Loosely follows the Open Council Data tree standard. ``species`` holds the
    full scientific name, ``dbh`` the trunk diameter. Coordinates given as text
    are stored verbatim.
    """

    ref: str
    internal_ref: str = field(default_factory=new_id)
    location: str | None = None
    address: str | None = None
    lat: float | str | None = None
    lon: float | str | None = None
    genus: str | None = None
    species: str | None = None
    common: str | None = None
    height: float | None = None
    crown: float | None = None
    dbh: float | None = None
    planted: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CanonicalTreeRecord:
    """A row of the ``trees`` table.

    Attribute names are the column names of existing databases. Measurements
    and coordinates are text columns; ``geom`` is derived from ``lat``/``lng``.
    """

    id: str
    gmlid: str
    source: str
    lat: str | None = None
    lng: str | None = None
    artdtsch: str | None = None
    artbot: str | None = None
    gattungdeutsch: str | None = None
    gattung: str | None = None
    strname: str | None = None
    kronedurch: str | None = None
    stammumfg: str | None = None
    baumhoehe: str | None = None
    pflanzjahr: int | None = None
    geom: str | None = None

    @property
    def natural_key(self) -> NaturalKey:
        return (self.gmlid, self.source)

    def as_row(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class TreeClassification:
    """Botanical name split into its parts."""

    fullname: str | None = None
    genus: str | None = None
    species: str | None = None
    variety: str | None = None
    scientific: str | None = None
    common: str | None = None
