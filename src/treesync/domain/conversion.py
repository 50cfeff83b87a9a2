"""Convert loaded trees into rows of the ``trees`` table.

Missing measurements become SQL NULL. Rows written by the legacy importer hold
the text ``"null"`` or ``"NaN"`` instead, so the first sync of such a source
reports those trees as updated and rewrites them once; later runs converge.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final

from .errors import ClassificationWarning
from .genera import lookup_genus
from .model import CanonicalTreeRecord

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import TreeRecord

log = getLogger(__name__)

SRID: Final[int] = 4326


@dataclass(slots=True)
class ConversionResult:
    records: list[CanonicalTreeRecord] = field(default_factory=list["CanonicalTreeRecord"])
    warnings: list[ClassificationWarning] = field(default_factory=list["ClassificationWarning"])


def format_number(value: float | str | None) -> str | None:
    """Render a number the way the ``trees`` text columns store it.

    Integral values have no fractional part (``10``), everything else uses the
    shortest representation that round-trips (``52.123``). Text is kept as is.
    """

    if value is None:
        return None
    if isinstance(value, str):
        return value
    number = float(value)
    if not math.isfinite(number):
        return None
    if number.is_integer():
        return str(int(number))
    return repr(number)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def trunk_girth(dbh: float | None) -> str | None:
    if dbh is None:
        return None
    return format_number(round_half_up(dbh * math.pi))


def point_geometry(lat: str | None, lng: str | None) -> str | None:
    if lat is None or lng is None:
        return None
    return f"SRID={SRID};POINT({lng} {lat})"


def convert_tree(
    tree: TreeRecord,
    source: str,
    *,
    swap_coordinates: bool = False,
) -> tuple[CanonicalTreeRecord, ClassificationWarning | None]:
    genus = lookup_genus(tree.genus)
    warning = None if genus else ClassificationWarning(tree.ref, tree.genus)

    lat = format_number(tree.lat)
    lng = format_number(tree.lon)
    if swap_coordinates:
        lat, lng = lng, lat

    record = CanonicalTreeRecord(
        id=tree.internal_ref,
        lat=lat,
        lng=lng,
        artdtsch=tree.common,
        artbot=tree.species,
        gattungdeutsch=genus.display_name if genus else None,
        gattung=tree.genus,
        strname=tree.address,
        kronedurch=format_number(tree.crown),
        stammumfg=trunk_girth(tree.dbh),
        baumhoehe=format_number(tree.height),
        geom=point_geometry(lat, lng),
        pflanzjahr=tree.planted,
        gmlid=tree.ref,
        source=source,
    )
    return record, warning


def convert_trees(
    trees: Iterable[TreeRecord],
    source: str,
    *,
    swap_coordinates: bool = False,
) -> ConversionResult:
    """Convert ``trees`` for ``source``; unknown genera are logged, never fatal."""

    result = ConversionResult()
    for tree in trees:
        record, warning = convert_tree(tree, source, swap_coordinates=swap_coordinates)
        if warning is not None:
            log.warning("%s", warning)
            result.warnings.append(warning)
        result.records.append(record)
    return result
