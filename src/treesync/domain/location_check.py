"""Compare OpenStreetMap tree nodes with stored trees by distance."""

from __future__ import annotations

import math
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .model import CanonicalTreeRecord

log = getLogger(__name__)

EARTH_RADIUS_METERS: Final[float] = 6_371_008.8


@dataclass(frozen=True, slots=True)
class OsmTree:
    node_id: int
    lat: float
    lon: float


@dataclass(frozen=True, slots=True)
class LocationCandidate:
    node_id: int
    lat: float
    lon: float
    meters_to_nearest_tree: float | None
    nearest_tree_id: str | None


def haversine_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return 2 * EARTH_RADIUS_METERS * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def _stored_points(trees: Iterable[CanonicalTreeRecord]) -> list[tuple[str, float, float]]:
    points: list[tuple[str, float, float]] = []
    for tree in trees:
        if tree.lat is None or tree.lng is None:
            continue
        try:
            points.append((tree.id, float(tree.lat), float(tree.lng)))
        except ValueError:
            log.debug("Skipping tree %s with unparsable position", tree.id)
    return points


def find_nearest_trees(
    osm_trees: Sequence[OsmTree],
    current_trees: Iterable[CanonicalTreeRecord],
    *,
    max_distance: float | None = None,
) -> list[LocationCandidate]:
    """Return, per OSM node, the distance to the closest stored tree.

    With ``max_distance`` only nodes that have a stored tree within that many
    meters are kept.
    """

    points = _stored_points(current_trees)
    candidates: list[LocationCandidate] = []
    for index, osm_tree in enumerate(osm_trees, start=1):
        log.debug("Checking tree %s of %s", index, len(osm_trees))
        nearest_id: str | None = None
        nearest: float | None = None
        for tree_id, lat, lon in points:
            distance = haversine_meters(osm_tree.lat, osm_tree.lon, lat, lon)
            if nearest is None or distance < nearest:
                nearest, nearest_id = distance, tree_id
        if max_distance is not None and (nearest is None or nearest > max_distance):
            continue
        candidates.append(
            LocationCandidate(
                node_id=osm_tree.node_id,
                lat=osm_tree.lat,
                lon=osm_tree.lon,
                meters_to_nearest_tree=nearest,
                nearest_tree_id=nearest_id,
            )
        )
    return candidates
