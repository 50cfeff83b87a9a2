"""Read Overpass tree exports and write location-check candidates."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from treesync.domain.errors import LoadError
from treesync.domain.location_check import LocationCandidate, OsmTree

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

log = getLogger(__name__)

_CANDIDATES = TypeAdapter(list[LocationCandidate])


class OverpassElement(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    type: str = "node"
    lat: float | None = None
    lon: float | None = None


class OverpassResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    elements: list[OverpassElement]


def read_osm_trees(path: Path) -> list[OsmTree]:
    """Parse an Overpass JSON export; elements without a position are skipped."""

    try:
        response = OverpassResponse.model_validate_json(path.read_bytes())
    except OSError as exc:
        raise LoadError(f"Cannot read OpenStreetMap export {path}: {exc}") from exc
    except ValidationError as exc:
        raise LoadError(f"Malformed OpenStreetMap export {path}: {exc}") from exc

    trees = [
        OsmTree(node_id=element.id, lat=element.lat, lon=element.lon)
        for element in response.elements
        if element.lat is not None and element.lon is not None
    ]
    skipped = len(response.elements) - len(trees)
    if skipped:
        log.warning("Skipped %s OpenStreetMap elements without a position", skipped)
    return trees


def write_candidates(path: Path, candidates: Sequence[LocationCandidate]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(_CANDIDATES.dump_json(list(candidates), indent=2))
