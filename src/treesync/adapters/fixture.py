"""Loading strategy returning a fixed set of test trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from treesync.domain.model import TreeRecord

if TYPE_CHECKING:
    from treesync.domain.ports.loading import LoadOptions

FIXTURE_POSITIONS: Final[tuple[tuple[str, float, float], ...]] = (
    ("1", 52.123, 11.123),
    ("2", 52.124, 11.124),
    ("3", 52.122, 11.122),
)


def fixture_tree(ref: str, lat: float, lon: float) -> TreeRecord:
    return TreeRecord(
        ref=ref,
        location="Testgebiet",
        address="Teststraße",
        lat=lat,
        lon=lon,
        genus="Sorbus",
        species="Sorbus aucuparia",
        common="Eberesche (Vogelbeere)",
        height=10,
        crown=10,
        dbh=10,
        planted=2020,
    )


@dataclass(slots=True)
class FixtureLoader:
    """Ignores its options; every call yields fresh internal refs."""

    def load(self, options: LoadOptions) -> list[TreeRecord]:
        return [fixture_tree(ref, lat, lon) for ref, lat, lon in FIXTURE_POSITIONS]
