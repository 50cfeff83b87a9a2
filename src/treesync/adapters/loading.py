"""Registry of loading strategies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from treesync.domain.errors import UnknownSourceError
from treesync.domain.ports.loading import LoadingStrategy

from .fixture import FixtureLoader
from .google_sheet import GoogleSheetLoader
from .magdeburg import MagdeburgLoader

if TYPE_CHECKING:
    from collections.abc import Callable

    from treesync.domain.ports.loading import TreeLoader

LOADER_FACTORIES: dict[LoadingStrategy, Callable[[], TreeLoader]] = {
    LoadingStrategy.MAGDEBURG: MagdeburgLoader,
    LoadingStrategy.GOOGLE_SHEET: GoogleSheetLoader,
    LoadingStrategy.FIXTURE: FixtureLoader,
}


def get_loader(key: str | LoadingStrategy) -> TreeLoader:
    try:
        strategy = LoadingStrategy(key)
    except ValueError as exc:
        raise UnknownSourceError(
            "loading strategy",
            str(key),
            known=[strategy.value for strategy in LoadingStrategy],
        ) from exc
    return LOADER_FACTORIES[strategy]()
