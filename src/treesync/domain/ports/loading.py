"""Ports for loading trees from external sources."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from treesync.domain.model import TreeRecord

type LoadOptions = Mapping[str, str]


class LoadingStrategy(StrEnum):
    """Known loader variants."""

    MAGDEBURG = "magdeburg"
    GOOGLE_SHEET = "google-sheet"
    FIXTURE = "fixture"


@runtime_checkable
class TreeLoader(Protocol):
    """Produce normalized, already classified trees for one source.

    Raises ``LoadError`` on malformed or unreachable data and
    ``UnknownSourceError`` when ``options`` select a variant that does not exist.
    """

    def load(self, options: LoadOptions) -> list[TreeRecord]: ...
