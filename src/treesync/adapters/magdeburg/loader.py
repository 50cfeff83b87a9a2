"""Loading strategy for the Magdeburg tree cadastre exports."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from treesync.domain.errors import LoadError, UnknownSourceError

from .reader import MAGDEBURG_FORMATS, read_magdeburg

if TYPE_CHECKING:
    from treesync.domain.model import TreeRecord
    from treesync.domain.ports.loading import LoadOptions


@dataclass(slots=True)
class MagdeburgLoader:
    """Load a yearly export; options: ``version`` (``2022``/``2023``) and ``path``."""

    def load(self, options: LoadOptions) -> list[TreeRecord]:
        version = options.get("version", "")
        fmt = MAGDEBURG_FORMATS.get(version)
        if fmt is None:
            raise UnknownSourceError(
                "Magdeburg export version",
                version,
                known=tuple(MAGDEBURG_FORMATS),
            )
        path = options.get("path")
        if not path:
            raise LoadError("Magdeburg loader requires a 'path' option")
        return read_magdeburg(Path(path), fmt)
