"""Public interface for the Magdeburg tree cadastre adapter."""

from __future__ import annotations

from .loader import MagdeburgLoader
from .reader import (
    MAGDEBURG_2022,
    MAGDEBURG_2023,
    MAGDEBURG_FORMATS,
    MagdeburgFormat,
    read_magdeburg,
)
from .schema import MagdeburgRow2022, MagdeburgRow2023

__all__ = [
    "MAGDEBURG_2022",
    "MAGDEBURG_2023",
    "MAGDEBURG_FORMATS",
    "MagdeburgFormat",
    "MagdeburgLoader",
    "MagdeburgRow2022",
    "MagdeburgRow2023",
    "read_magdeburg",
]
