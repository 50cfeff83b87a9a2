"""Domain port definitions for adapters."""

from __future__ import annotations

from .loading import LoadingStrategy, LoadOptions, TreeLoader
from .persistence import TreeRepository
from .unit_of_work import (
    RepositoryCollection,
    TreeRepositories,
    TreeUnitOfWork,
    UnitOfWork,
)

__all__ = [
    "LoadOptions",
    "LoadingStrategy",
    "RepositoryCollection",
    "TreeLoader",
    "TreeRepositories",
    "TreeRepository",
    "TreeUnitOfWork",
    "UnitOfWork",
]
