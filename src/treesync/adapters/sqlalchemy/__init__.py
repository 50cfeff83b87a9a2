"""SQLAlchemy adapter package for treesync."""

from __future__ import annotations

from .mappings import (
    DEPENDENT_TABLES,
    metadata,
    trees_adopted_table,
    trees_table,
    trees_watered_table,
)
from .repositories import SqlAlchemyTreeRepository
from .unit_of_work import (
    SqlAlchemyTreeUnitOfWork,
    StartupError,
    shutdown,
    startup,
)

__all__ = [
    "DEPENDENT_TABLES",
    "SqlAlchemyTreeRepository",
    "SqlAlchemyTreeUnitOfWork",
    "StartupError",
    "metadata",
    "shutdown",
    "startup",
    "trees_adopted_table",
    "trees_table",
    "trees_watered_table",
]
