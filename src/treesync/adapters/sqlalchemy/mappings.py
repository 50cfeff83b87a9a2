"""SQLAlchemy table metadata for the tree database."""

from __future__ import annotations

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    func,
)

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

# Measurements and coordinates are text columns in existing deployments.
trees_table = Table(
    "trees",
    metadata,
    Column("id", Text, primary_key=True),
    Column("lat", Text, nullable=True),
    Column("lng", Text, nullable=True),
    Column("artdtsch", Text, nullable=True),
    Column("artbot", Text, nullable=True),
    Column("gattungdeutsch", Text, nullable=True),
    Column("gattung", Text, nullable=True),
    Column("strname", Text, nullable=True),
    Column("kronedurch", Text, nullable=True),
    Column("stammumfg", Text, nullable=True),
    Column("baumhoehe", Text, nullable=True),
    Column("pflanzjahr", Integer, nullable=True),
    Column("geom", Text, nullable=True),
    Column("gmlid", Text, nullable=False),
    Column("source", Text, nullable=False),
    Index("ix_trees_source_gmlid", "source", "gmlid"),
)

trees_adopted_table = Table(
    "trees_adopted",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("tree_id", Text, ForeignKey("trees.id"), nullable=False, index=True),
    Column("uuid", Text, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=True, server_default=func.now()),
)

trees_watered_table = Table(
    "trees_watered",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("tree_id", Text, ForeignKey("trees.id"), nullable=False, index=True),
    Column("uuid", Text, nullable=True),
    Column("amount", Integer, nullable=True),
    Column("timestamp", DateTime(timezone=True), nullable=True, server_default=func.now()),
)

DEPENDENT_TABLES: tuple[Table, ...] = (trees_adopted_table, trees_watered_table)
"""Tables referencing ``trees.id``, in deletion order."""
