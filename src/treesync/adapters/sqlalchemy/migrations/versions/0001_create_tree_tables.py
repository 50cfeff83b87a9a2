"""Create the trees table and the tables referencing it.

Existing deployments already carry these tables; they are only created when
missing.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _existing_tables() -> set[str]:
    return set(sa.inspect(op.get_bind()).get_table_names())


def upgrade() -> None:
    existing = _existing_tables()

    if "trees" not in existing:
        op.create_table(
            "trees",
            sa.Column("id", sa.Text(), nullable=False),
            sa.Column("lat", sa.Text(), nullable=True),
            sa.Column("lng", sa.Text(), nullable=True),
            sa.Column("artdtsch", sa.Text(), nullable=True),
            sa.Column("artbot", sa.Text(), nullable=True),
            sa.Column("gattungdeutsch", sa.Text(), nullable=True),
            sa.Column("gattung", sa.Text(), nullable=True),
            sa.Column("strname", sa.Text(), nullable=True),
            sa.Column("kronedurch", sa.Text(), nullable=True),
            sa.Column("stammumfg", sa.Text(), nullable=True),
            sa.Column("baumhoehe", sa.Text(), nullable=True),
            sa.Column("pflanzjahr", sa.Integer(), nullable=True),
            sa.Column("geom", sa.Text(), nullable=True),
            sa.Column("gmlid", sa.Text(), nullable=False),
            sa.Column("source", sa.Text(), nullable=False),
            sa.PrimaryKeyConstraint("id", name="pk_trees"),
        )
        op.create_index("ix_trees_source_gmlid", "trees", ["source", "gmlid"])

    if "trees_adopted" not in existing:
        op.create_table(
            "trees_adopted",
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("tree_id", sa.Text(), nullable=False),
            sa.Column("uuid", sa.Text(), nullable=True),
            sa.Column(
                "created_at",
                sa.DateTime(timezone=True),
                server_default=sa.func.now(),
                nullable=True,
            ),
            sa.ForeignKeyConstraint(
                ["tree_id"], ["trees.id"], name="fk_trees_adopted_tree_id_trees"
            ),
            sa.PrimaryKeyConstraint("id", name="pk_trees_adopted"),
        )
        op.create_index("ix_trees_adopted_tree_id", "trees_adopted", ["tree_id"])

    if "trees_watered" not in existing:
        op.create_table(
            "trees_watered",
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("tree_id", sa.Text(), nullable=False),
            sa.Column("uuid", sa.Text(), nullable=True),
            sa.Column("amount", sa.Integer(), nullable=True),
            sa.Column(
                "timestamp",
                sa.DateTime(timezone=True),
                server_default=sa.func.now(),
                nullable=True,
            ),
            sa.ForeignKeyConstraint(
                ["tree_id"], ["trees.id"], name="fk_trees_watered_tree_id_trees"
            ),
            sa.PrimaryKeyConstraint("id", name="pk_trees_watered"),
        )
        op.create_index("ix_trees_watered_tree_id", "trees_watered", ["tree_id"])


def downgrade() -> None:
    op.drop_index("ix_trees_watered_tree_id", table_name="trees_watered")
    op.drop_table("trees_watered")
    op.drop_index("ix_trees_adopted_tree_id", table_name="trees_adopted")
    op.drop_table("trees_adopted")
    op.drop_index("ix_trees_source_gmlid", table_name="trees")
    op.drop_table("trees")
