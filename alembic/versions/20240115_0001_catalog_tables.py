"""catalog tables for every inheritance strategy

Revision ID: 20240115_0001
Revises:
Create Date: 2024-01-15 00:00:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "20240115_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # single table: product and ring rows share one table
    op.create_table(
        "product",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("description", sa.String(length=1024), nullable=True),
        sa.Column("dtype", sa.String(length=31), nullable=False),
        sa.Column("stone_type", sa.String(length=255), nullable=True),
        sa.Column("stone_size", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    # joined: base table plus one table per subtype
    op.create_table(
        "electrical_product",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("description", sa.String(length=1024), nullable=True),
        sa.Column("type", sa.String(length=31), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "phone",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("screen_size", sa.String(length=255), nullable=True),
        sa.Column("storage", sa.String(length=255), nullable=True),
        sa.ForeignKeyConstraint(["id"], ["electrical_product.id"]),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "camping_product",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("description", sa.String(length=1024), nullable=True),
        sa.Column("type", sa.String(length=31), nullable=False),
        sa.Column("fuel_type", sa.String(length=255), nullable=True),
        sa.Column("weight", sa.Float(), nullable=True),
        sa.Column("capacity", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    # concrete: no furniture_product table
    op.create_table(
        "chair",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("description", sa.String(length=1024), nullable=True),
        sa.Column("material", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("chair")
    op.drop_table("camping_product")
    op.drop_table("phone")
    op.drop_table("electrical_product")
    op.drop_table("product")
