"""create registry tables

Revision ID: 20261019_01
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261019_01"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "assets",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("display_name", sa.String(length=64), nullable=False),
        sa.Column("owner", sa.String(length=255), nullable=False),
        sa.Column("size_bytes", sa.Integer(), nullable=False),
        sa.Column("registered_at_height", sa.Integer(), nullable=False),
        sa.Column("description", sa.String(length=128), nullable=False),
        sa.Column("category_tags", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
    )
    op.create_index("ix_assets_owner", "assets", ["owner"])

    op.create_table(
        "asset_permissions",
        sa.Column("asset_id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("identity", sa.String(length=255), primary_key=True),
        sa.Column("granted", sa.Boolean(), nullable=False),
    )

    op.create_table(
        "registry_state",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("total_registered", sa.Integer(), nullable=False),
        sa.Column("ledger_height", sa.Integer(), nullable=False),
        sa.Column("admin_identity", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("registry_state")
    op.drop_table("asset_permissions")
    op.drop_index("ix_assets_owner", table_name="assets")
    op.drop_table("assets")
