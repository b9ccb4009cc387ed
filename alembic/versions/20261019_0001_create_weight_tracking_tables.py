"""create farms, chicken_inventory, chicken_weights and weight_standards

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 09:00:00
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "farms",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("farm_name", sa.String(length=255), nullable=False),
        sa.Column("location", sa.String(length=255), nullable=True),
        sa.Column("owner", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_farms_farm_name", "farms", ["farm_name"], unique=False)

    op.create_table(
        "chicken_inventory",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("farm_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("breed", sa.String(length=120), nullable=False),
        sa.Column("age", sa.Integer(), nullable=True, comment="Age in weeks when the bird was added"),
        sa.Column("health_status", sa.String(length=120), nullable=True),
        sa.Column("date_added", sa.Date(), nullable=True),
        sa.Column("date_removed", sa.Date(), nullable=True),
        sa.ForeignKeyConstraint(["farm_id"], ["farms.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_chicken_inventory_farm_id", "chicken_inventory", ["farm_id"], unique=False)
    op.create_index("ix_chicken_inventory_farm_id_id", "chicken_inventory", ["farm_id", "id"], unique=False)

    op.create_table(
        "chicken_weights",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("farm_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("chicken_id", sa.Integer(), nullable=False),
        sa.Column("date_recorded", sa.Date(), nullable=False),
        sa.Column("weight_kg", sa.Float(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.CheckConstraint("weight_kg > 0", name="ck_chicken_weights_weight_positive"),
        sa.ForeignKeyConstraint(["chicken_id"], ["chicken_inventory.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["farm_id"], ["farms.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("chicken_id", "date_recorded", name="uq_chicken_weights_chicken_id_date_recorded"),
    )
    op.create_index("ix_chicken_weights_farm_id", "chicken_weights", ["farm_id"], unique=False)
    op.create_index(
        "ix_chicken_weights_chicken_id_date",
        "chicken_weights",
        ["chicken_id", "date_recorded"],
        unique=False,
    )

    op.create_table(
        "weight_standards",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("age_in_days", sa.Integer(), nullable=False),
        sa.Column("expected_weight_kg", sa.Float(), nullable=False),
        sa.CheckConstraint("age_in_days >= 0", name="ck_weight_standards_age_non_negative"),
        sa.CheckConstraint("expected_weight_kg > 0", name="ck_weight_standards_expected_weight_positive"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("age_in_days", name="uq_weight_standards_age_in_days"),
    )


def downgrade() -> None:
    op.drop_table("weight_standards")
    op.drop_index("ix_chicken_weights_chicken_id_date", table_name="chicken_weights")
    op.drop_index("ix_chicken_weights_farm_id", table_name="chicken_weights")
    op.drop_table("chicken_weights")
    op.drop_index("ix_chicken_inventory_farm_id_id", table_name="chicken_inventory")
    op.drop_index("ix_chicken_inventory_farm_id", table_name="chicken_inventory")
    op.drop_table("chicken_inventory")
    op.drop_index("ix_farms_farm_name", table_name="farms")
    op.drop_table("farms")
