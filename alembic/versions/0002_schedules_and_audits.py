"""pickup schedules and waste audits

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-18 14:00:00
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0002"
down_revision = "0001"
branch_labels = None
depends_on = None


def _common() -> list[sa.Column]:
    return [
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column(
            "organization_id",
            sa.String(36),
            sa.ForeignKey("organizations.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "waste_point_id",
            sa.String(36),
            sa.ForeignKey("waste_points.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
    ]


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "schedules",
        *_common(),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False, index=True),
        sa.Column("waste_types", sa.JSON(), nullable=False),
        sa.Column("vendor", sa.String(255), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "waste_audits",
        *_common(),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("auditor", sa.String(255), nullable=False),
        sa.Column("waste_type", sa.String(100), nullable=False),
        sa.Column("volume", sa.Float(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )


def downgrade() -> None:
    op.drop_table("waste_audits")
    op.drop_table("schedules")
