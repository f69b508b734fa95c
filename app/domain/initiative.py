"""SQLAlchemy ORM models for sustainability Initiatives, their tasks and milestones."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.domain.mixins import TenantMixin, TimestampMixin, new_id

INITIATIVE_STATUSES: tuple[str, ...] = ("planning", "active", "completed", "cancelled")
TASK_STATUSES: tuple[str, ...] = ("todo", "in_progress", "completed", "blocked")
# Progress shown on cards; any other status counts as 0
STATUS_PROGRESS: dict[str, int] = {"completed": 100, "active": 50, "planning": 25}


class Initiative(Base, TenantMixin, TimestampMixin):
    __tablename__ = "initiatives"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    # "circular" | "recycling" | "waste"
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    status: Mapped[str] = mapped_column(String(50), default="planning", nullable=False, index=True)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    target_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    # {"wasteReduction": float, "costSavings": float, "carbonReduction": float}
    estimated_impact: Mapped[Any] = mapped_column(JSON, default=dict, nullable=False)
    created_by: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )

    tasks: Mapped[List["InitiativeTask"]] = relationship(
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="InitiativeTask.created_at",
    )
    milestones: Mapped[List["Milestone"]] = relationship(
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="Milestone.target_date",
    )

    @property
    def progress(self) -> int:
        return STATUS_PROGRESS.get(self.status, 0)


class InitiativeTask(Base, TenantMixin, TimestampMixin):
    __tablename__ = "initiative_tasks"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    initiative_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("initiatives.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    status: Mapped[str] = mapped_column(String(50), default="todo", nullable=False)
    # "low" | "medium" | "high"
    priority: Mapped[str] = mapped_column(String(20), default="medium", nullable=False)
    progress: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    start_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    due_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    assigned_to: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )


class Milestone(Base, TenantMixin, TimestampMixin):
    __tablename__ = "milestones"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    initiative_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("initiatives.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    target_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    # "pending" | "completed"
    status: Mapped[str] = mapped_column(String(20), default="pending", nullable=False)
