"""SQLAlchemy ORM model for sustainability Goals."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.domain.mixins import TenantMixin, TimestampMixin, new_id


class Goal(Base, TenantMixin, TimestampMixin):
    __tablename__ = "goals"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    # e.g. "waste_reduction", "recycling_rate", "carbon_reduction"
    type: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    target_percentage: Mapped[int] = mapped_column(Integer, nullable=False)
    current_percentage: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    # "in_progress" | "completed" | "failed"
    status: Mapped[str] = mapped_column(String(50), default="in_progress", nullable=False)
    user_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )

    @property
    def progress(self) -> float:
        if self.target_percentage <= 0:
            return 100.0
        return min(100.0, round(self.current_percentage / self.target_percentage * 100, 1))
