"""SQLAlchemy ORM models for Waste Points (places where waste is collected or measured),
their pickup schedules and manual waste audits."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, Float, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.domain.mixins import TenantMixin, TimestampMixin, new_id


class WastePoint(Base, TenantMixin, TimestampMixin):
    __tablename__ = "waste_points"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    process_step: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    waste_type: Mapped[str] = mapped_column(String(100), nullable=False)
    estimated_volume: Mapped[float] = mapped_column(Float, nullable=False)
    unit: Mapped[str] = mapped_column(String(50), nullable=False)
    vendor: Mapped[str] = mapped_column(String(255), nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # "daily" | "weekly" | "biweekly" | "monthly"
    interval: Mapped[str] = mapped_column(String(50), default="weekly", nullable=False)

    # {"address": str, "lat": float, "lng": float, "placeId": str}
    location_data: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)

    device_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("devices.id", ondelete="SET NULL"), nullable=True, index=True
    )


class PickupSchedule(Base, TenantMixin, TimestampMixin):
    __tablename__ = "schedules"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    waste_point_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("waste_points.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    waste_types: Mapped[Any] = mapped_column(JSON, default=list, nullable=False)
    vendor: Mapped[str] = mapped_column(String(255), nullable=False)
    # "pending" | "scheduled" | "in-progress" | "completed" | "cancelled"
    status: Mapped[str] = mapped_column(String(20), default="pending", nullable=False)


class WasteAudit(Base, TenantMixin, TimestampMixin):
    """A measured volume for one waste point, recorded by an auditor on a given date."""

    __tablename__ = "waste_audits"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    waste_point_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("waste_points.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    auditor: Mapped[str] = mapped_column(String(255), nullable=False)
    waste_type: Mapped[str] = mapped_column(String(100), nullable=False)
    volume: Mapped[float] = mapped_column(Float, nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
