"""SQLAlchemy ORM model for Alert rules on sensors and waste points."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.domain.mixins import TenantMixin, TimestampMixin, new_id


class Alert(Base, TenantMixin, TimestampMixin):
    __tablename__ = "alerts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # e.g. "Sensor Offline", "High Fill Level"
    type: Mapped[str] = mapped_column(String(100), nullable=False)
    # "sensor" | "waste_point"; target_id is NULL for organization-wide rules
    target_type: Mapped[str] = mapped_column(String(50), nullable=False)
    target_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True, index=True)
    condition: Mapped[str] = mapped_column(String(50), nullable=False)  # ">", "=", "no data for"
    threshold: Mapped[str] = mapped_column(String(50), nullable=False)  # "80%", "30 min"
    # "Email" | "SMS" | "In-app"
    notification_method: Mapped[str] = mapped_column(String(50), nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)
