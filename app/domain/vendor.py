"""SQLAlchemy ORM model for Vendors, the waste haulers and recyclers an organization works with."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.domain.mixins import TenantMixin, TimestampMixin, new_id


def _default_services() -> list[str]:
    return ["General Waste"]


class Vendor(Base, TenantMixin, TimestampMixin):
    __tablename__ = "vendors"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # "pending" | "active" | "inactive"
    status: Mapped[str] = mapped_column(String(50), default="pending", nullable=False, index=True)
    website: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    company_logo: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    primary_contact: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), index=True, nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    services: Mapped[Any] = mapped_column(JSON, default=_default_services, nullable=False)
    service_areas: Mapped[Any] = mapped_column(JSON, default=list, nullable=False)
    certifications: Mapped[Any] = mapped_column(JSON, default=list, nullable=False)

    # Scorecard, 0-100
    rating: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    on_time_rate: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    recycling_efficiency: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    customer_satisfaction: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Relationship terms with this organization
    contract_start: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    contract_end: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    contract_terms: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
