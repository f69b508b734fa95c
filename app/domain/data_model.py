"""SQLAlchemy ORM model for Data Models (emission factors, LCA tables, CV models, ...)."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.domain.mixins import TenantMixin, TimestampMixin, new_id, utcnow


class DataModel(Base, TenantMixin, TimestampMixin):
    __tablename__ = "data_models"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # "waste" | "environmental" | "material" | "lca" | "carbon" | "cost" | "cv"
    type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    # "internal" | "ecoinvent" | "external"
    source: Mapped[str] = mapped_column(String(50), nullable=False)
    version: Mapped[str] = mapped_column(String(50), nullable=False)
    # "active" | "in progress" | "inactive" | "archived"
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    builder_config: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    last_updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
