"""SQLAlchemy ORM model for per-user dashboard layout slots."""

from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import JSON, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.domain.mixins import TenantMixin, TimestampMixin, new_id


class LayoutPreference(Base, TenantMixin, TimestampMixin):
    """One saved slot (``dashboard-layout``, ``navigation-modules``, ...) for one user."""

    __tablename__ = "layout_preferences"
    __table_args__ = (UniqueConstraint("user_id", "slot", name="uq_layout_user_slot"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    slot: Mapped[str] = mapped_column(String(50), nullable=False)
    visible_modules: Mapped[Any] = mapped_column(JSON, default=list, nullable=False)
    # Only used by the "app-mode" slot: "simple" | "advanced"
    mode: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
