"""SQLAlchemy ORM model for Organizations — the tenant boundary for all data."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.domain.mixins import TimestampMixin, new_id


class Organization(Base, TimestampMixin):
    __tablename__ = "organizations"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)

    # "starter" | "professional" | "enterprise"
    plan: Mapped[str] = mapped_column(String(50), default="starter", nullable=False)
    max_users: Mapped[int] = mapped_column(Integer, default=5, nullable=False)
    billing_email: Mapped[str] = mapped_column(String(255), nullable=False)

    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    website: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    logo: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
