"""SQLAlchemy ORM models for IoT devices, their sensors, readings and captured images."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.domain.mixins import TenantMixin, TimestampMixin, new_id, utcnow


class Device(Base, TenantMixin, TimestampMixin):
    __tablename__ = "devices"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    # Access code printed on the unit; devices identify themselves with it
    device_id: Mapped[str] = mapped_column(String(64), nullable=False, unique=True, index=True)
    device_token_hash: Mapped[str] = mapped_column(String(64), nullable=False)
    user_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(100), nullable=False)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # "active" | "inactive" | "maintenance"
    status: Mapped[str] = mapped_column(String(50), default="active", nullable=False)
    # "connected" | "disconnected"
    iot_status: Mapped[str] = mapped_column(String(50), default="disconnected", nullable=False)
    last_reading: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    last_reading_unit: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    battery_level: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    last_connected: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    next_maintenance: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    model: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    serial_number: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    firmware_version: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    manufacturer: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    tags: Mapped[Any] = mapped_column(JSON, default=list, nullable=False)
    alert_thresholds: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)


class Sensor(Base, TenantMixin, TimestampMixin):
    """One measuring channel of a device (fill level, temperature, camera, ...)."""

    __tablename__ = "sensors"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    device_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("devices.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # "fill_level" | "temperature" | "humidity" | "camera" | "weight" | "other"
    sensor_type: Mapped[str] = mapped_column(String(50), nullable=False)
    unit: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    status: Mapped[str] = mapped_column(String(50), default="active", nullable=False)
    min_threshold: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    max_threshold: Mapped[Optional[float]] = mapped_column(Float, nullable=True)


class SensorReading(Base, TenantMixin):
    """A single measurement pushed by a device. Readings are append-only."""

    __tablename__ = "sensor_readings"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    device_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("devices.id", ondelete="CASCADE"), nullable=False, index=True
    )
    sensor_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("sensors.id", ondelete="SET NULL"), nullable=True
    )
    recorded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False, index=True
    )

    # Computer vision: [{"item": "Paper", "confidence": 0.9, "count": 3}, ...]
    items_detected: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)

    fill_level: Mapped[Optional[float]] = mapped_column(Float, nullable=True)  # percent 0-100
    distance_to_top: Mapped[Optional[float]] = mapped_column(Float, nullable=True)  # cm
    temperature: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    humidity: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    battery_level: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    image_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    processing_time_ms: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    confidence: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )


class Image(Base, TenantMixin, TimestampMixin):
    """An image captured by a device together with its analysis output."""

    __tablename__ = "images"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    device_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("devices.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    image_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    analysis_result: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    captured_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
