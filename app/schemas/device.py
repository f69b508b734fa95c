"""Device, sensor, reading and image schemas."""

from datetime import datetime
from typing import Any, Literal

from pydantic import Field

from app.schemas.common import CamelModel

DeviceStatus = Literal["active", "inactive", "maintenance"]
SensorType = Literal["fill_level", "temperature", "humidity", "camera", "weight", "other"]
ReadingRange = Literal["1h", "24h", "7d", "30d"]


class DeviceCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    type: str = Field(min_length=1, max_length=100)
    # Access code; generated when omitted
    device_id: str | None = Field(default=None, min_length=4, max_length=64)
    location: str | None = None
    status: DeviceStatus = "active"
    next_maintenance: datetime | None = None
    model: str | None = None
    serial_number: str | None = None
    firmware_version: str | None = None
    manufacturer: str | None = None
    notes: str | None = None
    tags: list[str] = Field(default_factory=list)
    alert_thresholds: dict[str, Any] | None = None


class DeviceUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    type: str | None = Field(default=None, min_length=1, max_length=100)
    location: str | None = None
    status: DeviceStatus | None = None
    next_maintenance: datetime | None = None
    model: str | None = None
    serial_number: str | None = None
    firmware_version: str | None = None
    manufacturer: str | None = None
    notes: str | None = None
    tags: list[str] | None = None
    alert_thresholds: dict[str, Any] | None = None
    is_active: bool | None = None


class DeviceOut(CamelModel):
    id: str
    organization_id: str
    device_id: str
    user_id: str | None = None
    name: str
    type: str
    location: str | None = None
    status: str
    iot_status: str
    last_reading: float | None = None
    last_reading_unit: str | None = None
    battery_level: int | None = None
    last_connected: datetime | None = None
    next_maintenance: datetime | None = None
    model: str | None = None
    serial_number: str | None = None
    firmware_version: str | None = None
    manufacturer: str | None = None
    notes: str | None = None
    tags: list[str]
    alert_thresholds: dict[str, Any] | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class DeviceCreated(DeviceOut):
    """Create response; the only place the device token is ever shown."""

    device_token: str


class SensorCreate(CamelModel):
    device_id: str
    name: str = Field(min_length=1, max_length=255)
    sensor_type: SensorType
    unit: str | None = None
    status: str = "active"
    min_threshold: float | None = None
    max_threshold: float | None = None


class SensorUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    sensor_type: SensorType | None = None
    unit: str | None = None
    status: str | None = None
    min_threshold: float | None = None
    max_threshold: float | None = None


class SensorOut(CamelModel):
    id: str
    organization_id: str
    device_id: str
    name: str
    sensor_type: str
    unit: str | None = None
    status: str
    min_threshold: float | None = None
    max_threshold: float | None = None
    created_at: datetime
    updated_at: datetime


class DetectedItem(CamelModel):
    item: str
    confidence: float = Field(ge=0, le=1)
    count: int = Field(default=1, ge=0)


class ReadingCreate(CamelModel):
    sensor_id: str | None = None
    recorded_at: datetime | None = None
    items_detected: list[DetectedItem] | None = None
    fill_level: float | None = Field(default=None, ge=0, le=100)
    distance_to_top: float | None = Field(default=None, ge=0)
    temperature: float | None = None
    humidity: float | None = Field(default=None, ge=0, le=100)
    battery_level: int | None = Field(default=None, ge=0, le=100)
    image_url: str | None = None
    processing_time_ms: int | None = Field(default=None, ge=0)
    confidence: float | None = Field(default=None, ge=0, le=1)
    # Headline value/unit mirrored onto the device; defaults to the fill level
    value: float | None = None
    unit: str | None = None


class ReadingOut(CamelModel):
    id: str
    device_id: str
    sensor_id: str | None = None
    recorded_at: datetime
    items_detected: list[DetectedItem] | None = None
    fill_level: float | None = None
    distance_to_top: float | None = None
    temperature: float | None = None
    humidity: float | None = None
    battery_level: int | None = None
    image_url: str | None = None
    processing_time_ms: int | None = None
    confidence: float | None = None


class ImageCreate(CamelModel):
    device_id: str
    image_url: str | None = None
    analysis_result: dict[str, Any] | None = None
    captured_at: datetime | None = None


class ImageUpdate(CamelModel):
    image_url: str | None = None
    analysis_result: dict[str, Any] | None = None


class ImageOut(CamelModel):
    id: str
    organization_id: str
    device_id: str
    user_id: str | None = None
    image_url: str | None = None
    analysis_result: dict[str, Any] | None = None
    captured_at: datetime
    created_at: datetime
