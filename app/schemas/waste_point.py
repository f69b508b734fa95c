"""Waste point schemas."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.common import CamelModel

PickupInterval = Literal["daily", "weekly", "biweekly", "monthly"]


class LocationData(CamelModel):
    address: str | None = None
    lat: float | None = Field(default=None, ge=-90, le=90)
    lng: float | None = Field(default=None, ge=-180, le=180)
    place_id: str | None = None


class WastePointCreate(CamelModel):
    process_step: str = Field(min_length=1, max_length=255)
    waste_type: str = Field(min_length=1, max_length=100)
    estimated_volume: float = Field(ge=0)
    unit: str = Field(min_length=1, max_length=50)
    vendor: str = Field(min_length=1, max_length=255)
    notes: str | None = None
    interval: PickupInterval = "weekly"
    location_data: LocationData | None = None
    device_id: str | None = None


class WastePointUpdate(CamelModel):
    process_step: str | None = Field(default=None, min_length=1, max_length=255)
    waste_type: str | None = Field(default=None, min_length=1, max_length=100)
    estimated_volume: float | None = Field(default=None, ge=0)
    unit: str | None = Field(default=None, min_length=1, max_length=50)
    vendor: str | None = Field(default=None, min_length=1, max_length=255)
    notes: str | None = None
    interval: PickupInterval | None = None
    location_data: LocationData | None = None
    device_id: str | None = None


class WastePointOut(CamelModel):
    id: str
    organization_id: str
    process_step: str
    waste_type: str
    estimated_volume: float
    unit: str
    vendor: str
    notes: str | None = None
    interval: str
    location_data: LocationData | None = None
    device_id: str | None = None
    created_at: datetime
    updated_at: datetime


ScheduleStatus = Literal["pending", "scheduled", "in-progress", "completed", "cancelled"]


class ScheduleCreate(CamelModel):
    waste_point_id: str
    date: datetime
    waste_types: list[str] = Field(min_length=1)
    vendor: str = Field(min_length=1, max_length=255)


class ScheduleUpdate(CamelModel):
    date: datetime | None = None
    waste_types: list[str] | None = Field(default=None, min_length=1)
    vendor: str | None = Field(default=None, min_length=1, max_length=255)
    status: ScheduleStatus | None = None


class ScheduleOut(CamelModel):
    id: str
    organization_id: str
    waste_point_id: str
    date: datetime
    waste_types: list[str]
    vendor: str
    status: str
    created_at: datetime
    updated_at: datetime


class WasteAuditCreate(CamelModel):
    date: datetime
    auditor: str = Field(min_length=1, max_length=255)
    waste_type: str = Field(min_length=1, max_length=100)
    volume: float = Field(gt=0)
    notes: str | None = None


class WasteAuditOut(CamelModel):
    id: str
    waste_point_id: str
    date: datetime
    auditor: str
    waste_type: str
    volume: float
    notes: str | None = None
    created_at: datetime
