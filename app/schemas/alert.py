"""Alert rule schemas."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.common import CamelModel

TargetType = Literal["sensor", "waste_point"]
NotificationMethod = Literal["Email", "SMS", "In-app"]


class AlertCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    type: str = Field(min_length=1, max_length=100)
    target_type: TargetType
    target_id: str | None = None
    condition: str = Field(min_length=1, max_length=50)
    threshold: str = Field(min_length=1, max_length=50)
    notification_method: NotificationMethod = "In-app"
    active: bool = True


class AlertUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    type: str | None = Field(default=None, min_length=1, max_length=100)
    target_type: TargetType | None = None
    target_id: str | None = None
    condition: str | None = Field(default=None, min_length=1, max_length=50)
    threshold: str | None = Field(default=None, min_length=1, max_length=50)
    notification_method: NotificationMethod | None = None
    active: bool | None = None


class AlertOut(CamelModel):
    id: str
    organization_id: str
    name: str
    type: str
    target_type: str
    target_id: str | None = None
    condition: str
    threshold: str
    notification_method: str
    active: bool
    created_at: datetime
    updated_at: datetime
