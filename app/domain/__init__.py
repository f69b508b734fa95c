"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  organization.py — tenant boundary
  user.py         — users, login sessions, API tokens
  device.py       — IoT devices, sensors, readings, captured images
  waste_point.py  — collection / measurement locations, pickup schedules, waste audits
  initiative.py   — initiatives with tasks and milestones (Kanban / Gantt)
  goal.py, vendor.py, data_model.py, alert.py, metric.py
  layout.py       — per-user dashboard layout slots
  audit.py        — Immutable audit trail (never updated or deleted)
  mixins.py       — Shared TimestampMixin, TenantMixin
"""

from app.domain.alert import Alert
from app.domain.audit import AuditTrail
from app.domain.data_model import DataModel
from app.domain.device import Device, Image, Sensor, SensorReading
from app.domain.goal import Goal
from app.domain.initiative import Initiative, InitiativeTask, Milestone
from app.domain.layout import LayoutPreference
from app.domain.metric import SustainabilityMetric
from app.domain.organization import Organization
from app.domain.user import ApiToken, User, UserSession
from app.domain.vendor import Vendor
from app.domain.waste_point import PickupSchedule, WasteAudit, WastePoint

__all__ = [
    "Alert",
    "ApiToken",
    "AuditTrail",
    "DataModel",
    "Device",
    "Goal",
    "Image",
    "Initiative",
    "InitiativeTask",
    "LayoutPreference",
    "Milestone",
    "Organization",
    "PickupSchedule",
    "Sensor",
    "SensorReading",
    "SustainabilityMetric",
    "User",
    "UserSession",
    "Vendor",
    "WasteAudit",
    "WastePoint",
]
