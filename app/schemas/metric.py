"""Sustainability metric and dashboard read-model schemas."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.domain.metric import METRIC_TYPES
from app.schemas.common import CamelModel

MetricType = Literal[METRIC_TYPES]  # type: ignore[valid-type]


class MetricCreate(CamelModel):
    metric_type: MetricType
    value: float
    recorded_at: datetime | None = None


class MetricOut(CamelModel):
    id: str
    metric_type: str
    value: float
    recorded_at: datetime
    created_at: datetime


class MetricPoint(CamelModel):
    value: float
    recorded_at: datetime


class SustainabilitySummary(CamelModel):
    timeframe: str
    waste_reduction: float
    carbon_footprint: float
    cost_savings: float
    recycling_rate: float
    vendor_performance: float
    history: dict[str, list[MetricPoint]] = Field(default_factory=dict)


class DisposalBucket(CamelModel):
    timestamp: datetime
    total: float
    recyclable: float
    nonrecyclable: float


class SankeyLink(CamelModel):
    source: str
    target: str
    value: int
