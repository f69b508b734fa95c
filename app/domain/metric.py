"""SQLAlchemy ORM model for recorded sustainability metric samples."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base
from app.domain.mixins import TenantMixin, TimestampMixin, new_id, utcnow

# Summed over a timeframe
TOTAL_METRICS: tuple[str, ...] = ("waste_reduction", "carbon_footprint", "cost_savings")
# Averaged over a timeframe
AVERAGE_METRICS: tuple[str, ...] = ("recycling_rate", "vendor_performance")
# Disposal volumes feeding the trend and Sankey charts
DISPOSAL_METRICS: tuple[str, ...] = ("waste_total", "waste_recyclable", "waste_nonrecyclable")

METRIC_TYPES: tuple[str, ...] = TOTAL_METRICS + AVERAGE_METRICS + DISPOSAL_METRICS


class SustainabilityMetric(Base, TenantMixin, TimestampMixin):
    __tablename__ = "sustainability_metrics"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    metric_type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    value: Mapped[float] = mapped_column(Float, nullable=False)
    recorded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False, index=True
    )
