"""Sustainability metrics and the dashboard read models built on top of them.

  summary          totals / averages over a timeframe, plus per-metric history
  disposal trends  one bucket per day from the waste_total / waste_recyclable /
                   waste_nonrecyclable samples
  sankey           fixed-percentage material split of the disposal averages
"""

import logging
import math
from collections import defaultdict
from datetime import datetime, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.pagination import PaginationParams
from app.domain.metric import AVERAGE_METRICS, DISPOSAL_METRICS, TOTAL_METRICS, SustainabilityMetric
from app.domain.mixins import as_utc, utcnow
from app.repositories.metric import MetricRepository
from app.schemas.metric import MetricCreate

logger = logging.getLogger(__name__)

TIMEFRAMES: dict[str, timedelta] = {
    "1m": timedelta(days=30),
    "3m": timedelta(days=90),
    "6m": timedelta(days=180),
    "1y": timedelta(days=365),
}
DEFAULT_TIMEFRAME = "1m"

# Share of the average total (and of the recyclable / non-recyclable averages) per material
MATERIAL_SPLITS: tuple[tuple[str, float], ...] = (
    ("Plastics", 0.3),
    ("Metals", 0.2),
    ("Paper", 0.25),
    ("Organic", 0.15),
    ("Comingled", 0.1),
)
RECYCLABLE_TARGETS: dict[str, str] = {"Organic": "Composting"}
NONRECYCLABLE_TARGETS: dict[str, str] = {"Paper": "Energy Recovery", "Organic": "Energy Recovery"}
TOTAL_NODE = "Total Waste"

DEMO_SANKEY: tuple[tuple[str, str, int], ...] = (
    (TOTAL_NODE, "Plastics", 30),
    (TOTAL_NODE, "Metals", 20),
    (TOTAL_NODE, "Paper", 25),
    (TOTAL_NODE, "Organic", 15),
    (TOTAL_NODE, "Comingled", 10),
    ("Plastics", "Recycling", 25),
    ("Plastics", "Landfill", 5),
    ("Metals", "Recycling", 18),
    ("Metals", "Landfill", 2),
    ("Paper", "Recycling", 20),
    ("Paper", "Energy Recovery", 5),
    ("Organic", "Composting", 12),
    ("Organic", "Energy Recovery", 3),
    ("Comingled", "Recycling", 7),
    ("Comingled", "Landfill", 3),
)


def resolve_timeframe(timeframe: str | None) -> str:
    return timeframe if timeframe in TIMEFRAMES else DEFAULT_TIMEFRAME


def round_half_up(value: float) -> int:
    """0.5 always rounds towards +inf (Python's round() is banker's rounding)."""
    return math.floor(value + 0.5)


def summarize(samples: list[SustainabilityMetric], timeframe: str) -> dict:
    history: dict[str, list[dict]] = {name: [] for name in TOTAL_METRICS + AVERAGE_METRICS}
    for sample in samples:
        if sample.metric_type in history:
            history[sample.metric_type].append(
                {"value": sample.value, "recorded_at": as_utc(sample.recorded_at)}
            )

    summary: dict = {"timeframe": timeframe, "history": history}
    for name in TOTAL_METRICS:
        summary[name] = round(sum(p["value"] for p in history[name]), 2)
    for name in AVERAGE_METRICS:
        points = history[name]
        summary[name] = round(sum(p["value"] for p in points) / len(points), 2) if points else 0
    return summary


def disposal_buckets(samples: list[SustainabilityMetric]) -> list[dict]:
    """Average each disposal metric per UTC day; days missing a metric report 0 for it."""
    per_day: dict[datetime, dict[str, list[float]]] = defaultdict(lambda: defaultdict(list))
    for sample in samples:
        if sample.metric_type not in DISPOSAL_METRICS:
            continue
        recorded = as_utc(sample.recorded_at)
        day = recorded.replace(hour=0, minute=0, second=0, microsecond=0)
        per_day[day][sample.metric_type].append(sample.value)

    def avg(values: list[float]) -> float:
        return round(sum(values) / len(values), 2) if values else 0

    return [
        {
            "timestamp": day,
            "total": avg(values["waste_total"]),
            "recyclable": avg(values["waste_recyclable"]),
            "nonrecyclable": avg(values["waste_nonrecyclable"]),
        }
        for day, values in sorted(per_day.items())
    ]


def sankey_links(buckets: list[dict]) -> list[dict]:
    """Turn disposal buckets into Sankey links; no buckets gives the demo flow."""
    if not buckets:
        return [{"source": s, "target": t, "value": v} for s, t, v in DEMO_SANKEY]

    n = len(buckets)
    avg_total = round_half_up(sum(b["total"] for b in buckets) / n)
    avg_recyclable = round_half_up(sum(b["recyclable"] for b in buckets) / n)
    avg_nonrecyclable = round_half_up(sum(b["nonrecyclable"] for b in buckets) / n)

    links = [
        {"source": TOTAL_NODE, "target": material, "value": round_half_up(avg_total * share)}
        for material, share in MATERIAL_SPLITS
    ]
    for material, share in MATERIAL_SPLITS:
        links.append(
            {
                "source": material,
                "target": RECYCLABLE_TARGETS.get(material, "Recycling"),
                "value": round_half_up(avg_recyclable * share),
            }
        )
        links.append(
            {
                "source": material,
                "target": NONRECYCLABLE_TARGETS.get(material, "Landfill"),
                "value": round_half_up(avg_nonrecyclable * share),
            }
        )
    return links


class MetricsService:
    def __init__(self, session: AsyncSession, organization_id: str):
        self._repo = MetricRepository(session, organization_id)

    async def record_metric(self, data: MetricCreate) -> SustainabilityMetric:
        return await self._repo.create(
            metric_type=data.metric_type,
            value=data.value,
            recorded_at=data.recorded_at or utcnow(),
        )

    async def list_metrics(self, pagination: PaginationParams, metric_type: str | None = None):
        order_by = pagination.sort if pagination.sort != "created_at" else "recorded_at"
        return await self._repo.list(
            offset=pagination.offset,
            limit=pagination.limit,
            order_by=order_by,
            order=pagination.order,
            filters={"metric_type": metric_type},
        )

    async def _window(self, timeframe: str | None, metric_types: tuple[str, ...]):
        key = resolve_timeframe(timeframe)
        until = utcnow()
        samples = await self._repo.list_between(until - TIMEFRAMES[key], until, metric_types)
        logger.debug("Loaded %d metric samples for timeframe %s", len(samples), key)
        return key, samples

    async def sustainability_summary(self, timeframe: str | None = None) -> dict:
        key, samples = await self._window(timeframe, TOTAL_METRICS + AVERAGE_METRICS)
        return summarize(samples, key)

    async def disposal_trends(self, timeframe: str | None = None) -> list[dict]:
        _, samples = await self._window(timeframe, DISPOSAL_METRICS)
        return disposal_buckets(samples)

    async def sankey(self, timeframe: str | None = None) -> list[dict]:
        return sankey_links(await self.disposal_trends(timeframe))
