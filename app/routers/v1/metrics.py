"""Metrics router — metric samples and the dashboard read models built from them."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import CurrentUser, get_current_user
from app.core.pagination import PaginationParams
from app.core.response import DataResponse, ListResponse, paginated
from app.db.base import get_db
from app.schemas.metric import (
    DisposalBucket,
    MetricCreate,
    MetricOut,
    SankeyLink,
    SustainabilitySummary,
)
from app.services.metrics import MetricsService

router = APIRouter(prefix="/metrics", tags=["Metrics"])

_TIMEFRAME = Query(default="1m", description="1m | 3m | 6m | 1y (anything else means 1m)")


def _svc(session: AsyncSession, current: CurrentUser) -> MetricsService:
    return MetricsService(session, current.organization_id)


@router.get("", response_model=ListResponse[MetricOut])
async def list_metrics(
    metric_type: Optional[str] = Query(default=None, alias="type"),
    pagination: PaginationParams = Depends(),
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    items, total = await _svc(session, current).list_metrics(pagination, metric_type=metric_type)
    return paginated(
        [MetricOut.model_validate(m) for m in items],
        total, pagination.page, pagination.limit,
    )


@router.post("", response_model=DataResponse[MetricOut], status_code=status.HTTP_201_CREATED)
async def record_metric(
    body: MetricCreate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    metric = await _svc(session, current).record_metric(body)
    return {"data": MetricOut.model_validate(metric)}


@router.get("/sustainability", response_model=DataResponse[SustainabilitySummary])
async def sustainability(
    timeframe: str = _TIMEFRAME,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    summary = await _svc(session, current).sustainability_summary(timeframe)
    return {"data": SustainabilitySummary.model_validate(summary)}


@router.get("/disposal-trends", response_model=DataResponse[list[DisposalBucket]])
async def disposal_trends(
    timeframe: str = _TIMEFRAME,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    buckets = await _svc(session, current).disposal_trends(timeframe)
    return {"data": [DisposalBucket.model_validate(b) for b in buckets]}


@router.get("/sankey", response_model=DataResponse[list[SankeyLink]])
async def sankey(
    timeframe: str = _TIMEFRAME,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    links = await _svc(session, current).sankey(timeframe)
    return {"data": [SankeyLink.model_validate(link) for link in links]}
