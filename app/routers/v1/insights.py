"""Insights router."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.core.deps import CurrentUser, get_current_user
from app.core.response import DataResponse
from app.schemas.insight import InsightsOut
from app.services.insights import get_insights

router = APIRouter(prefix="/insights", tags=["Insights"])


@router.get("", response_model=DataResponse[InsightsOut])
async def list_insights(
    focus: Optional[str] = Query(default=None, max_length=200, description="Optional focus area"),
    _current: CurrentUser = Depends(get_current_user),
):
    """Three sustainability insights (OpenAI when configured, curated otherwise; 502 on upstream failure)."""
    source, insights = await get_insights(focus)
    return {"data": InsightsOut(source=source, insights=insights)}
