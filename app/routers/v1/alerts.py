"""Alert rule router."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import CurrentUser, get_current_user
from app.core.pagination import PaginationParams
from app.core.response import DataResponse, ListResponse, paginated
from app.db.base import get_db
from app.schemas.alert import AlertCreate, AlertOut, AlertUpdate
from app.services.alert import AlertService

router = APIRouter(prefix="/alerts", tags=["Alerts"])


def _svc(session: AsyncSession, current: CurrentUser) -> AlertService:
    return AlertService(session, current.organization_id)


@router.get("", response_model=ListResponse[AlertOut])
async def list_alerts(
    active: Optional[bool] = Query(default=None, description="Only active (true) or inactive (false) rules"),
    pagination: PaginationParams = Depends(),
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    items, total = await _svc(session, current).list_alerts(pagination, active=active)
    return paginated(
        [AlertOut.model_validate(a) for a in items],
        total, pagination.page, pagination.limit,
    )


@router.post("", response_model=DataResponse[AlertOut], status_code=status.HTTP_201_CREATED)
async def create_alert(
    body: AlertCreate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    alert = await _svc(session, current).create_alert(body)
    return {"data": AlertOut.model_validate(alert)}


@router.get("/{alert_id}", response_model=DataResponse[AlertOut])
async def get_alert(
    alert_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    alert = await _svc(session, current).get_alert(alert_id)
    return {"data": AlertOut.model_validate(alert)}


@router.put("/{alert_id}", response_model=DataResponse[AlertOut])
async def update_alert(
    alert_id: str,
    body: AlertUpdate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    alert = await _svc(session, current).update_alert(alert_id, body)
    return {"data": AlertOut.model_validate(alert)}


@router.delete("/{alert_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_alert(
    alert_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    await _svc(session, current).delete_alert(alert_id)
