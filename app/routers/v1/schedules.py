"""Pickup schedule router."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import CurrentUser, get_current_user
from app.core.pagination import PaginationParams
from app.core.response import DataResponse, ListResponse, paginated
from app.db.base import get_db
from app.schemas.waste_point import ScheduleCreate, ScheduleOut, ScheduleUpdate
from app.services.schedule import ScheduleService

router = APIRouter(prefix="/schedules", tags=["Schedules"])


def _svc(session: AsyncSession, current: CurrentUser) -> ScheduleService:
    return ScheduleService(session, current.organization_id)


@router.get("", response_model=ListResponse[ScheduleOut])
async def list_schedules(
    waste_point_id: Optional[str] = Query(default=None, alias="wastePointId"),
    filter_status: Optional[str] = Query(default=None, alias="status"),
    pagination: PaginationParams = Depends(),
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    items, total = await _svc(session, current).list_schedules(
        pagination, waste_point_id=waste_point_id, status=filter_status
    )
    return paginated(
        [ScheduleOut.model_validate(s) for s in items],
        total, pagination.page, pagination.limit,
    )


@router.post("", response_model=DataResponse[ScheduleOut], status_code=status.HTTP_201_CREATED)
async def create_schedule(
    body: ScheduleCreate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    schedule = await _svc(session, current).create_schedule(body)
    return {"data": ScheduleOut.model_validate(schedule)}


@router.get("/{schedule_id}", response_model=DataResponse[ScheduleOut])
async def get_schedule(
    schedule_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    schedule = await _svc(session, current).get_schedule(schedule_id)
    return {"data": ScheduleOut.model_validate(schedule)}


@router.put("/{schedule_id}", response_model=DataResponse[ScheduleOut])
async def update_schedule(
    schedule_id: str,
    body: ScheduleUpdate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    schedule = await _svc(session, current).update_schedule(schedule_id, body)
    return {"data": ScheduleOut.model_validate(schedule)}
