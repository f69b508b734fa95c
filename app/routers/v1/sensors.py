"""Sensor router."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import CurrentUser, get_current_user
from app.core.pagination import PaginationParams
from app.core.response import DataResponse, ListResponse, paginated
from app.db.base import get_db
from app.schemas.device import SensorCreate, SensorOut, SensorUpdate
from app.services.device import SensorService

router = APIRouter(prefix="/sensors", tags=["Sensors"])


def _svc(session: AsyncSession, current: CurrentUser) -> SensorService:
    return SensorService(session, current.organization_id)


@router.get("", response_model=ListResponse[SensorOut])
async def list_sensors(
    device_id: Optional[str] = Query(default=None, alias="deviceId"),
    pagination: PaginationParams = Depends(),
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    items, total = await _svc(session, current).list_sensors(pagination, device_id=device_id)
    return paginated(
        [SensorOut.model_validate(s) for s in items],
        total, pagination.page, pagination.limit,
    )


@router.post("", response_model=DataResponse[SensorOut], status_code=status.HTTP_201_CREATED)
async def create_sensor(
    body: SensorCreate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    sensor = await _svc(session, current).create_sensor(body)
    return {"data": SensorOut.model_validate(sensor)}


@router.get("/{sensor_id}", response_model=DataResponse[SensorOut])
async def get_sensor(
    sensor_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    sensor = await _svc(session, current).get_sensor(sensor_id)
    return {"data": SensorOut.model_validate(sensor)}


@router.put("/{sensor_id}", response_model=DataResponse[SensorOut])
async def update_sensor(
    sensor_id: str,
    body: SensorUpdate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    sensor = await _svc(session, current).update_sensor(sensor_id, body)
    return {"data": SensorOut.model_validate(sensor)}


@router.delete("/{sensor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_sensor(
    sensor_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    await _svc(session, current).delete_sensor(sensor_id)
