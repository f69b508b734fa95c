"""Device router — device CRUD plus per-device sensor readings."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import CurrentUser, get_current_user
from app.core.pagination import PaginationParams
from app.core.response import DataResponse, ListResponse, paginated
from app.db.base import get_db
from app.schemas.device import (
    DeviceCreate,
    DeviceCreated,
    DeviceOut,
    DeviceUpdate,
    ReadingCreate,
    ReadingOut,
    ReadingRange,
)
from app.services.device import DeviceService

router = APIRouter(prefix="/devices", tags=["Devices"])


def _svc(session: AsyncSession, current: CurrentUser) -> DeviceService:
    return DeviceService(session, current.organization_id)


@router.get("", response_model=ListResponse[DeviceOut])
async def list_devices(
    filter_status: Optional[str] = Query(default=None, alias="status", description="Filter by status"),
    pagination: PaginationParams = Depends(),
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    items, total = await _svc(session, current).list_devices(pagination, status=filter_status)
    return paginated(
        [DeviceOut.model_validate(d) for d in items],
        total, pagination.page, pagination.limit,
    )


@router.post("", response_model=DataResponse[DeviceCreated], status_code=status.HTTP_201_CREATED)
async def create_device(
    body: DeviceCreate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    """Register a device. The response carries ``deviceToken``; it is not shown again."""
    device, raw_token = await _svc(session, current).create_device(body, user_id=current.id)
    out = DeviceOut.model_validate(device).model_dump()
    return {"data": DeviceCreated(**out, device_token=raw_token)}


@router.get("/{device_id}", response_model=DataResponse[DeviceOut])
async def get_device(
    device_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    device = await _svc(session, current).get_device(device_id)
    return {"data": DeviceOut.model_validate(device)}


@router.put("/{device_id}", response_model=DataResponse[DeviceOut])
async def update_device(
    device_id: str,
    body: DeviceUpdate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    device = await _svc(session, current).update_device(device_id, body)
    return {"data": DeviceOut.model_validate(device)}


@router.delete("/{device_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_device(
    device_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    await _svc(session, current).delete_device(device_id)


# ------------------------------------------------------------------
# Readings
# ------------------------------------------------------------------

@router.get("/{device_id}/readings", response_model=DataResponse[list[ReadingOut]])
async def list_readings(
    device_id: str,
    range_: ReadingRange = Query(default="24h", alias="range", description="1h | 24h | 7d | 30d"),
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    """Readings inside the window ending now, oldest first."""
    readings = await _svc(session, current).list_readings(device_id, range_)
    return {"data": [ReadingOut.model_validate(r) for r in readings]}


@router.post(
    "/{device_id}/readings",
    response_model=DataResponse[ReadingOut],
    status_code=status.HTTP_201_CREATED,
)
async def record_reading(
    device_id: str,
    body: ReadingCreate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    reading = await _svc(session, current).record_reading(device_id, body)
    return {"data": ReadingOut.model_validate(reading)}
