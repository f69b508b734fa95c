"""Image router — captured images and their analysis output."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import CurrentUser, get_current_user
from app.core.pagination import PaginationParams
from app.core.response import DataResponse, ListResponse, paginated
from app.db.base import get_db
from app.schemas.device import ImageCreate, ImageOut, ImageUpdate
from app.services.device import ImageService

router = APIRouter(prefix="/images", tags=["Images"])


def _svc(session: AsyncSession, current: CurrentUser) -> ImageService:
    return ImageService(session, current.organization_id)


@router.get("", response_model=ListResponse[ImageOut])
async def list_images(
    device_id: Optional[str] = Query(default=None, alias="deviceId"),
    pagination: PaginationParams = Depends(),
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    items, total = await _svc(session, current).list_images(pagination, device_id=device_id)
    return paginated(
        [ImageOut.model_validate(i) for i in items],
        total, pagination.page, pagination.limit,
    )


@router.post("", response_model=DataResponse[ImageOut], status_code=status.HTTP_201_CREATED)
async def create_image(
    body: ImageCreate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    image = await _svc(session, current).create_image(body, user_id=current.id)
    return {"data": ImageOut.model_validate(image)}


@router.get("/{image_id}", response_model=DataResponse[ImageOut])
async def get_image(
    image_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    image = await _svc(session, current).get_image(image_id)
    return {"data": ImageOut.model_validate(image)}


@router.put("/{image_id}", response_model=DataResponse[ImageOut])
async def update_image(
    image_id: str,
    body: ImageUpdate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    image = await _svc(session, current).update_image(image_id, body)
    return {"data": ImageOut.model_validate(image)}


@router.delete("/{image_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_image(
    image_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    await _svc(session, current).delete_image(image_id)
