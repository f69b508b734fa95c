"""Data model router."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import CurrentUser, get_current_user
from app.core.pagination import PaginationParams
from app.core.response import DataResponse, ListResponse, paginated
from app.db.base import get_db
from app.schemas.data_model import DataModelCreate, DataModelOut, DataModelUpdate
from app.services.data_model import DataModelService

router = APIRouter(prefix="/data-models", tags=["Data Models"])


def _svc(session: AsyncSession, current: CurrentUser) -> DataModelService:
    return DataModelService(session, current.organization_id)


@router.get("", response_model=ListResponse[DataModelOut])
async def list_data_models(
    model_type: Optional[str] = Query(default=None, alias="type"),
    filter_status: Optional[str] = Query(default=None, alias="status"),
    pagination: PaginationParams = Depends(),
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    items, total = await _svc(session, current).list_data_models(
        pagination, model_type=model_type, status=filter_status
    )
    return paginated(
        [DataModelOut.model_validate(m) for m in items],
        total, pagination.page, pagination.limit,
    )


@router.post("", response_model=DataResponse[DataModelOut], status_code=status.HTTP_201_CREATED)
async def create_data_model(
    body: DataModelCreate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    data_model = await _svc(session, current).create_data_model(body)
    return {"data": DataModelOut.model_validate(data_model)}


@router.get("/{data_model_id}", response_model=DataResponse[DataModelOut])
async def get_data_model(
    data_model_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    data_model = await _svc(session, current).get_data_model(data_model_id)
    return {"data": DataModelOut.model_validate(data_model)}


@router.put("/{data_model_id}", response_model=DataResponse[DataModelOut])
async def update_data_model(
    data_model_id: str,
    body: DataModelUpdate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    data_model = await _svc(session, current).update_data_model(data_model_id, body)
    return {"data": DataModelOut.model_validate(data_model)}


@router.delete("/{data_model_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_data_model(
    data_model_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    await _svc(session, current).delete_data_model(data_model_id)
