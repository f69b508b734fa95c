"""Waste point router. ``?ids=a,b,c`` fetches exactly that subset; audits nest under a waste point."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import CurrentUser, get_current_user
from app.core.pagination import PaginationParams, parse_id_list
from app.core.response import DataResponse, ListResponse, paginated
from app.db.base import get_db
from app.schemas.waste_point import (
    WasteAuditCreate,
    WasteAuditOut,
    WastePointCreate,
    WastePointOut,
    WastePointUpdate,
)
from app.services.waste_point import WastePointService

router = APIRouter(prefix="/waste-points", tags=["Waste Points"])


def _svc(session: AsyncSession, current: CurrentUser) -> WastePointService:
    return WastePointService(session, current.organization_id)


@router.get("", response_model=ListResponse[WastePointOut])
async def list_waste_points(
    ids: Optional[str] = Query(default=None, description="Comma-separated waste point ids"),
    pagination: PaginationParams = Depends(),
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    items, total = await _svc(session, current).list_waste_points(pagination, ids=parse_id_list(ids))
    return paginated(
        [WastePointOut.model_validate(w) for w in items],
        total, pagination.page, pagination.limit,
    )


@router.post("", response_model=DataResponse[WastePointOut], status_code=status.HTTP_201_CREATED)
async def create_waste_point(
    body: WastePointCreate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    waste_point = await _svc(session, current).create_waste_point(body)
    return {"data": WastePointOut.model_validate(waste_point)}


@router.get("/{waste_point_id}", response_model=DataResponse[WastePointOut])
async def get_waste_point(
    waste_point_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    waste_point = await _svc(session, current).get_waste_point(waste_point_id)
    return {"data": WastePointOut.model_validate(waste_point)}


@router.put("/{waste_point_id}", response_model=DataResponse[WastePointOut])
async def update_waste_point(
    waste_point_id: str,
    body: WastePointUpdate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    waste_point = await _svc(session, current).update_waste_point(waste_point_id, body)
    return {"data": WastePointOut.model_validate(waste_point)}


@router.delete("/{waste_point_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_waste_point(
    waste_point_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    await _svc(session, current).delete_waste_point(waste_point_id)


@router.get("/{waste_point_id}/audits", response_model=DataResponse[list[WasteAuditOut]])
async def list_waste_audits(
    waste_point_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    audits = await _svc(session, current).list_audits(waste_point_id)
    return {"data": [WasteAuditOut.model_validate(a) for a in audits]}


@router.post(
    "/{waste_point_id}/audits",
    response_model=DataResponse[WasteAuditOut],
    status_code=status.HTTP_201_CREATED,
)
async def record_waste_audit(
    waste_point_id: str,
    body: WasteAuditCreate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    audit = await _svc(session, current).record_audit(waste_point_id, body)
    return {"data": WasteAuditOut.model_validate(audit)}
