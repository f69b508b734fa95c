"""Vendor router — the organization's haulers and recyclers.

``GET /vendors?search=metal`` matches names case-insensitively and sorts
alphabetically; without ``search`` the usual ``sort`` / ``order`` apply.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import CurrentUser, get_current_user
from app.core.pagination import PaginationParams
from app.core.response import DataResponse, ListResponse, paginated
from app.db.base import get_db
from app.schemas.vendor import VendorCreate, VendorOut, VendorUpdate
from app.services.vendor import VendorService

router = APIRouter(prefix="/vendors", tags=["Vendors"])


def _svc(session: AsyncSession, current: CurrentUser) -> VendorService:
    return VendorService(session, current.organization_id)


@router.get("", response_model=ListResponse[VendorOut])
async def list_vendors(
    filter_status: Optional[str] = Query(default=None, alias="status", description="Filter by status"),
    search: Optional[str] = Query(default=None, description="Case-insensitive name search"),
    pagination: PaginationParams = Depends(),
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    """List vendors (paginated). Filter by ?status=pending|active|inactive."""
    items, total = await _svc(session, current).list_vendors(
        pagination, status=filter_status, search=search
    )
    return paginated(
        [VendorOut.model_validate(v) for v in items],
        total, pagination.page, pagination.limit,
    )


@router.post("", response_model=DataResponse[VendorOut], status_code=status.HTTP_201_CREATED)
async def create_vendor(
    body: VendorCreate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    vendor = await _svc(session, current).create_vendor(body)
    return {"data": VendorOut.model_validate(vendor)}


@router.get("/{vendor_id}", response_model=DataResponse[VendorOut])
async def get_vendor(
    vendor_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    vendor = await _svc(session, current).get_vendor(vendor_id)
    return {"data": VendorOut.model_validate(vendor)}


@router.put("/{vendor_id}", response_model=DataResponse[VendorOut])
async def update_vendor(
    vendor_id: str,
    body: VendorUpdate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    vendor = await _svc(session, current).update_vendor(vendor_id, body)
    return {"data": VendorOut.model_validate(vendor)}


@router.delete("/{vendor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vendor(
    vendor_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    await _svc(session, current).delete_vendor(vendor_id)
