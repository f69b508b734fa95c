"""Organization router — the caller's own organization and its members."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import CurrentUser, get_current_user, require_org_admin
from app.core.response import DataResponse
from app.db.base import get_db
from app.schemas.auth import UserOut
from app.schemas.organization import MemberCreate, OrganizationOut, OrganizationUpdate
from app.services.organization import OrganizationService

router = APIRouter(prefix="/organization", tags=["Organization"])


@router.get("", response_model=DataResponse[OrganizationOut])
async def get_organization(
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    organization = await OrganizationService(session, current.organization_id).get_organization()
    return {"data": OrganizationOut.model_validate(organization)}


@router.patch("", response_model=DataResponse[OrganizationOut])
async def update_organization(
    body: OrganizationUpdate,
    current: CurrentUser = Depends(require_org_admin),
    session: AsyncSession = Depends(get_db),
):
    organization = await OrganizationService(session, current.organization_id).update_organization(body)
    return {"data": OrganizationOut.model_validate(organization)}


@router.get("/members", response_model=DataResponse[list[UserOut]])
async def list_members(
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    members = await OrganizationService(session, current.organization_id).list_members()
    return {"data": [UserOut.model_validate(m) for m in members]}


@router.post("/members", response_model=DataResponse[UserOut], status_code=status.HTTP_201_CREATED)
async def add_member(
    body: MemberCreate,
    current: CurrentUser = Depends(require_org_admin),
    session: AsyncSession = Depends(get_db),
):
    """Add a user to the organization (owner/admin only; 409 once ``maxUsers`` is reached)."""
    member = await OrganizationService(session, current.organization_id).add_member(body)
    return {"data": UserOut.model_validate(member)}
