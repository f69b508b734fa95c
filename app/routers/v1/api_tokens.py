"""API token router — list (masked), create (full token shown once), revoke."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import CurrentUser, get_current_user
from app.core.response import DataResponse
from app.db.base import get_db
from app.schemas.auth import ApiTokenCreate, ApiTokenCreated, ApiTokenOut
from app.services.api_token import ApiTokenService

router = APIRouter(prefix="/api-tokens", tags=["API Tokens"])


def _svc(session: AsyncSession, current: CurrentUser) -> ApiTokenService:
    return ApiTokenService(session, current.organization_id, current.id)


@router.get("", response_model=DataResponse[list[ApiTokenOut]])
async def list_tokens(
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    tokens = await _svc(session, current).list_tokens()
    return {"data": [ApiTokenOut.model_validate(t) for t in tokens]}


@router.post("", response_model=DataResponse[ApiTokenCreated], status_code=status.HTTP_201_CREATED)
async def create_token(
    body: ApiTokenCreate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    token, raw = await _svc(session, current).create_token(body)
    return {
        "data": ApiTokenCreated(
            id=token.id,
            name=token.name,
            token=raw,
            permissions=token.permissions,
            expires_at=token.expires_at,
            created_at=token.created_at,
        )
    }


@router.delete("/{token_id}", status_code=status.HTTP_204_NO_CONTENT)
async def revoke_token(
    token_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    await _svc(session, current).revoke_token(token_id)
