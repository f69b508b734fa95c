"""Auth router — register, login, logout and the current user.

Apart from device ingestion these are the only /api/v1 routes that take no
authenticated caller (``/auth/me`` excepted). A successful register/login sets the HttpOnly session
cookie; API clients use ``Authorization: Bearer wt_...`` instead.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.deps import CurrentUser, get_current_user
from app.core.response import DataResponse, MessageResponse
from app.db.base import get_db
from app.schemas.auth import LoginRequest, RegisterOut, RegisterRequest, UserOut, UserUpdate
from app.schemas.organization import OrganizationOut
from app.services.auth import AuthService
from app.services.organization import OrganizationService

router = APIRouter(prefix="/auth", tags=["Auth"])


def _set_session_cookie(response: Response, raw_token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=raw_token,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        path="/",
    )


def _client_meta(request: Request) -> dict:
    return {
        "ip_address": request.client.host if request.client else None,
        "user_agent": request.headers.get("user-agent"),
    }


@router.post("/register", response_model=DataResponse[RegisterOut], status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterRequest,
    request: Request,
    response: Response,
    session: AsyncSession = Depends(get_db),
):
    """Create an organization with its owner account and sign the owner in."""
    user, organization, raw = await AuthService(session).register(body, **_client_meta(request))
    _set_session_cookie(response, raw)
    request.state.user_id = user.id
    request.state.organization_id = organization.id
    return {
        "data": RegisterOut(
            user=UserOut.model_validate(user),
            organization=OrganizationOut.model_validate(organization),
        )
    }


@router.post("/login", response_model=DataResponse[UserOut])
async def login(
    body: LoginRequest,
    request: Request,
    response: Response,
    session: AsyncSession = Depends(get_db),
):
    user, raw = await AuthService(session).login(body, **_client_meta(request))
    _set_session_cookie(response, raw)
    request.state.user_id = user.id
    request.state.organization_id = user.organization_id
    return {"data": UserOut.model_validate(user)}


@router.post("/logout", response_model=MessageResponse)
async def logout(
    request: Request,
    response: Response,
    session: AsyncSession = Depends(get_db),
):
    await AuthService(session).logout(request.cookies.get(settings.session_cookie_name))
    response.delete_cookie(settings.session_cookie_name, path="/")
    return MessageResponse(message="Logout successful")


@router.get("/me", response_model=DataResponse[UserOut])
async def me(current: CurrentUser = Depends(get_current_user)):
    return {"data": UserOut.model_validate(current.user)}


@router.patch("/me", response_model=DataResponse[UserOut])
async def update_me(
    body: UserUpdate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    user = await OrganizationService(session, current.organization_id).update_profile(current.id, body)
    return {"data": UserOut.model_validate(user)}
