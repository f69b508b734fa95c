"""Request-scoped FastAPI dependencies: authenticated user and tenant scope."""

from dataclasses import dataclass

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.db.base import get_db
from app.domain.user import User
from app.services.auth import AuthService


@dataclass
class CurrentUser:
    """The authenticated user and the organization that scopes every query."""

    user: User
    via: str  # "session" | "api_token"

    @property
    def id(self) -> str:
        return self.user.id

    @property
    def organization_id(self) -> str:
        return self.user.organization_id


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, value = authorization.partition(" ")
    if scheme.lower() != "bearer" or not value.strip():
        raise UnauthorizedError("Invalid Authorization header format")
    return value.strip()


async def get_current_user(
    request: Request,
    authorization: str | None = Header(default=None),
    session: AsyncSession = Depends(get_db),
) -> CurrentUser:
    """Resolve the caller from a bearer API token or the session cookie (401 otherwise)."""
    svc = AuthService(session)
    bearer = _bearer_token(authorization)
    if bearer is not None:
        current = CurrentUser(await svc.user_from_api_token(bearer), via="api_token")
    else:
        raw = request.cookies.get(settings.session_cookie_name)
        if not raw:
            raise UnauthorizedError()
        current = CurrentUser(await svc.user_from_session(raw), via="session")

    # Picked up by the audit middleware
    request.state.user_id = current.id
    request.state.organization_id = current.organization_id
    return current


async def require_org_admin(current: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    if not current.user.is_org_admin:
        raise ForbiddenError("Only organization owners and admins can do this")
    return current
