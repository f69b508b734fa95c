"""Authentication service: registration, login sessions and bearer API tokens.

Flow:
  register → organization + owner user + session
  login    → password check + session
  resolve  → cookie token or ``Authorization: Bearer wt_...`` → User

Only SHA-256 hashes of session and API tokens are stored; the raw values are
returned to the caller exactly once.
"""

import logging
import re
from datetime import timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import ConflictError, UnauthorizedError
from app.core.security import (
    API_TOKEN_PREFIX,
    hash_password,
    new_session_token,
    token_hash,
    verify_password,
)
from app.domain.mixins import as_utc, utcnow
from app.domain.organization import Organization
from app.domain.user import User
from app.repositories import user as user_repo
from app.repositories.organization import OrganizationRepository
from app.repositories.user import UserRepository
from app.schemas.auth import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

_SLUG_STRIP = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """``"Acme Recycling, Inc."`` -> ``"acme-recycling-inc"``."""
    slug = _SLUG_STRIP.sub("-", name.lower()).strip("-")
    return slug or "organization"


class AuthService:
    def __init__(self, session: AsyncSession):
        self._session = session
        self._orgs = OrganizationRepository(session)

    async def _unique_slug(self, name: str) -> str:
        base = slugify(name)
        slug, n = base, 1
        while await self._orgs.slug_exists(slug):
            n += 1
            slug = f"{base}-{n}"
        return slug

    async def _start_session(
        self, user: User, ip_address: str | None, user_agent: str | None
    ) -> str:
        raw = new_session_token()
        purged = await user_repo.purge_expired_sessions(self._session, user.id)
        if purged:
            logger.debug("Purged %d expired sessions for user %s", purged, user.id)
        await user_repo.create_session(
            self._session,
            user_id=user.id,
            hashed=token_hash(raw),
            expires_at=utcnow() + timedelta(hours=settings.session_ttl_hours),
            ip_address=ip_address,
            user_agent=user_agent,
        )
        return raw

    # ------------------------------------------------------------------
    # Register / login / logout
    # ------------------------------------------------------------------

    async def register(
        self,
        data: RegisterRequest,
        *,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> tuple[User, Organization, str]:
        if await user_repo.get_user_by_email(self._session, data.email):
            raise ConflictError("An account with this email already exists")

        organization = await self._orgs.create(
            name=data.organization_name,
            slug=await self._unique_slug(data.organization_name),
            billing_email=data.billing_email or data.email,
        )
        password_hash, salt = hash_password(data.password)
        user = await UserRepository(self._session, organization.id).create(
            email=data.email.lower(),
            password_hash=password_hash,
            password_salt=salt,
            first_name=data.first_name,
            last_name=data.last_name,
            organization_role="owner",
            user_type="full",
            last_login=utcnow(),
        )
        raw = await self._start_session(user, ip_address, user_agent)
        logger.info("Registered organization %s (%s)", organization.slug, organization.id)
        return user, organization, raw

    async def login(
        self,
        data: LoginRequest,
        *,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> tuple[User, str]:
        user = await user_repo.get_user_by_email(self._session, data.email)
        if (
            user is None
            or not user.is_active
            or not verify_password(data.password, user.password_hash, user.password_salt)
        ):
            raise UnauthorizedError("Invalid email or password")

        user.last_login = utcnow()
        raw = await self._start_session(user, ip_address, user_agent)
        logger.info("User %s logged in", user.id)
        return user, raw

    async def logout(self, raw_token: str | None) -> None:
        if raw_token:
            await user_repo.delete_session(self._session, token_hash(raw_token))

    # ------------------------------------------------------------------
    # Request authentication
    # ------------------------------------------------------------------

    async def user_from_session(self, raw_token: str) -> User:
        row = await user_repo.get_session_by_hash(self._session, token_hash(raw_token))
        if row is None:
            raise UnauthorizedError("Session not found")
        if as_utc(row.expires_at) <= utcnow():
            raise UnauthorizedError("Session expired")

        user = await user_repo.get_user(self._session, row.user_id)
        if user is None or not user.is_active:
            raise UnauthorizedError("Account disabled")
        await user_repo.touch_session(self._session, row.id)
        return user

    async def user_from_api_token(self, raw_token: str) -> User:
        if not raw_token.startswith(API_TOKEN_PREFIX):
            raise UnauthorizedError("Malformed API token")
        token = await user_repo.get_api_token_by_hash(self._session, token_hash(raw_token))
        if token is None or not token.is_active:
            raise UnauthorizedError("Invalid API token")
        if token.expires_at is not None and as_utc(token.expires_at) <= utcnow():
            raise UnauthorizedError("API token expired")

        user = await user_repo.get_user(self._session, token.user_id)
        if user is None or not user.is_active or user.organization_id != token.organization_id:
            raise UnauthorizedError("Invalid API token")
        await user_repo.touch_api_token(self._session, token.id)
        return user
