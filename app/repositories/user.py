"""User, session and API-token repositories.

Lookups that happen *before* the tenant is known (login by email, resolving a
session cookie or bearer token) are module-level functions taking a session;
everything else is organization-scoped through BaseRepository.
"""

from datetime import datetime

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.mixins import utcnow
from app.domain.user import ApiToken, User, UserSession
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User

    async def list_members(self) -> list[User]:
        q = self._base_query().order_by(User.created_at.asc())
        return list((await self._session.execute(q)).scalars().all())


class ApiTokenRepository(BaseRepository[ApiToken]):
    model = ApiToken

    async def list_active_for_user(self, user_id: str) -> list[ApiToken]:
        q = (
            self._base_query()
            .where(ApiToken.user_id == user_id)
            .where(ApiToken.is_active.is_(True))
            .order_by(ApiToken.created_at.asc())
        )
        return list((await self._session.execute(q)).scalars().all())

    async def revoke(self, token_id: str, user_id: str) -> bool:
        result = await self._session.execute(
            update(ApiToken)
            .where(ApiToken.id == token_id)
            .where(ApiToken.user_id == user_id)
            .where(ApiToken.organization_id == self._organization_id)
            .where(ApiToken.is_active.is_(True))
            .values(is_active=False, updated_at=utcnow())
        )
        await self._session.flush()
        return result.rowcount > 0


# ---------------------------------------------------------------------------
# Pre-tenant lookups
# ---------------------------------------------------------------------------

async def get_user_by_email(session: AsyncSession, email: str) -> User | None:
    result = await session.execute(
        select(User)
        .where(func.lower(User.email) == email.lower())
        .where(User.deleted_at.is_(None))
    )
    return result.scalars().first()


async def get_user(session: AsyncSession, user_id: str) -> User | None:
    result = await session.execute(
        select(User).where(User.id == user_id).where(User.deleted_at.is_(None))
    )
    return result.scalars().first()


async def get_session_by_hash(session: AsyncSession, hashed: str) -> UserSession | None:
    result = await session.execute(select(UserSession).where(UserSession.token_hash == hashed))
    return result.scalars().first()


async def create_session(
    session: AsyncSession,
    *,
    user_id: str,
    hashed: str,
    expires_at: datetime,
    ip_address: str | None,
    user_agent: str | None,
) -> UserSession:
    row = UserSession(
        user_id=user_id,
        token_hash=hashed,
        expires_at=expires_at,
        ip_address=ip_address,
        user_agent=(user_agent or "")[:512] or None,
    )
    session.add(row)
    await session.flush()
    return row


async def purge_expired_sessions(session: AsyncSession, user_id: str) -> int:
    result = await session.execute(
        delete(UserSession)
        .where(UserSession.user_id == user_id)
        .where(UserSession.expires_at <= utcnow())
        .execution_options(synchronize_session=False)
    )
    return result.rowcount


async def touch_session(session: AsyncSession, session_id: str) -> None:
    await session.execute(
        update(UserSession).where(UserSession.id == session_id).values(last_seen_at=utcnow())
    )


async def delete_session(session: AsyncSession, hashed: str) -> None:
    await session.execute(delete(UserSession).where(UserSession.token_hash == hashed))
    await session.flush()


async def get_api_token_by_hash(session: AsyncSession, hashed: str) -> ApiToken | None:
    result = await session.execute(
        select(ApiToken)
        .where(ApiToken.token_hash == hashed)
        .where(ApiToken.deleted_at.is_(None))
    )
    return result.scalars().first()


async def touch_api_token(session: AsyncSession, token_id: str) -> None:
    await session.execute(
        update(ApiToken).where(ApiToken.id == token_id).values(last_used=utcnow())
    )
