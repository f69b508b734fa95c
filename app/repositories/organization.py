"""Organization repository.

Organizations are the tenant boundary themselves, so this repository is not
scoped by organization_id like the others.
"""

from typing import Any

from sqlalchemy import select, update

from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.mixins import utcnow
from app.domain.organization import Organization


class OrganizationRepository:
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, organization_id: str) -> Organization | None:
        result = await self._session.execute(
            select(Organization)
            .where(Organization.id == organization_id)
            .where(Organization.deleted_at.is_(None))
        )
        return result.scalars().first()

    async def slug_exists(self, slug: str) -> bool:
        result = await self._session.execute(
            select(Organization.id).where(Organization.slug == slug)
        )
        return result.first() is not None

    async def create(self, **kwargs: Any) -> Organization:
        instance = Organization(**kwargs)
        self._session.add(instance)
        await self._session.flush()
        await self._session.refresh(instance)
        return instance

    async def update(self, organization_id: str, **kwargs: Any) -> Organization | None:
        kwargs.pop("id", None)
        kwargs.pop("slug", None)
        kwargs["updated_at"] = utcnow()
        await self._session.execute(
            update(Organization).where(Organization.id == organization_id).values(**kwargs)
        )
        await self._session.flush()
        return await self.get_by_id(organization_id)
