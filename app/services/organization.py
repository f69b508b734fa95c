"""Organization profile and membership service."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError
from app.core.security import hash_password
from app.domain.organization import Organization
from app.domain.user import User
from app.repositories import user as user_repo
from app.repositories.organization import OrganizationRepository
from app.repositories.user import UserRepository
from app.schemas.auth import UserUpdate
from app.schemas.organization import MemberCreate, OrganizationUpdate

logger = logging.getLogger(__name__)


class OrganizationService:
    def __init__(self, session: AsyncSession, organization_id: str):
        self._session = session
        self._organization_id = organization_id
        self._orgs = OrganizationRepository(session)
        self._users = UserRepository(session, organization_id)

    async def get_organization(self) -> Organization:
        organization = await self._orgs.get_by_id(self._organization_id)
        if not organization:
            raise NotFoundError("Organization", self._organization_id)
        return organization

    async def update_organization(self, data: OrganizationUpdate) -> Organization:
        _ = await self.get_organization()
        updated = await self._orgs.update(
            self._organization_id, **data.model_dump(exclude_none=True, exclude_unset=True)
        )
        return updated  # type: ignore[return-value]

    async def list_members(self) -> list[User]:
        return await self._users.list_members()

    async def add_member(self, data: MemberCreate) -> User:
        organization = await self.get_organization()
        if await self._users.count() >= organization.max_users:
            raise ConflictError(
                f"Organization has reached its limit of {organization.max_users} users"
            )
        if await user_repo.get_user_by_email(self._session, data.email):
            raise ConflictError("An account with this email already exists")

        password_hash, salt = hash_password(data.password)
        payload = data.model_dump(exclude={"password", "email"}, exclude_none=True)
        member = await self._users.create(
            email=data.email.lower(),
            password_hash=password_hash,
            password_salt=salt,
            **payload,
        )
        logger.info("Added member %s to organization %s", member.id, self._organization_id)
        return member

    async def update_profile(self, user_id: str, data: UserUpdate) -> User:
        if not await self._users.get_by_id(user_id):
            raise NotFoundError("User", user_id)
        updated = await self._users.update(
            user_id, **data.model_dump(exclude_none=True, exclude_unset=True)
        )
        return updated  # type: ignore[return-value]
