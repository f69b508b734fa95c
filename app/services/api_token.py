"""API token service: issue, list (masked) and revoke bearer tokens."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.core.security import mask_token, new_api_token, token_hash
from app.domain.user import ApiToken
from app.repositories.user import ApiTokenRepository
from app.schemas.auth import ApiTokenCreate

logger = logging.getLogger(__name__)


class ApiTokenService:
    def __init__(self, session: AsyncSession, organization_id: str, user_id: str):
        self._repo = ApiTokenRepository(session, organization_id)
        self._user_id = user_id

    async def list_tokens(self) -> list[ApiToken]:
        return await self._repo.list_active_for_user(self._user_id)

    async def create_token(self, data: ApiTokenCreate) -> tuple[ApiToken, str]:
        """Return the stored row and the raw token; the raw value is never retrievable again."""
        raw = new_api_token()
        token = await self._repo.create(
            user_id=self._user_id,
            name=data.name,
            token_hash=token_hash(raw),
            masked_token=mask_token(raw),
            permissions=data.permissions,
            expires_at=data.expires_at,
        )
        logger.info("Issued API token %s for user %s", token.id, self._user_id)
        return token, raw

    async def revoke_token(self, token_id: str) -> None:
        if not await self._repo.revoke(token_id, self._user_id):
            raise NotFoundError("API token", token_id)
        logger.info("Revoked API token %s", token_id)
