from app.domain.layout import LayoutPreference
from app.repositories.base import BaseRepository


class LayoutRepository(BaseRepository[LayoutPreference]):
    model = LayoutPreference

    async def get_slot(self, user_id: str, slot: str) -> LayoutPreference | None:
        q = (
            self._base_query()
            .where(LayoutPreference.user_id == user_id)
            .where(LayoutPreference.slot == slot)
        )
        return (await self._session.execute(q)).scalars().first()
