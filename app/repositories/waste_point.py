"""Waste point, pickup schedule and waste audit repositories."""

from app.domain.waste_point import PickupSchedule, WasteAudit, WastePoint
from app.repositories.base import BaseRepository


class WastePointRepository(BaseRepository[WastePoint]):
    model = WastePoint


class PickupScheduleRepository(BaseRepository[PickupSchedule]):
    model = PickupSchedule


class WasteAuditRepository(BaseRepository[WasteAudit]):
    model = WasteAudit

    async def list_for_waste_point(self, waste_point_id: str) -> list[WasteAudit]:
        q = (
            self._base_query()
            .where(WasteAudit.waste_point_id == waste_point_id)
            .order_by(WasteAudit.date.desc(), WasteAudit.created_at.desc())
        )
        return list((await self._session.execute(q)).scalars().all())
