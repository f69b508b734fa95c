"""Waste point service, including the manual volume audits recorded against a waste point."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.core.pagination import PaginationParams
from app.domain.waste_point import WasteAudit, WastePoint
from app.repositories.device import DeviceRepository
from app.repositories.waste_point import WasteAuditRepository, WastePointRepository
from app.schemas.waste_point import WasteAuditCreate, WastePointCreate, WastePointUpdate

# Nullable columns an update may reset to null
CLEARABLE_FIELDS = frozenset({"notes", "device_id"})


class WastePointService:
    def __init__(self, session: AsyncSession, organization_id: str):
        self._repo = WastePointRepository(session, organization_id)
        self._devices = DeviceRepository(session, organization_id)
        self._audits = WasteAuditRepository(session, organization_id)

    async def _check_device(self, device_id: str | None) -> None:
        if device_id and not await self._devices.get_by_id(device_id):
            raise NotFoundError("Device", device_id)

    @staticmethod
    def _payload(data: WastePointCreate | WastePointUpdate, *, partial: bool = False) -> dict:
        """Column values to write; on partial updates an explicit null clears a nullable column."""
        payload = data.model_dump(exclude={"location_data"}, exclude_unset=partial)
        payload = {k: v for k, v in payload.items() if v is not None or (partial and k in CLEARABLE_FIELDS)}
        if data.location_data is not None:
            payload["location_data"] = data.location_data.model_dump(by_alias=True, exclude_none=True)
        elif partial and "location_data" in data.model_fields_set:
            payload["location_data"] = None
        return payload

    async def list_waste_points(self, pagination: PaginationParams, ids: list[str] | None = None):
        """Paginated list, or exactly the requested subset when ``ids`` is given."""
        if ids is not None:
            items = await self._repo.get_many(ids)
            return items, len(items)
        return await self._repo.list(
            offset=pagination.offset,
            limit=pagination.limit,
            order_by=pagination.sort,
            order=pagination.order,
        )

    async def get_waste_point(self, waste_point_id: str) -> WastePoint:
        waste_point = await self._repo.get_by_id(waste_point_id)
        if not waste_point:
            raise NotFoundError("Waste point", waste_point_id)
        return waste_point

    async def create_waste_point(self, data: WastePointCreate) -> WastePoint:
        await self._check_device(data.device_id)
        return await self._repo.create(**self._payload(data))

    async def update_waste_point(self, waste_point_id: str, data: WastePointUpdate) -> WastePoint:
        _ = await self.get_waste_point(waste_point_id)
        await self._check_device(data.device_id)
        updated = await self._repo.update(
            waste_point_id, **self._payload(data, partial=True)
        )
        return updated  # type: ignore[return-value]

    async def delete_waste_point(self, waste_point_id: str) -> None:
        deleted = await self._repo.soft_delete(waste_point_id)
        if not deleted:
            raise NotFoundError("Waste point", waste_point_id)

    # ------------------------------------------------------------------
    # Audits
    # ------------------------------------------------------------------

    async def record_audit(self, waste_point_id: str, data: WasteAuditCreate) -> WasteAudit:
        _ = await self.get_waste_point(waste_point_id)
        return await self._audits.create(waste_point_id=waste_point_id, **data.model_dump())

    async def list_audits(self, waste_point_id: str) -> list[WasteAudit]:
        """Audits for one waste point, newest audit date first."""
        _ = await self.get_waste_point(waste_point_id)
        return await self._audits.list_for_waste_point(waste_point_id)
