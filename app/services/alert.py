"""Alert rule service."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.core.pagination import PaginationParams
from app.domain.alert import Alert
from app.repositories.alert import AlertRepository
from app.repositories.device import SensorRepository
from app.repositories.waste_point import WastePointRepository
from app.schemas.alert import AlertCreate, AlertUpdate


class AlertService:
    def __init__(self, session: AsyncSession, organization_id: str):
        self._repo = AlertRepository(session, organization_id)
        self._targets = {
            "sensor": ("Sensor", SensorRepository(session, organization_id)),
            "waste_point": ("Waste point", WastePointRepository(session, organization_id)),
        }

    async def _check_target(self, target_type: str, target_id: str | None) -> None:
        if not target_id:
            return
        label, repo = self._targets[target_type]
        if not await repo.get_by_id(target_id):
            raise NotFoundError(label, target_id)

    async def list_alerts(self, pagination: PaginationParams, active: bool | None = None):
        return await self._repo.list(
            offset=pagination.offset,
            limit=pagination.limit,
            order_by=pagination.sort,
            order=pagination.order,
            filters={"active": active},
        )

    async def get_alert(self, alert_id: str) -> Alert:
        alert = await self._repo.get_by_id(alert_id)
        if not alert:
            raise NotFoundError("Alert", alert_id)
        return alert

    async def create_alert(self, data: AlertCreate) -> Alert:
        await self._check_target(data.target_type, data.target_id)
        return await self._repo.create(**data.model_dump(exclude_none=True))

    async def update_alert(self, alert_id: str, data: AlertUpdate) -> Alert:
        current = await self.get_alert(alert_id)
        await self._check_target(data.target_type or current.target_type, data.target_id)
        updated = await self._repo.update(
            alert_id, **data.model_dump(exclude_none=True, exclude_unset=True)
        )
        return updated  # type: ignore[return-value]

    async def delete_alert(self, alert_id: str) -> None:
        deleted = await self._repo.soft_delete(alert_id)
        if not deleted:
            raise NotFoundError("Alert", alert_id)
