"""Pickup schedule service.

A schedule is one pickup at one waste point. New schedules start ``pending``;
the waste point must belong to the caller's organization.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.core.pagination import PaginationParams
from app.domain.waste_point import PickupSchedule
from app.repositories.waste_point import PickupScheduleRepository, WastePointRepository
from app.schemas.waste_point import ScheduleCreate, ScheduleUpdate

logger = logging.getLogger(__name__)


class ScheduleService:
    def __init__(self, session: AsyncSession, organization_id: str):
        self._repo = PickupScheduleRepository(session, organization_id)
        self._waste_points = WastePointRepository(session, organization_id)

    async def list_schedules(
        self,
        pagination: PaginationParams,
        *,
        waste_point_id: str | None = None,
        status: str | None = None,
    ):
        """Upcoming-first by pickup date unless another sort is requested."""
        if pagination.sort == "created_at":
            order_by, order = "date", "asc"
        else:
            order_by, order = pagination.sort, pagination.order
        return await self._repo.list(
            offset=pagination.offset,
            limit=pagination.limit,
            order_by=order_by,
            order=order,
            filters={"waste_point_id": waste_point_id, "status": status},
        )

    async def get_schedule(self, schedule_id: str) -> PickupSchedule:
        schedule = await self._repo.get_by_id(schedule_id)
        if not schedule:
            raise NotFoundError("Schedule", schedule_id)
        return schedule

    async def create_schedule(self, data: ScheduleCreate) -> PickupSchedule:
        if not await self._waste_points.get_by_id(data.waste_point_id):
            raise NotFoundError("Waste point", data.waste_point_id)
        schedule = await self._repo.create(**data.model_dump(), status="pending")
        logger.info("Scheduled pickup %s at waste point %s", schedule.id, data.waste_point_id)
        return schedule

    async def update_schedule(self, schedule_id: str, data: ScheduleUpdate) -> PickupSchedule:
        _ = await self.get_schedule(schedule_id)
        updated = await self._repo.update(
            schedule_id, **data.model_dump(exclude_none=True, exclude_unset=True)
        )
        return updated  # type: ignore[return-value]
