"""Initiative service: CRUD with nested tasks/milestones, Kanban board and Gantt timeline.

The board and timeline are read models over the same rows:

  board     four fixed columns (planning, active, completed, cancelled)
  timeline  one all-day event per initiative, coloured by status

Moving a card between board columns is a status update; dropping a card on
the column it already sits in writes nothing.
"""

import logging
from typing import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError, ValidationError
from app.core.pagination import PaginationParams
from app.domain.initiative import INITIATIVE_STATUSES, Initiative, InitiativeTask, Milestone
from app.domain.mixins import as_utc
from app.repositories.initiative import (
    InitiativeRepository,
    InitiativeTaskRepository,
    MilestoneRepository,
)
from app.schemas.initiative import (
    InitiativeCreate,
    InitiativeUpdate,
    MilestoneCreate,
    MilestoneUpdate,
    TaskCreate,
    TaskUpdate,
)

logger = logging.getLogger(__name__)

BOARD_COLUMNS: tuple[tuple[str, str], ...] = (
    ("planning", "Planning"),
    ("active", "Active"),
    ("completed", "Completed"),
    ("cancelled", "Cancelled"),
)

STATUS_COLORS: dict[str, str] = {
    "planning": "#f59e0b",
    "active": "#37b5fe",
    "completed": "#3b82f6",
    "cancelled": "#ef4444",
}
DEFAULT_EVENT_COLOR = "#3b82f6"


def event_color(status: str) -> str:
    return STATUS_COLORS.get(status, DEFAULT_EVENT_COLOR)


def build_board(initiatives: Iterable[Initiative]) -> list[dict]:
    """Group initiatives into the Kanban columns, keeping their incoming order."""
    columns = {key: {"id": key, "title": title, "initiatives": []} for key, title in BOARD_COLUMNS}
    for initiative in initiatives:
        column = columns.get(initiative.status)
        if column is not None:
            column["initiatives"].append(initiative)
    return list(columns.values())


def timeline_events(initiatives: Iterable[Initiative], status: str | None = None) -> list[dict]:
    """Gantt events; ``status`` of None or ``"all"`` keeps every initiative."""
    events = []
    for initiative in initiatives:
        if status and status != "all" and initiative.status != status:
            continue
        events.append(
            {
                "id": initiative.id,
                "title": initiative.title,
                "start": as_utc(initiative.start_date),
                "end": as_utc(initiative.target_date),
                "status": initiative.status,
                "all_day": True,
                "color": event_color(initiative.status),
            }
        )
    return events


class InitiativeService:
    def __init__(self, session: AsyncSession, organization_id: str):
        self._repo = InitiativeRepository(session, organization_id)
        self._tasks = InitiativeTaskRepository(session, organization_id)
        self._milestones = MilestoneRepository(session, organization_id)

    # ------------------------------------------------------------------
    # Initiatives
    # ------------------------------------------------------------------

    async def list_initiatives(self, pagination: PaginationParams, status: str | None = None):
        filters = {"status": status} if status else None
        return await self._repo.list(
            offset=pagination.offset,
            limit=pagination.limit,
            order_by=pagination.sort,
            order=pagination.order,
            filters=filters,
        )

    async def get_initiative(self, initiative_id: str) -> Initiative:
        initiative = await self._repo.get_by_id(initiative_id)
        if not initiative:
            raise NotFoundError("Initiative", initiative_id)
        return initiative

    async def create_initiative(self, data: InitiativeCreate, created_by: str | None = None) -> Initiative:
        payload = data.model_dump(exclude={"tasks", "milestones", "estimated_impact"})
        initiative = await self._repo.create(
            **payload,
            estimated_impact=data.estimated_impact.model_dump(by_alias=True),
            created_by=created_by,
        )
        for task in data.tasks:
            await self._tasks.create(initiative_id=initiative.id, **task.model_dump(exclude_none=True))
        for milestone in data.milestones:
            await self._milestones.create(initiative_id=initiative.id, **milestone.model_dump())
        logger.info("Created initiative %s", initiative.id)
        return await self.get_initiative(initiative.id)

    async def update_initiative(self, initiative_id: str, data: InitiativeUpdate) -> Initiative:
        current = await self.get_initiative(initiative_id)
        start = as_utc(data.start_date or current.start_date)
        target = as_utc(data.target_date or current.target_date)
        if target < start:
            raise ValidationError("targetDate must not precede startDate")

        payload = data.model_dump(exclude={"estimated_impact"}, exclude_none=True, exclude_unset=True)
        if data.estimated_impact is not None:
            payload["estimated_impact"] = data.estimated_impact.model_dump(by_alias=True)
        await self._repo.update(initiative_id, **payload)
        return await self.get_initiative(initiative_id)

    async def delete_initiative(self, initiative_id: str) -> None:
        deleted = await self._repo.soft_delete(initiative_id)
        if not deleted:
            raise NotFoundError("Initiative", initiative_id)

    # ------------------------------------------------------------------
    # Kanban / Gantt
    # ------------------------------------------------------------------

    async def board(self) -> list[dict]:
        return build_board(await self._repo.list_all())

    async def timeline(self, status: str | None = None) -> list[dict]:
        if status and status != "all" and status not in INITIATIVE_STATUSES:
            raise ValidationError(f"Unknown initiative status '{status}'")
        return timeline_events(await self._repo.list_all(), status)

    async def move(self, initiative_id: str, status: str) -> Initiative:
        """Kanban drop onto ``status``."""
        if status not in INITIATIVE_STATUSES:
            raise ValidationError(f"Unknown board column '{status}'")
        initiative = await self.get_initiative(initiative_id)
        if initiative.status == status:
            return initiative
        await self._repo.update(initiative_id, status=status)
        logger.info("Initiative %s moved to %s", initiative_id, status)
        return await self.get_initiative(initiative_id)

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    async def add_task(self, initiative_id: str, data: TaskCreate) -> InitiativeTask:
        _ = await self.get_initiative(initiative_id)
        return await self._tasks.create(initiative_id=initiative_id, **data.model_dump(exclude_none=True))

    async def update_task(self, initiative_id: str, task_id: str, data: TaskUpdate) -> InitiativeTask:
        _ = await self.get_initiative(initiative_id)
        if not await self._tasks.get_for_initiative(initiative_id, task_id):
            raise NotFoundError("Task", task_id)
        updated = await self._tasks.update(
            task_id, **data.model_dump(exclude_none=True, exclude_unset=True)
        )
        return updated  # type: ignore[return-value]

    async def delete_task(self, initiative_id: str, task_id: str) -> None:
        _ = await self.get_initiative(initiative_id)
        if not await self._tasks.get_for_initiative(initiative_id, task_id):
            raise NotFoundError("Task", task_id)
        await self._tasks.delete(task_id)

    # ------------------------------------------------------------------
    # Milestones
    # ------------------------------------------------------------------

    async def add_milestone(self, initiative_id: str, data: MilestoneCreate) -> Milestone:
        _ = await self.get_initiative(initiative_id)
        return await self._milestones.create(initiative_id=initiative_id, **data.model_dump())

    async def update_milestone(
        self, initiative_id: str, milestone_id: str, data: MilestoneUpdate
    ) -> Milestone:
        _ = await self.get_initiative(initiative_id)
        if not await self._milestones.get_for_initiative(initiative_id, milestone_id):
            raise NotFoundError("Milestone", milestone_id)
        updated = await self._milestones.update(
            milestone_id, **data.model_dump(exclude_none=True, exclude_unset=True)
        )
        return updated  # type: ignore[return-value]
