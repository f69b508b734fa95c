"""Goal service. New goals start at 0 % and ``in_progress``."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError, ValidationError
from app.core.pagination import PaginationParams
from app.domain.goal import Goal
from app.domain.mixins import as_utc
from app.repositories.goal import GoalRepository
from app.schemas.goal import GoalCreate, GoalUpdate


class GoalService:
    def __init__(self, session: AsyncSession, organization_id: str):
        self._repo = GoalRepository(session, organization_id)

    async def list_goals(self, pagination: PaginationParams, status: str | None = None):
        filters = {"status": status} if status else None
        return await self._repo.list(
            offset=pagination.offset,
            limit=pagination.limit,
            order_by=pagination.sort,
            order=pagination.order,
            filters=filters,
        )

    async def get_goal(self, goal_id: str) -> Goal:
        goal = await self._repo.get_by_id(goal_id)
        if not goal:
            raise NotFoundError("Goal", goal_id)
        return goal

    async def create_goal(self, data: GoalCreate, user_id: str | None = None) -> Goal:
        return await self._repo.create(
            **data.model_dump(),
            current_percentage=0,
            status="in_progress",
            user_id=user_id,
        )

    async def update_goal(self, goal_id: str, data: GoalUpdate) -> Goal:
        current = await self.get_goal(goal_id)
        start = as_utc(data.start_date or current.start_date)
        end = as_utc(data.end_date or current.end_date)
        if end < start:
            raise ValidationError("endDate must not precede startDate")
        updated = await self._repo.update(
            goal_id, **data.model_dump(exclude_none=True, exclude_unset=True)
        )
        return updated  # type: ignore[return-value]

    async def delete_goal(self, goal_id: str) -> None:
        deleted = await self._repo.soft_delete(goal_id)
        if not deleted:
            raise NotFoundError("Goal", goal_id)
