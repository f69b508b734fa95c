"""Initiative, task and milestone repositories."""

from sqlalchemy import delete

from app.domain.initiative import Initiative, InitiativeTask, Milestone
from app.repositories.base import BaseRepository


class InitiativeRepository(BaseRepository[Initiative]):
    model = Initiative

    async def get_by_id(self, entity_id: str) -> Initiative | None:
        # populate_existing reloads the selectin children after a task/milestone write
        q = (
            self._base_query()
            .where(Initiative.id == entity_id)
            .execution_options(populate_existing=True)
        )
        return (await self._session.execute(q)).scalars().first()

    async def list_all(self, status: str | None = None) -> list[Initiative]:
        q = self._base_query()
        if status:
            q = q.where(Initiative.status == status)
        q = q.order_by(Initiative.created_at.asc())
        return list((await self._session.execute(q)).scalars().all())


class InitiativeTaskRepository(BaseRepository[InitiativeTask]):
    model = InitiativeTask

    async def get_for_initiative(self, initiative_id: str, task_id: str) -> InitiativeTask | None:
        q = (
            self._base_query()
            .where(InitiativeTask.initiative_id == initiative_id)
            .where(InitiativeTask.id == task_id)
        )
        return (await self._session.execute(q)).scalars().first()

    async def delete(self, task_id: str) -> bool:
        """Tasks live and die with their initiative's board, so they are removed outright."""
        result = await self._session.execute(
            delete(InitiativeTask)
            .where(InitiativeTask.id == task_id)
            .where(InitiativeTask.organization_id == self._organization_id)
        )
        await self._session.flush()
        return result.rowcount > 0


class MilestoneRepository(BaseRepository[Milestone]):
    model = Milestone

    async def get_for_initiative(self, initiative_id: str, milestone_id: str) -> Milestone | None:
        q = (
            self._base_query()
            .where(Milestone.initiative_id == initiative_id)
            .where(Milestone.id == milestone_id)
        )
        return (await self._session.execute(q)).scalars().first()
