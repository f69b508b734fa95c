"""Initiative router — CRUD, nested tasks/milestones, Kanban board and Gantt timeline.

Fixed paths (``/board``, ``/timeline``) are declared before ``/{initiative_id}``
so they are not captured as ids.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import CurrentUser, get_current_user
from app.core.pagination import PaginationParams
from app.core.response import DataResponse, ListResponse, paginated
from app.db.base import get_db
from app.schemas.initiative import (
    BoardColumn,
    InitiativeCreate,
    InitiativeOut,
    InitiativeUpdate,
    MilestoneCreate,
    MilestoneOut,
    MilestoneUpdate,
    StatusMove,
    TaskCreate,
    TaskOut,
    TaskUpdate,
    TimelineEvent,
)
from app.services.initiative import InitiativeService

router = APIRouter(prefix="/initiatives", tags=["Initiatives"])


def _svc(session: AsyncSession, current: CurrentUser) -> InitiativeService:
    return InitiativeService(session, current.organization_id)


@router.get("", response_model=ListResponse[InitiativeOut])
async def list_initiatives(
    filter_status: Optional[str] = Query(default=None, alias="status"),
    pagination: PaginationParams = Depends(),
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    items, total = await _svc(session, current).list_initiatives(pagination, status=filter_status)
    return paginated(
        [InitiativeOut.model_validate(i) for i in items],
        total, pagination.page, pagination.limit,
    )


@router.get("/board", response_model=DataResponse[list[BoardColumn]])
async def board(
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    """Kanban columns in fixed order: planning, active, completed, cancelled."""
    columns = await _svc(session, current).board()
    return {
        "data": [
            BoardColumn(
                id=c["id"],
                title=c["title"],
                initiatives=[InitiativeOut.model_validate(i) for i in c["initiatives"]],
            )
            for c in columns
        ]
    }


@router.get("/timeline", response_model=DataResponse[list[TimelineEvent]])
async def timeline(
    filter_status: str = Query(default="all", alias="status", description="all | planning | active | ..."),
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    """Gantt events, one per initiative, coloured by status."""
    events = await _svc(session, current).timeline(filter_status)
    return {"data": [TimelineEvent.model_validate(e) for e in events]}


@router.post("", response_model=DataResponse[InitiativeOut], status_code=status.HTTP_201_CREATED)
async def create_initiative(
    body: InitiativeCreate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    initiative = await _svc(session, current).create_initiative(body, created_by=current.id)
    return {"data": InitiativeOut.model_validate(initiative)}


@router.get("/{initiative_id}", response_model=DataResponse[InitiativeOut])
async def get_initiative(
    initiative_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    initiative = await _svc(session, current).get_initiative(initiative_id)
    return {"data": InitiativeOut.model_validate(initiative)}


@router.put("/{initiative_id}", response_model=DataResponse[InitiativeOut])
async def update_initiative(
    initiative_id: str,
    body: InitiativeUpdate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    initiative = await _svc(session, current).update_initiative(initiative_id, body)
    return {"data": InitiativeOut.model_validate(initiative)}


@router.patch("/{initiative_id}/status", response_model=DataResponse[InitiativeOut])
async def move_initiative(
    initiative_id: str,
    body: StatusMove,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    """Kanban drop. Unknown column → 422; same column → unchanged."""
    initiative = await _svc(session, current).move(initiative_id, body.status)
    return {"data": InitiativeOut.model_validate(initiative)}


@router.delete("/{initiative_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_initiative(
    initiative_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    await _svc(session, current).delete_initiative(initiative_id)


# ------------------------------------------------------------------
# Tasks
# ------------------------------------------------------------------

@router.post(
    "/{initiative_id}/tasks",
    response_model=DataResponse[TaskOut],
    status_code=status.HTTP_201_CREATED,
)
async def add_task(
    initiative_id: str,
    body: TaskCreate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    task = await _svc(session, current).add_task(initiative_id, body)
    return {"data": TaskOut.model_validate(task)}


@router.put("/{initiative_id}/tasks/{task_id}", response_model=DataResponse[TaskOut])
async def update_task(
    initiative_id: str,
    task_id: str,
    body: TaskUpdate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    task = await _svc(session, current).update_task(initiative_id, task_id, body)
    return {"data": TaskOut.model_validate(task)}


@router.delete("/{initiative_id}/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    initiative_id: str,
    task_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    await _svc(session, current).delete_task(initiative_id, task_id)


# ------------------------------------------------------------------
# Milestones
# ------------------------------------------------------------------

@router.post(
    "/{initiative_id}/milestones",
    response_model=DataResponse[MilestoneOut],
    status_code=status.HTTP_201_CREATED,
)
async def add_milestone(
    initiative_id: str,
    body: MilestoneCreate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    milestone = await _svc(session, current).add_milestone(initiative_id, body)
    return {"data": MilestoneOut.model_validate(milestone)}


@router.put("/{initiative_id}/milestones/{milestone_id}", response_model=DataResponse[MilestoneOut])
async def update_milestone(
    initiative_id: str,
    milestone_id: str,
    body: MilestoneUpdate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    milestone = await _svc(session, current).update_milestone(initiative_id, milestone_id, body)
    return {"data": MilestoneOut.model_validate(milestone)}
