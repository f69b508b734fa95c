"""Goal router."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import CurrentUser, get_current_user
from app.core.pagination import PaginationParams
from app.core.response import DataResponse, ListResponse, paginated
from app.db.base import get_db
from app.schemas.goal import GoalCreate, GoalOut, GoalUpdate
from app.services.goal import GoalService

router = APIRouter(prefix="/goals", tags=["Goals"])


def _svc(session: AsyncSession, current: CurrentUser) -> GoalService:
    return GoalService(session, current.organization_id)


@router.get("", response_model=ListResponse[GoalOut])
async def list_goals(
    filter_status: Optional[str] = Query(default=None, alias="status"),
    pagination: PaginationParams = Depends(),
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    items, total = await _svc(session, current).list_goals(pagination, status=filter_status)
    return paginated(
        [GoalOut.model_validate(g) for g in items],
        total, pagination.page, pagination.limit,
    )


@router.post("", response_model=DataResponse[GoalOut], status_code=status.HTTP_201_CREATED)
async def create_goal(
    body: GoalCreate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    goal = await _svc(session, current).create_goal(body, user_id=current.id)
    return {"data": GoalOut.model_validate(goal)}


@router.get("/{goal_id}", response_model=DataResponse[GoalOut])
async def get_goal(
    goal_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    goal = await _svc(session, current).get_goal(goal_id)
    return {"data": GoalOut.model_validate(goal)}


@router.put("/{goal_id}", response_model=DataResponse[GoalOut])
async def update_goal(
    goal_id: str,
    body: GoalUpdate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    goal = await _svc(session, current).update_goal(goal_id, body)
    return {"data": GoalOut.model_validate(goal)}


@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_goal(
    goal_id: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    await _svc(session, current).delete_goal(goal_id)
