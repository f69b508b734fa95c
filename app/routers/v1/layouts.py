"""Layout router — per-user dashboard slots and the simple/advanced app mode.

  GET    /layouts/app-mode                read the mode
  PUT    /layouts/app-mode                set the mode
  POST   /layouts/app-mode/toggle         flip simple <-> advanced
  GET    /layouts/{slot}                  visible + available modules
  PUT    /layouts/{slot}                  replace the visible list
  POST   /layouts/{slot}/toggle           show/hide one module
  POST   /layouts/{slot}/reset            back to the default
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import CurrentUser, get_current_user
from app.core.response import DataResponse
from app.db.base import get_db
from app.schemas.layout import (
    AppMode,
    LayoutOut,
    ModeOut,
    ModeUpdate,
    ModuleToggle,
    VisibleModulesUpdate,
)
from app.services.layout import LayoutService

router = APIRouter(prefix="/layouts", tags=["Layouts"])


def _svc(session: AsyncSession, current: CurrentUser) -> LayoutService:
    return LayoutService(session, current.organization_id, current.id)


# ------------------------------------------------------------------
# App mode (declared first so "app-mode" is not taken for a slot name)
# ------------------------------------------------------------------

@router.get("/app-mode", response_model=DataResponse[ModeOut])
async def get_mode(
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    return {"data": ModeOut(mode=await _svc(session, current).get_mode())}


@router.put("/app-mode", response_model=DataResponse[ModeOut])
async def set_mode(
    body: ModeUpdate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    return {"data": ModeOut(mode=await _svc(session, current).set_mode(body.mode))}


@router.post("/app-mode/toggle", response_model=DataResponse[ModeOut])
async def toggle_mode(
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    return {"data": ModeOut(mode=await _svc(session, current).toggle_mode())}


# ------------------------------------------------------------------
# Module slots
# ------------------------------------------------------------------

@router.get("/{slot}", response_model=DataResponse[LayoutOut])
async def get_layout(
    slot: str,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    return {"data": LayoutOut.model_validate(await _svc(session, current).get_layout(slot))}


@router.put("/{slot}", response_model=DataResponse[LayoutOut])
async def set_layout(
    slot: str,
    body: VisibleModulesUpdate,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    layout = await _svc(session, current).set_modules(slot, body.visible_modules)
    return {"data": LayoutOut.model_validate(layout)}


@router.post("/{slot}/toggle", response_model=DataResponse[LayoutOut])
async def toggle_module(
    slot: str,
    body: ModuleToggle,
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    layout = await _svc(session, current).toggle_module(slot, body.module)
    return {"data": LayoutOut.model_validate(layout)}


@router.post("/{slot}/reset", response_model=DataResponse[LayoutOut])
async def reset_layout(
    slot: str,
    mode: Optional[AppMode] = Query(default=None, description="navigation-modules only"),
    current: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    layout = await _svc(session, current).reset(slot, mode)
    return {"data": LayoutOut.model_validate(layout)}
