"""Device ingestion router — devices push readings with their own credentials.

Authenticated by ``X-Device-Id`` (the access code) and ``X-Device-Token``
headers rather than a user session.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Header, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.response import DataResponse
from app.db.base import get_db
from app.schemas.device import ReadingCreate, ReadingOut
from app.services.device import IngestionService

router = APIRouter(prefix="/ingest", tags=["Ingestion"])


@router.post("/readings", response_model=DataResponse[ReadingOut], status_code=status.HTTP_201_CREATED)
async def ingest_reading(
    body: ReadingCreate,
    request: Request,
    x_device_id: Optional[str] = Header(default=None),
    x_device_token: Optional[str] = Header(default=None),
    session: AsyncSession = Depends(get_db),
):
    reading = await IngestionService(session).ingest(x_device_id, x_device_token, body)
    request.state.organization_id = reading.organization_id
    return {"data": ReadingOut.model_validate(reading)}
