"""Audit logging middleware — records every state-changing request to audit_trail."""


import asyncio
import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.db.base import async_session_factory
from app.domain.audit import ACTIONS, AuditTrail

logger = logging.getLogger(__name__)

# Methods that mutate state
_WRITE_METHODS = frozenset(ACTIONS)

# Background audit writes still in flight; keeps them referenced until done
_pending: set[asyncio.Task] = set()


def _entity_from_path(path: str) -> tuple[str, str | None]:
    """``/api/v1/waste-points/<uuid>/...`` → ``("waste-point", "<uuid>")``."""
    parts = [p for p in path.strip("/").split("/") if p]
    if parts[:2] == ["api", "v1"]:
        parts = parts[2:]
    if not parts:
        return "unknown", None
    entity_id = parts[1] if len(parts) >= 2 and len(parts[1]) == 36 else None
    return parts[0].rstrip("s"), entity_id  # simple singularize


class AuditMiddleware(BaseHTTPMiddleware):
    """Logs all write operations.

    Each audit row is written asynchronously AFTER the response is sent so it
    never adds latency to the request. Failures in audit logging are logged and
    never raised to the caller. Who made the request is read from
    ``request.state`` (set by the auth dependency).
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = round((time.monotonic() - start) * 1000)

        if request.method in _WRITE_METHODS:
            # Fire-and-forget: don't await here so the response is not delayed
            task = asyncio.create_task(
                self._record(request, response.status_code, duration_ms)
            )
            _pending.add(task)
            task.add_done_callback(_pending.discard)

        return response

    async def _record(
        self, request: Request, status_code: int, duration_ms: int
    ) -> None:
        """Persist an audit row."""
        try:
            entity_type, entity_id = _entity_from_path(request.url.path)
            async with async_session_factory() as session:
                session.add(
                    AuditTrail(
                        organization_id=getattr(request.state, "organization_id", None),
                        user_id=getattr(request.state, "user_id", None),
                        ip_address=request.client.host if request.client else None,
                        user_agent=(request.headers.get("user-agent") or "")[:512] or None,
                        action=ACTIONS[request.method],
                        entity_type=entity_type,
                        entity_id=entity_id,
                        method=request.method,
                        path=request.url.path[:500],
                        status_code=status_code,
                        duration_ms=duration_ms,
                    )
                )
                await session.commit()
        except Exception:  # pragma: no cover
            logger.exception("Failed to write audit row for %s %s", request.method, request.url.path)
