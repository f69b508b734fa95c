"""Waste Dashboard API — FastAPI application factory."""


import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.middleware.audit import AuditMiddleware
from app.schemas.common import HealthResponse

# v1 routers
from app.routers.v1.alerts import router as alerts_router
from app.routers.v1.api_tokens import router as api_tokens_router
from app.routers.v1.auth import router as auth_router
from app.routers.v1.data_models import router as data_models_router
from app.routers.v1.devices import router as devices_router
from app.routers.v1.goals import router as goals_router
from app.routers.v1.images import router as images_router
from app.routers.v1.ingest import router as ingest_router
from app.routers.v1.initiatives import router as initiatives_router
from app.routers.v1.insights import router as insights_router
from app.routers.v1.layouts import router as layouts_router
from app.routers.v1.metrics import router as metrics_router
from app.routers.v1.organization import router as organization_router
from app.routers.v1.schedules import router as schedules_router
from app.routers.v1.sensors import router as sensors_router
from app.routers.v1.vendors import router as vendors_router
from app.routers.v1.waste_points import router as waste_points_router

_V1_ROUTERS = (
    auth_router,
    organization_router,
    api_tokens_router,
    devices_router,
    sensors_router,
    images_router,
    ingest_router,
    waste_points_router,
    schedules_router,
    initiatives_router,
    goals_router,
    vendors_router,
    data_models_router,
    alerts_router,
    metrics_router,
    layouts_router,
    insights_router,
)


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.app_env == "development" else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)


def create_app() -> FastAPI:
    _configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url="/docs" if settings.app_env == "development" else None,
        redoc_url="/redoc" if settings.app_env == "development" else None,
    )

    # --- CORS (the dashboard sends the session cookie) ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Audit middleware ---
    if settings.audit_enabled:
        app.add_middleware(AuditMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- v1 API routes (/api/v1/*) ---
    for router in _V1_ROUTERS:
        app.include_router(router, prefix="/api/v1")

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env)

    return app


app = create_app()
