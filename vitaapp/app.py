from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from vitaapp.core.config import Settings, get_settings
from vitaapp.core.log import configure_logging
from vitaapp.domain.resources import (
    DEADLINES,
    EVENTS,
    EXPENSES,
    PROPERTIES,
    RESOURCES,
    VEHICLES,
)
from vitaapp.repositories.json_storage import JsonFileStore
from vitaapp.routers import dashboard as dashboard_router
from vitaapp.routers import profile as profile_router
from vitaapp.routers.resources import build_router
from vitaapp.services.dashboard_service import DashboardService
from vitaapp.services.resource_service import ProfileService, ResourceService

logger = logging.getLogger(__name__)

API_PREFIX = "/api"
ROUTE_NOT_FOUND = "Endpoint non trovato"
INVALID_BODY = "Corpo della richiesta non valido"


def build_stores(settings: Settings) -> dict[str, JsonFileStore]:
    """One store per resource file, keyed by resource key, plus the profile."""
    stores = {spec.key: JsonFileStore(settings.data_dir / spec.filename) for spec in RESOURCES}
    stores["profile"] = JsonFileStore(settings.profile_path)
    return stores


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in (404, 405):
        return JSONResponse({"error": ROUTE_NOT_FOUND}, status_code=404)
    return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code, headers=exc.headers)


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse({"error": INVALID_BODY}, status_code=400)


def create_app(settings: Settings | None = None, dashboard_service: DashboardService | None = None) -> FastAPI:
    """Factory compatible with uvicorn (``--factory``) and the test suite."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="VitaApp API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)

    stores = build_stores(settings)
    app.state.settings = settings
    app.state.resources = {spec.key: ResourceService(spec, stores[spec.key]) for spec in RESOURCES}
    app.state.profile_service = ProfileService(stores["profile"])
    app.state.dashboard_service = dashboard_service or DashboardService(
        deadlines=stores[DEADLINES.key],
        events=stores[EVENTS.key],
        expenses=stores[EXPENSES.key],
        properties=stores[PROPERTIES.key],
        vehicles=stores[VEHICLES.key],
    )

    for spec in RESOURCES:
        app.include_router(build_router(spec), prefix=API_PREFIX)
    app.include_router(profile_router.router, prefix=API_PREFIX)
    app.include_router(dashboard_router.router, prefix=API_PREFIX)

    logger.debug("Dati letti dalla cartella: %s", settings.data_dir)
    return app


def describe_routes(app: FastAPI) -> list[str]:
    """Human-readable ``METHODS /path`` lines for the startup banner."""
    lines = []
    for route in app.routes:
        path = getattr(route, "path", "")
        methods = sorted(getattr(route, "methods", None) or ())
        if not path.startswith(API_PREFIX) or not methods:
            continue
        lines.append(f"{'/'.join(methods)} {path}")
    return lines
