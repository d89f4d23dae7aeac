from __future__ import annotations

from fastapi import APIRouter, Request

from vitaapp.routers.resources import error_response
from vitaapp.services.dashboard_service import DashboardService
from vitaapp.services.resource_service import VitaError

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def _get_dashboard_service(request: Request) -> DashboardService:
    svc = getattr(getattr(request.app, "state", None), "dashboard_service", None)
    if not svc:
        raise RuntimeError("DashboardService non configurato")
    return svc


@router.get("")
def dashboard_summary(request: Request):
    try:
        return _get_dashboard_service(request).summary()
    except VitaError as exc:
        return error_response(exc)
