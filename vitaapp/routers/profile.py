from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request

from vitaapp.domain.resources import PROFILE_ROUTE
from vitaapp.routers.resources import error_response
from vitaapp.services.resource_service import ProfileService, VitaError

router = APIRouter(prefix=f"/{PROFILE_ROUTE}", tags=["profile"])


def _get_profile_service(request: Request) -> ProfileService:
    svc = getattr(getattr(request.app, "state", None), "profile_service", None)
    if not svc:
        raise RuntimeError("ProfileService non configurato")
    return svc


@router.get("")
def get_profile(request: Request):
    return _get_profile_service(request).get()


@router.put("")
def update_profile(request: Request, payload: Optional[dict] = Body(None)):
    svc = _get_profile_service(request)
    try:
        return svc.update(payload or {})
    except VitaError as exc:
        return error_response(exc)
