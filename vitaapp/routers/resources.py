from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from vitaapp.domain.resources import ResourceSpec
from vitaapp.services.resource_service import ResourceService, VitaError


def _get_service(request: Request, key: str) -> ResourceService:
    services = getattr(getattr(request.app, "state", None), "resources", None)
    if not services or key not in services:
        raise RuntimeError(f"ResourceService {key} non configurato")
    return services[key]


def error_response(err: VitaError) -> JSONResponse:
    return JSONResponse({"error": err.message}, status_code=err.status_code)


def build_router(spec: ResourceSpec) -> APIRouter:
    """One router per resource, exposing only the verbs the resource allows."""
    router = APIRouter(prefix=f"/{spec.route}", tags=[spec.key])

    if spec.allows("GET"):
        @router.get("")
        def list_records(request: Request):
            return _get_service(request, spec.key).list()

    if spec.allows("POST"):
        @router.post("", status_code=201)
        def create_record(request: Request, payload: Optional[dict] = Body(None)):
            svc = _get_service(request, spec.key)
            try:
                return svc.create(payload or {})
            except VitaError as exc:
                return error_response(exc)

    if spec.allows("PUT"):
        @router.put("/{record_id}")
        def update_record(record_id: str, request: Request, payload: Optional[dict] = Body(None)):
            svc = _get_service(request, spec.key)
            try:
                return svc.update(record_id, payload or {})
            except VitaError as exc:
                return error_response(exc)

    if spec.allows("DELETE"):
        @router.delete("/{record_id}")
        def delete_record(record_id: str, request: Request):
            svc = _get_service(request, spec.key)
            try:
                return svc.delete(record_id)
            except VitaError as exc:
                return error_response(exc)

    return router
