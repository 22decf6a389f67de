from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from netadmin.core.responses import internal_error, invalid_input, not_found
from netadmin.domain.errors import (
    MalformedInputError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from netadmin.domain.vlans import VLAN, parse_vlan_id
from netadmin.services.vlan_service import VLANService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/vlans", tags=["vlans"])


def _get_vlan_service(request: Request) -> VLANService:
    svc = getattr(getattr(request.app, "state", None), "vlan_service", None)
    if not svc:
        raise RuntimeError("VLANService not configured")
    return svc


@router.get("")
def list_vlans(request: Request):
    svc = _get_vlan_service(request)
    return JSONResponse([vlan.to_json_dict() for vlan in svc.list_vlans()])


@router.post("", status_code=201)
def create_vlan(vlan: VLAN, request: Request):
    svc = _get_vlan_service(request)
    try:
        created = svc.create_vlan(vlan)
    except ValidationError as exc:
        return invalid_input(str(exc))
    except PersistenceError:
        logger.exception("failed to save vlan")
        return internal_error("failed to save vlan")
    return Response(status_code=201, headers={"Location": f"{request.url.path}/{created.id}"})


@router.get("/{vlan_id}")
def read_vlan(vlan_id: str, request: Request):
    try:
        parsed_id = parse_vlan_id(vlan_id)
    except MalformedInputError as exc:
        return invalid_input(str(exc))
    svc = _get_vlan_service(request)
    vlan = svc.get_vlan(parsed_id)
    if vlan is None:
        return not_found(f"VLAN {parsed_id} not found")
    return JSONResponse(vlan.to_json_dict())


@router.put("/{vlan_id}")
def update_vlan(vlan_id: str, vlan: VLAN, request: Request):
    try:
        parsed_id = parse_vlan_id(vlan_id)
    except MalformedInputError as exc:
        return invalid_input(str(exc))
    svc = _get_vlan_service(request)
    try:
        svc.update_vlan(parsed_id, vlan)
    except ValidationError as exc:
        return invalid_input(str(exc))
    except NotFoundError as exc:
        return not_found(str(exc))
    except PersistenceError:
        logger.exception("failed to update vlan %s", parsed_id)
        return internal_error("failed to update vlan")
    return Response(status_code=200)


@router.delete("/{vlan_id}")
def delete_vlan(vlan_id: str, request: Request):
    try:
        parsed_id = parse_vlan_id(vlan_id)
    except MalformedInputError as exc:
        return invalid_input(str(exc))
    svc = _get_vlan_service(request)
    try:
        svc.delete_vlan(parsed_id)
    except NotFoundError as exc:
        return not_found(str(exc))
    except PersistenceError:
        logger.exception("failed to delete vlan %s", parsed_id)
        return internal_error("failed to delete vlan")
    return Response(status_code=200)
