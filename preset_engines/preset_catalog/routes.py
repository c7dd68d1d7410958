"""FastAPI routes for the preset catalog."""
from __future__ import annotations

from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Query

from preset_engines.common.error_envelope import error_response
from preset_engines.preset_catalog.authoring import (
    PresetAlreadyExists,
    PresetAuthoringService,
    get_preset_authoring_service,
)
from preset_engines.preset_catalog.models import PresetFilters, PresetPayload
from preset_engines.preset_catalog.service import (
    PresetCatalogService,
    PresetNotFound,
    get_preset_catalog_service,
)

router = APIRouter(prefix="/api/presets", tags=["presets"])


@router.get("")
def list_presets(
    q: Optional[str] = None,
    preset_type: Optional[str] = Query(None, alias="type"),
    factory: Optional[str] = None,
    service: PresetCatalogService = Depends(get_preset_catalog_service),
) -> List[Any]:
    """List presets in storage order, e.g. /api/presets?q=Basic&type=Drumkit&factory=true"""
    filters = PresetFilters(q=q, type=preset_type, factory=factory)
    return service.list_presets(filters)


@router.get("/{name:path}")
def get_preset(
    name: str,
    service: PresetCatalogService = Depends(get_preset_catalog_service),
) -> Any:
    try:
        return service.get_by_name(name)
    except PresetNotFound as exc:
        error_response(str(exc), status_code=404)


@router.post("", status_code=201)
def create_preset(
    payload: PresetPayload,
    service: PresetAuthoringService = Depends(get_preset_authoring_service),
) -> Any:
    try:
        return service.create_preset(payload)
    except PresetAlreadyExists as exc:
        error_response(str(exc), status_code=409)


@router.put("/{name:path}")
def replace_preset(
    name: str,
    payload: PresetPayload,
    service: PresetAuthoringService = Depends(get_preset_authoring_service),
) -> Any:
    try:
        return service.replace_preset(name, payload)
    except PresetNotFound as exc:
        error_response(str(exc), status_code=404)


@router.delete("/{name:path}")
def delete_preset(
    name: str,
    service: PresetAuthoringService = Depends(get_preset_authoring_service),
):
    try:
        service.delete_preset(name)
    except PresetNotFound as exc:
        error_response(str(exc), status_code=404)
    return {"status": "deleted"}
