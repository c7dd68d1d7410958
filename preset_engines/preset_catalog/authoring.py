"""Write path for preset records (create, replace, delete)."""
from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import Request

from preset_engines.preset_catalog.models import PresetPayload
from preset_engines.preset_catalog.repository import PresetRepository
from preset_engines.preset_catalog.service import PresetCatalogError, PresetNotFound

logger = logging.getLogger(__name__)


class PresetAlreadyExists(PresetCatalogError):
    """Raised when creating a preset whose slug is already taken."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Preset '{name}' already exists")


class PresetAuthoringService:
    """Writes records keyed by slugify(name). Names sharing a slug share a file."""

    def __init__(self, repository: PresetRepository) -> None:
        self._repo = repository

    def create_preset(self, payload: PresetPayload) -> Dict[str, Any]:
        path = self._repo.path_for(payload.name)
        if self._repo.exists(path):
            raise PresetAlreadyExists(payload.name)
        record = payload.to_record()
        self._repo.write(path, record)
        logger.info(f"Created preset {payload.name!r} at {path.name}")
        return record

    def replace_preset(self, name_or_slug: str, payload: PresetPayload) -> Dict[str, Any]:
        current = self._repo.path_for(name_or_slug)
        if not self._repo.exists(current):
            raise PresetNotFound(name_or_slug)
        target = self._repo.path_for(payload.name)
        record = payload.to_record()
        self._repo.write(target, record)
        if target != current:
            # Renamed: the old slug file would otherwise list as a duplicate.
            self._repo.delete(current)
            logger.info(f"Renamed preset {current.name} -> {target.name}")
        return record

    def delete_preset(self, name_or_slug: str) -> None:
        path = self._repo.path_for(name_or_slug)
        if not self._repo.delete(path):
            raise PresetNotFound(name_or_slug)
        logger.info(f"Deleted preset {path.name}")


def get_preset_authoring_service(request: Request) -> PresetAuthoringService:
    return request.app.state.preset_authoring
