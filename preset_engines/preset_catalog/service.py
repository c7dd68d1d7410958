"""Service layer for the preset catalog (read-only queries)."""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from fastapi import Request

from preset_engines.preset_catalog.models import PresetFilters
from preset_engines.preset_catalog.repository import PresetRepository

logger = logging.getLogger(__name__)


class PresetCatalogError(Exception):
    """Base preset catalog error."""


class PresetNotFound(PresetCatalogError):
    """Raised when no record file exists for the requested name or slug."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Preset '{name}' not found")


def _field_text(record: Any, key: str) -> str:
    # Missing or falsy fields match as "", non-string values by their str().
    value = record.get(key) if isinstance(record, dict) else None
    if not value:
        return ""
    return value if isinstance(value, str) else str(value)


def _contains(record: Any, key: str, needle: str) -> bool:
    return needle.lower() in _field_text(record, key).lower()


def _is_factory(record: Any) -> bool:
    return isinstance(record, dict) and record.get("factory") is True


def apply_filters(records: Iterable[Any], filters: PresetFilters) -> List[Any]:
    """Stable AND-composition of the name, type and factory filters."""
    filtered = list(records)
    if filters.q:
        filtered = [r for r in filtered if _contains(r, "name", filters.q)]
    if filters.type:
        filtered = [r for r in filtered if _contains(r, "type", filters.type)]
    if filters.factory_only:
        filtered = [r for r in filtered if _is_factory(r)]
    return filtered


class PresetCatalogService:
    def __init__(self, repository: PresetRepository) -> None:
        self._repo = repository

    def load_all(self) -> List[Any]:
        """Read every record file, skipping (and logging) the ones that fail."""
        presets: List[Any] = []
        for filename in self._repo.list_files():
            try:
                presets.append(self._repo.read(self._repo.data_dir / filename))
            except Exception as exc:
                logger.warning(f"Could not read preset {filename}: {exc}")
        return presets

    def list_presets(self, filters: Optional[PresetFilters] = None) -> List[Any]:
        return apply_filters(self.load_all(), filters or PresetFilters())

    def get_by_name(self, name_or_slug: str) -> Any:
        path = self._repo.path_for(name_or_slug)
        if not self._repo.exists(path):
            raise PresetNotFound(name_or_slug)
        return self._repo.read(path)


def get_preset_catalog_service(request: Request) -> PresetCatalogService:
    return request.app.state.preset_catalog
