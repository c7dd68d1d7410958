"""Filesystem-backed preset record store.

One JSON file per preset:
  {data_dir}/{slugify(name)}.json
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, List, Protocol

from preset_engines.common.slug import slugify

logger = logging.getLogger(__name__)

RECORD_SUFFIX = ".json"


class PresetStoreError(Exception):
    """Base error for record store failures."""


class PresetReadError(PresetStoreError):
    """Raised when a record file cannot be read."""


class PresetParseError(PresetStoreError):
    """Raised when a record file is not well-formed JSON."""


class PresetWriteError(PresetStoreError):
    """Raised when a record file cannot be written or removed."""


class PresetRepository(Protocol):
    data_dir: Path

    def path_for(self, name_or_slug: str) -> Path:
        ...

    def exists(self, path: Path) -> bool:
        ...

    def list_files(self) -> List[str]:
        ...

    def read(self, path: Path) -> Any:
        ...

    def write(self, path: Path, record: Any) -> None:
        ...

    def delete(self, path: Path) -> bool:
        ...


class FileSystemPresetRepository:
    """Preset store over a flat directory of JSON files."""

    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir)

    def ensure_data_dir(self) -> None:
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.warning(f"Could not create preset directory {self.data_dir}: {exc}")

    def path_for(self, name_or_slug: str) -> Path:
        return self.data_dir / f"{slugify(name_or_slug)}{RECORD_SUFFIX}"

    def exists(self, path: Path) -> bool:
        try:
            return path.is_file() and os.access(path, os.R_OK)
        except OSError:
            return False

    def list_files(self) -> List[str]:
        """Record file names in directory enumeration order (unsorted)."""
        logger.debug(f"Reading presets from {self.data_dir}")
        try:
            entries = os.listdir(self.data_dir)
        except OSError as exc:
            logger.warning(f"Could not list preset directory {self.data_dir}: {exc}")
            return []
        return [name for name in entries if name.endswith(RECORD_SUFFIX)]

    def read(self, path: Path) -> Any:
        try:
            raw = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise PresetParseError(f"{path.name} is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise PresetReadError(f"Could not read {path.name}: {exc}") from exc
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise PresetParseError(f"{path.name} is not valid JSON: {exc}") from exc

    def write(self, path: Path, record: Any) -> None:
        """Replace the file content with the record as 2-space indented JSON."""
        payload = json.dumps(record, indent=2, ensure_ascii=False)
        try:
            path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            logger.error(f"Failed to write preset {path}: {exc}")
            raise PresetWriteError(f"Could not write {path.name}: {exc}") from exc

    def delete(self, path: Path) -> bool:
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            logger.error(f"Failed to delete preset {path}: {exc}")
            raise PresetWriteError(f"Could not delete {path.name}: {exc}") from exc
        return True
