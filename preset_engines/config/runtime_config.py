"""Runtime configuration for the preset server.

Resolved once at process start and passed explicitly to the repository,
service and app factory.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _get_env(environ: Mapping[str, str], name: str, default: Optional[str] = None) -> Optional[str]:
    value = environ.get(name)
    return value if value else default


@dataclass(frozen=True)
class CatalogConfig:
    public_dir: Path
    data_dir: Path
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CatalogConfig":
        """Build a config from environment variables.

        PUBLIC_DIR defaults to ./public and DATA_DIR to <PUBLIC_DIR>/presets.
        """
        env = os.environ if environ is None else environ
        public_dir = Path(_get_env(env, "PUBLIC_DIR") or Path.cwd() / "public")
        data_dir = Path(_get_env(env, "DATA_DIR") or public_dir / "presets")

        raw_port = _get_env(env, "PORT", str(DEFAULT_PORT))
        try:
            port = int(raw_port)
        except ValueError as exc:
            raise ValueError(f"PORT must be an integer, got {raw_port!r}") from exc

        log_level = _get_env(env, "LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

        return cls(
            public_dir=public_dir,
            data_dir=data_dir,
            host=_get_env(env, "HOST", DEFAULT_HOST),
            port=port,
            log_level=log_level,
        )


@lru_cache(maxsize=1)
def get_catalog_config() -> CatalogConfig:
    return CatalogConfig.from_env()
