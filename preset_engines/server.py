"""FastAPI application for the preset catalog server."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from preset_engines.common.error_envelope import register_error_handlers
from preset_engines.common.health import router as health_router
from preset_engines.config.runtime_config import CatalogConfig, get_catalog_config
from preset_engines.preset_catalog.authoring import PresetAuthoringService
from preset_engines.preset_catalog.repository import FileSystemPresetRepository
from preset_engines.preset_catalog.routes import router as presets_router
from preset_engines.preset_catalog.service import PresetCatalogService

logger = logging.getLogger(__name__)


def create_app(config: Optional[CatalogConfig] = None) -> FastAPI:
    config = config or get_catalog_config()
    app = FastAPI(title="Preset Catalog", version="0.1.0")
    register_error_handlers(app)

    repository = FileSystemPresetRepository(config.data_dir)
    repository.ensure_data_dir()
    app.state.preset_catalog = PresetCatalogService(repository)
    app.state.preset_authoring = PresetAuthoringService(repository)

    app.include_router(health_router)
    app.include_router(presets_router)

    # Mounted last so API routes take precedence over files under public_dir.
    if config.public_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(config.public_dir), html=True), name="public")
    else:
        logger.warning(f"Public directory {config.public_dir} not found; static files disabled")

    logger.info(f"Serving presets from {config.data_dir}")
    return app


def start() -> None:
    import uvicorn

    config = get_catalog_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(config)
    logger.info(f"Preset server launching at http://{config.host}:{config.port}")
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    start()
