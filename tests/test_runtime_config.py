from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from preset_engines.config.runtime_config import CatalogConfig


def test_defaults_resolve_under_cwd(monkeypatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    config = CatalogConfig.from_env({})
    assert config.public_dir == tmp_path / "public"
    assert config.data_dir == tmp_path / "public" / "presets"
    assert (config.host, config.port, config.log_level) == ("127.0.0.1", 3000, "INFO")


def test_data_dir_follows_public_dir_unless_set(tmp_path: Path):
    config = CatalogConfig.from_env({"PUBLIC_DIR": str(tmp_path / "site")})
    assert config.data_dir == tmp_path / "site" / "presets"

    config = CatalogConfig.from_env({"PUBLIC_DIR": str(tmp_path / "site"), "DATA_DIR": str(tmp_path / "data")})
    assert config.public_dir == tmp_path / "site"
    assert config.data_dir == tmp_path / "data"


def test_server_settings_from_env():
    config = CatalogConfig.from_env({"HOST": "0.0.0.0", "PORT": "8080", "LOG_LEVEL": "debug"})
    assert (config.host, config.port, config.log_level) == ("0.0.0.0", 8080, "DEBUG")


def test_invalid_port_fails_fast():
    with pytest.raises(ValueError, match="PORT"):
        CatalogConfig.from_env({"PORT": "eighty"})


def test_config_is_immutable(tmp_path: Path):
    config = CatalogConfig(public_dir=tmp_path, data_dir=tmp_path / "presets")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.data_dir = tmp_path  # type: ignore[misc]


@pytest.mark.parametrize("raw", ["verbose", "WARN", "trace"])
def test_unknown_log_level_fails_fast(raw: str):
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        CatalogConfig.from_env({"LOG_LEVEL": raw})


def test_log_level_accepts_any_case():
    assert CatalogConfig.from_env({"LOG_LEVEL": "warning"}).log_level == "WARNING"
