import copy
import json
import os
import sys
from pathlib import Path

import pytest

# Ensure repo root on sys.path for imports from anywhere in tests tree.
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from preset_engines.config.runtime_config import CatalogConfig  # noqa: E402

_BASIC_KIT = {
    "name": "Basic Kit",
    "type": "Drumkit",
    "factory": True,
    "samples": [
        {"name": "Kick", "url": "808/kick.wav"},
        {"name": "Snare", "url": "808/snare.wav"},
    ],
}
_AMBIENT_PAD = {
    "name": "Ambient Pad",
    "type": "Synth",
    "samples": [{"name": "Pad C", "url": "pads/pad-c.wav"}],
}
_HIP_HOP_KIT = {
    "name": "Hip-Hop Kit",
    "type": "Drumkit",
    "factory": False,
    "samples": [],
}


def _write_record(data_dir: Path, filename: str, record) -> Path:
    path = data_dir / filename
    path.write_text(json.dumps(record, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def basic_kit() -> dict:
    return copy.deepcopy(_BASIC_KIT)


@pytest.fixture
def ambient_pad() -> dict:
    return copy.deepcopy(_AMBIENT_PAD)


@pytest.fixture
def hip_hop_kit() -> dict:
    return copy.deepcopy(_HIP_HOP_KIT)


@pytest.fixture
def write_record():
    """Write a record as JSON into a data directory and return its path."""
    return _write_record


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    public = tmp_path / "public"
    (public / "presets").mkdir(parents=True)
    (public / "index.html").write_text("<html><body>presets</body></html>", encoding="utf-8")
    return public


@pytest.fixture
def data_dir(public_dir: Path) -> Path:
    return public_dir / "presets"


@pytest.fixture
def catalog_config(public_dir: Path, data_dir: Path) -> CatalogConfig:
    return CatalogConfig(public_dir=public_dir, data_dir=data_dir)


@pytest.fixture
def seeded_data_dir(data_dir: Path, basic_kit, ambient_pad, hip_hop_kit) -> Path:
    _write_record(data_dir, "basic-kit.json", basic_kit)
    _write_record(data_dir, "ambient-pad.json", ambient_pad)
    _write_record(data_dir, "hip-hop-kit.json", hip_hop_kit)
    return data_dir


@pytest.fixture
def pin_listing(monkeypatch):
    """Fix the enumeration order os.listdir reports for one directory."""

    real_listdir = os.listdir

    def _pin(directory: Path, names):
        target = Path(directory).resolve()

        def fake_listdir(path="."):
            if isinstance(path, (str, os.PathLike)) and Path(path).resolve() == target:
                return list(names)
            return real_listdir(path)

        monkeypatch.setattr(os, "listdir", fake_listdir)

    return _pin
