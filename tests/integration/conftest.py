"""Fixtures shared by the CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep CLI runs away from the real config file and ``PARCEL_*`` variables."""
    config_path = tmp_path / "isolated" / "config.toml"
    monkeypatch.setattr("parcel_client.config.manager.CONFIG_FILE", config_path)
    for var in ("PARCEL_API_URL", "PARCEL_API_TOKEN", "PARCEL_PROFILE"):
        monkeypatch.delenv(var, raising=False)
    return config_path
