"""Tests for environment-driven settings."""
from __future__ import annotations

from pathlib import Path

import pytest

from ..util.schema import DEFAULT_SCHEMA_DIR
from ..util.settings import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("HOST", "PORT", "LOG_LEVEL", "SCHEMA_DIR", "EXPOSE_SCHEMAS"):
        monkeypatch.delenv(f"SCHEMAROUTE_{name}", raising=False)
    settings = Settings.from_env()
    assert settings.port == 8001
    assert settings.host == "0.0.0.0"
    assert settings.schema_dir == DEFAULT_SCHEMA_DIR
    assert settings.expose_schemas is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("SCHEMAROUTE_PORT", "9100")
    monkeypatch.setenv("SCHEMAROUTE_LOG_LEVEL", "debug")
    monkeypatch.setenv("SCHEMAROUTE_SCHEMA_DIR", str(tmp_path))
    monkeypatch.setenv("SCHEMAROUTE_EXPOSE_SCHEMAS", "off")
    settings = Settings.from_env()
    assert settings.port == 9100
    assert settings.log_level == "DEBUG"
    assert settings.schema_dir == tmp_path
    assert settings.expose_schemas is False
