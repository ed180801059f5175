from __future__ import annotations

import json

import pytest

from scoundrel.paths import get_paths
from scoundrel.services.settings import SettingsError, validate_json


def _schema() -> object:
    return json.loads(get_paths().settings_schema.read_text(encoding="utf-8"))


def test_settings_schema_accepts_defaults() -> None:
    validate_json({"theme": "dark", "ranking_system": "standard"}, _schema(), context="defaults")
    validate_json({"theme": "light", "ranking_system": "alternate"}, _schema(), context="other")


def test_settings_schema_rejects_unknown_values() -> None:
    with pytest.raises(SettingsError) as exc:
        validate_json({"theme": "neon", "ranking_system": "standard"}, _schema(), context="bad")
    assert "theme" in str(exc.value)

    with pytest.raises(SettingsError):
        validate_json({"theme": "dark"}, _schema(), context="missing")
