from __future__ import annotations

import json
from pathlib import Path

import pytest

from scoundrel.paths import get_paths
from scoundrel.services.settings import SettingsError, SettingsService
from scoundrel.services.telemetry import TelemetryService


def _service(path: Path) -> SettingsService:
    return SettingsService(path, get_paths().settings_schema)


def test_missing_file_writes_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    svc = _service(path)
    assert svc.settings.theme == "dark"
    assert svc.settings.ranking_system == "standard"
    assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "dark", "ranking_system": "standard"}


def test_changes_persist_across_loads(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    svc = _service(path)
    svc.set_theme("light")
    svc.set_ranking_system("alternate")

    again = _service(path)
    assert again.settings.theme == "light"
    assert again.settings.ranking_system == "alternate"
    assert again.load_error is None


def test_invalid_values_rejected(tmp_path: Path) -> None:
    svc = _service(tmp_path / "settings.json")
    with pytest.raises(SettingsError):
        svc.set_theme("sepia")
    with pytest.raises(SettingsError):
        svc.set_ranking_system("roman")
    assert svc.settings.theme == "dark"


def test_corrupt_file_falls_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    svc = _service(path)
    assert svc.settings.theme == "dark"
    assert svc.load_error is not None and "Invalid JSON" in svc.load_error


def test_schema_invalid_file_falls_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"theme": "neon", "ranking_system": "alternate"}), encoding="utf-8")
    svc = _service(path)
    assert svc.settings.theme == "dark"
    assert svc.settings.ranking_system == "standard"
    assert svc.load_error is not None


def test_telemetry_appends_json_lines(tmp_path: Path) -> None:
    telemetry = TelemetryService(tmp_path / "logs" / "telemetry.jsonl")
    telemetry.log("boot", {"ok": True})
    telemetry.log_many("events", [{"type": "ROOM_DRAWN"}, {"type": "FLED"}])
    telemetry.log_many("events", [])

    records = telemetry.read()
    assert [r["type"] for r in records] == ["boot", "events", "events"]
    assert records[2]["payload"] == {"type": "FLED"}
    assert all("ts" in r for r in records)
