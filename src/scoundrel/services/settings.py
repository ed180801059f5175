from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator

from scoundrel.engine.types import RANKING_SYSTEMS, THEMES, RankingSystem, Theme


class SettingsError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise SettingsError(f"Missing file: {path}") from e
    except json.JSONDecodeError as e:
        raise SettingsError(f"Invalid JSON in {path}: {e}") from e


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: list(e.path))
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise SettingsError("\n".join(lines))


@dataclass
class Settings:
    theme: Theme = "dark"
    ranking_system: RankingSystem = "standard"

    @staticmethod
    def from_dict(d: Mapping[str, object]) -> "Settings":
        theme = d.get("theme", "dark")
        system = d.get("ranking_system", "standard")
        return Settings(
            theme=theme if theme in THEMES else "dark",  # type: ignore[arg-type]
            ranking_system=system if system in RANKING_SYSTEMS else "standard",  # type: ignore[arg-type]
        )

    def to_dict(self) -> dict[str, object]:
        return {"theme": self.theme, "ranking_system": self.ranking_system}


class SettingsService:
    """Player preferences: loaded once at start, written on every change.

    A corrupt or invalid settings file falls back to defaults; the problem
    is kept in `load_error` so the caller can report it.
    """

    def __init__(self, path: Path, schema_path: Path) -> None:
        self._path = path
        self._schema = _load_json(schema_path)
        self.load_error: str | None = None
        self.settings = self._load_or_create()

    def _load_or_create(self) -> Settings:
        if not self._path.exists():
            settings = Settings()
            self._write(settings)
            return settings
        try:
            raw = _load_json(self._path)
            validate_json(raw, self._schema, context=str(self._path))
        except SettingsError as e:
            self.load_error = str(e)
            return Settings()
        assert isinstance(raw, dict)
        return Settings.from_dict(raw)

    def _write(self, settings: Settings) -> None:
        data = settings.to_dict()
        validate_json(data, self._schema, context="settings")
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def save(self) -> None:
        self._write(self.settings)

    def set_theme(self, theme: str) -> None:
        if theme not in THEMES:
            raise SettingsError(f"Unknown theme: {theme!r}")
        self.settings.theme = theme  # type: ignore[assignment]
        self.save()

    def set_ranking_system(self, system: str) -> None:
        if system not in RANKING_SYSTEMS:
            raise SettingsError(f"Unknown ranking system: {system!r}")
        self.settings.ranking_system = system  # type: ignore[assignment]
        self.save()
