from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping, Sequence


@dataclass
class TelemetryService:
    """Append-only JSON-lines log of client and engine events."""

    path: Path

    def log(self, event_type: str, payload: Mapping[str, object]) -> None:
        self.log_many(event_type, [payload])

    def log_many(self, event_type: str, payloads: Sequence[Mapping[str, object]]) -> None:
        if not payloads:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        ts = datetime.now(tz=timezone.utc).isoformat()
        with self.path.open("a", encoding="utf-8") as f:
            for payload in payloads:
                rec = {"ts": ts, "type": event_type, "payload": dict(payload)}
                f.write(json.dumps(rec, ensure_ascii=False) + "\n")

    def read(self) -> list[dict[str, object]]:
        if not self.path.exists():
            return []
        out: list[dict[str, object]] = []
        for line in self.path.read_text(encoding="utf-8").splitlines():
            if line.strip():
                out.append(json.loads(line))
        return out
