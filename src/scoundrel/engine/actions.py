from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectSlotAction:
    slot: int


@dataclass(frozen=True)
class FleeAction:
    pass


@dataclass(frozen=True)
class ToggleBareHandsAction:
    pass


Action = SelectSlotAction | FleeAction | ToggleBareHandsAction
