from __future__ import annotations

import random
from typing import Callable, Sequence

from .actions import Action, FleeAction, SelectSlotAction, ToggleBareHandsAction
from .dungeon import (
    DungeonConfig,
    DungeonState,
    Event,
    StepResult,
    new_dungeon,
    preview_health,
    preview_health_delta,
    step,
)
from .serialize import graveyard_groups, snapshot
from .types import RANKING_SYSTEMS, Card, GameStatus, RankingSystem, Suit

EventListener = Callable[[str, Sequence[Event]], None]


class GameSession:
    """Owns the single running dungeon and the active ranking system.

    Pure orchestration: every rule lives in the engine, this class only routes
    intents and exposes read-only views to the presentation layer.
    """

    def __init__(
        self,
        ranking_system: RankingSystem = "standard",
        config: DungeonConfig | None = None,
        seed: int | None = None,
        on_events: EventListener | None = None,
    ) -> None:
        self._check_system(ranking_system)
        self._ranking_system: RankingSystem = ranking_system
        self._config = config or DungeonConfig()
        self._on_events = on_events
        self.state: DungeonState = self._start(seed)

    @staticmethod
    def _check_system(system: str) -> None:
        if system not in RANKING_SYSTEMS:
            raise ValueError(f"Unknown ranking system: {system!r}")

    def _start(self, seed: int | None, deck: Sequence[Card] | None = None) -> DungeonState:
        if seed is None:
            seed = random.randrange(1, 2**31 - 1)
        state = new_dungeon(seed, config=self._config, deck=deck)
        self._emit("session_started", [{"seed": seed, "ranking_system": self._ranking_system}])
        self._emit("events", state.event_log)
        return state

    def _emit(self, kind: str, events: Sequence[Event]) -> None:
        if self._on_events is not None and events:
            self._on_events(kind, events)

    # -------- Lifecycle --------
    def new_session(self, seed: int | None = None, deck: Sequence[Card] | None = None) -> None:
        self.state = self._start(seed, deck)

    def set_ranking_system(self, system: RankingSystem) -> None:
        # Switching label systems mid-run is not allowed: always a new quest.
        self._check_system(system)
        self._ranking_system = system
        self.new_session()

    # -------- Intents --------
    def handle_intent(self, action: Action) -> StepResult:
        result = step(self.state, action)
        if result.ok:
            self._emit("events", result.events)
        return result

    def select_room_slot(self, index: int) -> StepResult:
        return self.handle_intent(SelectSlotAction(slot=index))

    def flee(self) -> StepResult:
        return self.handle_intent(FleeAction())

    def toggle_bare_hands(self) -> StepResult:
        return self.handle_intent(ToggleBareHandsAction())

    # -------- Views --------
    @property
    def ranking_system(self) -> RankingSystem:
        return self._ranking_system

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def health(self) -> int:
        return self.state.health

    @property
    def seed(self) -> int:
        return self.state.seed

    def snapshot(self) -> dict[str, object]:
        return snapshot(self.state, self._ranking_system)

    def preview(self, slot: int) -> int:
        return preview_health_delta(self.state, slot)

    def preview_health(self, slot: int) -> int:
        return preview_health(self.state, slot)

    def graveyard(self) -> dict[Suit, list[Card]]:
        return graveyard_groups(self.state.discard)
