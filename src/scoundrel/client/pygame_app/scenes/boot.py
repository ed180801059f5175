from __future__ import annotations

import traceback
from typing import Sequence

import pygame  # type: ignore[import-not-found]

from scoundrel.engine.dungeon import Event
from scoundrel.engine.session import GameSession
from scoundrel.services.settings import SettingsService

from ..app import GameContext
from ..scene_base import SceneTransition, go_to
from ..ui import Button, draw_text
from .dungeon import DungeonScene


class BootScene:
    def __init__(self, ctx: GameContext) -> None:
        self.ctx = ctx
        self._did_boot = False
        self._error: str | None = None
        self._quit_button: Button | None = None

    def handle_event(self, event: pygame.event.Event) -> None:
        if self._quit_button is not None:
            self._quit_button.handle_event(event)

    def _forward_events(self, kind: str, events: Sequence[Event]) -> None:
        self.ctx.telemetry.log_many(kind, events)

    def update(self, dt: float) -> SceneTransition | None:
        if self._did_boot:
            return None
        self._did_boot = True
        try:
            paths = self.ctx.paths
            paths.userdata_dir.mkdir(parents=True, exist_ok=True)
            settings = SettingsService(paths.settings_file, paths.settings_schema)
            if settings.load_error is not None:
                self.ctx.telemetry.log("settings_reset", {"error": settings.load_error})
            self.ctx.settings = settings
            self.ctx.session = GameSession(
                ranking_system=settings.settings.ranking_system,
                seed=self.ctx.seed,
                on_events=self._forward_events,
            )
            self.ctx.telemetry.log("boot", {"ok": True})
            return go_to(DungeonScene(self.ctx))
        except Exception as e:
            tb = traceback.format_exc(limit=8)
            self._error = f"{e}\n\n{tb}"
            self.ctx.telemetry.log("boot", {"ok": False, "error": str(e)})
            self._quit_button = Button(
                rect=pygame.Rect(20, 700, 140, 44),
                text="Quit",
                on_click=lambda: pygame.event.post(pygame.event.Event(pygame.QUIT)),
            )
            return None

    def render(self, screen: pygame.Surface) -> None:
        pal = self.ctx.palette
        fonts = self.ctx.fonts
        screen.fill(pal.background)
        draw_text(screen, fonts.big, "SCOUNDREL", (20, 20), color=pal.accent)

        if self._error is None:
            draw_text(screen, fonts.ui, "Lighting torches... loading settings.", (20, 80), color=pal.text)
        else:
            draw_text(screen, fonts.ui, "BOOT ERROR", (20, 80), color=pal.danger)
            y = 120
            for line in self._error.splitlines()[:22]:
                draw_text(screen, fonts.small, line[:120], (20, y), color=pal.text)
                y += 18
            if self._quit_button is not None:
                self._quit_button.draw(screen, fonts.ui, pal)
