from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pygame  # type: ignore[import-not-found]

from scoundrel.engine.session import GameSession
from scoundrel.paths import Paths
from scoundrel.services.settings import SettingsService
from scoundrel.services.telemetry import TelemetryService

from .scene_base import Scene
from .theme import Fonts, Palette, palette_for


@dataclass
class GameContext:
    screen: pygame.Surface
    clock: pygame.time.Clock
    paths: Paths
    fonts: Fonts
    telemetry: TelemetryService
    seed: Optional[int] = None

    # Loaded at boot
    settings: Optional[SettingsService] = None
    session: Optional[GameSession] = None

    @property
    def palette(self) -> Palette:
        theme = self.settings.settings.theme if self.settings is not None else "dark"
        return palette_for(theme)


class App:
    def __init__(self, ctx: GameContext, initial_scene: Scene) -> None:
        self.ctx = ctx
        self.scene: Scene = initial_scene
        self.running = True

    def run(self) -> int:
        while self.running:
            dt = self.ctx.clock.tick(60) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                    break
                self.scene.handle_event(event)

            tr = self.scene.update(dt)
            if tr is not None:
                self.scene = tr.next_scene

            self.scene.render(self.ctx.screen)
            pygame.display.flip()

        return 0
