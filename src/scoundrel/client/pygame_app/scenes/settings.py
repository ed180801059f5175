from __future__ import annotations

import pygame  # type: ignore[import-not-found]

from scoundrel.engine.types import RANKING_SYSTEMS, THEMES

from ..app import GameContext
from ..scene_base import Scene, SceneTransition, go_to
from ..ui import Button, Choice, draw_text

_RANKING_NOTES = {
    "standard": "Standard: J=11, Q=12, K=13, Ace is strongest (14).",
    "alternate": "Alternate: Ace is 11, J=12, Q=13, King is strongest (14).",
}


class SettingsScene:
    def __init__(self, ctx: GameContext) -> None:
        assert ctx.settings is not None
        self.ctx = ctx
        self._next: SceneTransition | None = None
        current = ctx.settings.settings

        self.btn_back = Button(rect=pygame.Rect(20, 20, 120, 40), text="Back", on_click=self._on_back)
        self.choice_theme = Choice(
            rect=pygame.Rect(40, 140, 560, 56),
            label="Theme",
            options=THEMES,
            value=current.theme,
            on_change=self._on_theme,
        )
        self.choice_ranking = Choice(
            rect=pygame.Rect(40, 220, 560, 56),
            label="Ranking System",
            options=RANKING_SYSTEMS,
            value=current.ranking_system,
            on_change=self._on_ranking,
        )

    def _on_back(self) -> None:
        from .dungeon import DungeonScene

        self._go(DungeonScene(self.ctx))

    def _go(self, scene: Scene) -> None:
        self._next = go_to(scene)

    def _on_theme(self, value: str) -> None:
        assert self.ctx.settings is not None
        self.ctx.settings.set_theme(value)

    def _on_ranking(self, value: str) -> None:
        assert self.ctx.settings is not None and self.ctx.session is not None
        self.ctx.settings.set_ranking_system(value)
        # Face values change meaning, so the current quest is abandoned.
        self.ctx.session.set_ranking_system(self.ctx.settings.settings.ranking_system)

    def handle_event(self, event: pygame.event.Event) -> None:
        self.btn_back.handle_event(event)
        self.choice_theme.handle_event(event)
        self.choice_ranking.handle_event(event)

    def update(self, dt: float) -> SceneTransition | None:
        return self._next

    def render(self, screen: pygame.Surface) -> None:
        pal = self.ctx.palette
        fonts = self.ctx.fonts
        screen.fill(pal.background)
        self.btn_back.draw(screen, fonts.ui, pal)
        draw_text(screen, fonts.big, "Settings", (40, 70), color=pal.text)
        self.choice_theme.draw(screen, fonts.ui, pal)
        self.choice_ranking.draw(screen, fonts.ui, pal)
        draw_text(screen, fonts.small, "Note: changing ranking starts a New Quest.", (44, 290), color=pal.accent)
        draw_text(screen, fonts.small, _RANKING_NOTES[self.choice_ranking.value], (44, 310), color=pal.muted)
