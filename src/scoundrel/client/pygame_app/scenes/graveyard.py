from __future__ import annotations

import pygame  # type: ignore[import-not-found]

from scoundrel.engine.ranks import role_of_suit, role_title, suit_symbol

from ..app import GameContext
from ..scene_base import SceneTransition, go_to
from ..ui import Button, draw_card, draw_text

MINI_W, MINI_H = 64, 90
OVERLAP = 24


class GraveyardScene:
    """Discard pile, grouped by suit and sorted by rank."""

    def __init__(self, ctx: GameContext) -> None:
        assert ctx.session is not None
        self.ctx = ctx
        self._next: SceneTransition | None = None
        self.btn_back = Button(rect=pygame.Rect(20, 20, 120, 40), text="Back", on_click=self._on_back)

    def _on_back(self) -> None:
        from .dungeon import DungeonScene

        self._next = go_to(DungeonScene(self.ctx))

    def handle_event(self, event: pygame.event.Event) -> None:
        if self.btn_back.handle_event(event):
            return
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self._on_back()

    def update(self, dt: float) -> SceneTransition | None:
        return self._next

    def render(self, screen: pygame.Surface) -> None:
        pal = self.ctx.palette
        fonts = self.ctx.fonts
        assert self.ctx.session is not None
        session = self.ctx.session
        screen.fill(pal.background)
        self.btn_back.draw(screen, fonts.ui, pal)
        draw_text(screen, fonts.big, "The Graveyard", (170, 18), color=pal.text)

        y = 90
        for suit, cards in session.graveyard().items():
            heading = f"{suit_symbol(suit)}  {role_title(role_of_suit(suit))}  ({len(cards)})"
            draw_text(screen, fonts.ui, heading, (40, y), color=pal.muted)
            if not cards:
                draw_text(screen, fonts.small, "Nothing here yet.", (60, y + 40), color=pal.muted)
            for i, card in enumerate(cards):
                rect = pygame.Rect(60 + i * (MINI_W - OVERLAP), y + 26, MINI_W, MINI_H)
                draw_card(screen, fonts.ui, rect, card, pal, session.ranking_system)
            y += MINI_H + 50
