from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import pygame  # type: ignore[import-not-found]

from scoundrel.engine.ranks import card_label, role
from scoundrel.engine.types import Card, RankingSystem

from .theme import ROLE_INK, Color, Palette


def draw_text(
    screen: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    pos: tuple[int, int],
    color: Color = (240, 240, 240),
) -> None:
    img = font.render(text, True, color)
    screen.blit(img, pos)


def draw_card(
    screen: pygame.Surface,
    font: pygame.font.Font,
    rect: pygame.Rect,
    card: Card | None,
    palette: Palette,
    system: RankingSystem,
    *,
    face_down: bool = False,
    dimmed: bool = False,
) -> None:
    if card is None and not face_down:
        pygame.draw.rect(screen, palette.slot, rect, border_radius=10)
        pygame.draw.rect(screen, palette.muted, rect, width=2, border_radius=10)
        return
    if face_down:
        pygame.draw.rect(screen, (90, 40, 30), rect, border_radius=10)
        pygame.draw.rect(screen, palette.accent, rect.inflate(-12, -12), width=2, border_radius=8)
        pygame.draw.rect(screen, palette.border, rect, width=2, border_radius=10)
        return

    assert card is not None
    face = palette.card_face if not dimmed else palette.slot
    pygame.draw.rect(screen, face, rect, border_radius=10)
    pygame.draw.rect(screen, palette.border, rect, width=2, border_radius=10)
    ink = ROLE_INK[role(card)]
    img = font.render(card_label(card, system), True, ink)
    screen.blit(img, img.get_rect(center=rect.center).topleft)


@dataclass
class Button:
    rect: pygame.Rect
    text: str
    on_click: Callable[[], None]
    enabled: bool = True

    def handle_event(self, event: pygame.event.Event) -> bool:
        if not self.enabled:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.on_click()
                return True
        return False

    def draw(self, screen: pygame.Surface, font: pygame.font.Font, palette: Palette) -> None:
        bg = palette.button if self.enabled else palette.button_disabled
        fg = palette.text if self.enabled else palette.muted
        pygame.draw.rect(screen, bg, self.rect, border_radius=8)
        pygame.draw.rect(screen, palette.border, self.rect, width=2, border_radius=8)
        img = font.render(self.text, True, fg)
        r = img.get_rect(center=self.rect.center)
        screen.blit(img, r.topleft)


@dataclass
class Choice:
    """Row of mutually exclusive options (theme, ranking system)."""

    rect: pygame.Rect
    label: str
    options: tuple[str, ...]
    value: str
    on_change: Callable[[str], None]

    def _option_rect(self, i: int) -> pygame.Rect:
        w = 130
        x = self.rect.right - (len(self.options) - i) * (w + 6)
        return pygame.Rect(x, self.rect.y + 6, w, self.rect.height - 12)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for i, opt in enumerate(self.options):
                if self._option_rect(i).collidepoint(event.pos):
                    if opt != self.value:
                        self.value = opt
                        self.on_change(opt)
                    return True
        return False

    def draw(self, screen: pygame.Surface, font: pygame.font.Font, palette: Palette) -> None:
        pygame.draw.rect(screen, palette.panel, self.rect, border_radius=8)
        pygame.draw.rect(screen, palette.border, self.rect, width=2, border_radius=8)
        draw_text(screen, font, self.label, (self.rect.x + 12, self.rect.y + 14), color=palette.text)
        for i, opt in enumerate(self.options):
            r = self._option_rect(i)
            selected = opt == self.value
            pygame.draw.rect(screen, palette.accent if selected else palette.button, r, border_radius=6)
            img = font.render(opt.capitalize(), True, palette.text)
            screen.blit(img, img.get_rect(center=r.center).topleft)
