from __future__ import annotations

from dataclasses import dataclass

import pygame  # type: ignore[import-not-found]

from scoundrel.engine.types import Role, Theme

Color = tuple[int, int, int]


@dataclass(frozen=True)
class Palette:
    background: Color
    panel: Color
    slot: Color
    border: Color
    text: Color
    muted: Color
    accent: Color
    danger: Color
    heal: Color
    card_face: Color
    button: Color
    button_disabled: Color


_PALETTES: dict[Theme, Palette] = {
    "dark": Palette(
        background=(12, 14, 20),
        panel=(24, 26, 36),
        slot=(18, 20, 28),
        border=(0, 0, 0),
        text=(236, 236, 240),
        muted=(120, 124, 140),
        accent=(230, 160, 40),
        danger=(220, 60, 60),
        heal=(70, 190, 100),
        card_face=(240, 236, 226),
        button=(60, 60, 66),
        button_disabled=(30, 30, 34),
    ),
    "light": Palette(
        background=(226, 230, 236),
        panel=(248, 248, 250),
        slot=(210, 214, 222),
        border=(120, 124, 136),
        text=(24, 26, 34),
        muted=(110, 114, 128),
        accent=(200, 120, 20),
        danger=(190, 40, 40),
        heal=(40, 150, 70),
        card_face=(255, 255, 255),
        button=(190, 194, 204),
        button_disabled=(222, 224, 230),
    ),
}

ROLE_INK: dict[Role, Color] = {
    "monster": (30, 30, 30),
    "weapon": (40, 90, 170),
    "potion": (190, 30, 40),
}


def palette_for(theme: Theme) -> Palette:
    return _PALETTES[theme]


@dataclass
class Fonts:
    ui: pygame.font.Font
    small: pygame.font.Font
    big: pygame.font.Font
    card: pygame.font.Font


def load_fonts() -> Fonts:
    pygame.font.init()
    return Fonts(
        ui=pygame.font.SysFont(None, 24),
        small=pygame.font.SysFont(None, 18),
        big=pygame.font.SysFont(None, 48),
        card=pygame.font.SysFont("dejavusans", 30),
    )
