from __future__ import annotations

import pygame  # type: ignore[import-not-found]

from scoundrel.engine.dungeon import StepResult, can_flee_now
from scoundrel.engine.ranks import is_monster, is_potion, rank_label
from scoundrel.engine.session import GameSession

from ..app import GameContext
from ..scene_base import Scene, SceneTransition, go_to
from ..ui import Button, draw_card, draw_text

CARD_W, CARD_H = 130, 182
SLOT_GAP = 40
ROOM_Y = 320
PILE_W, PILE_H = 110, 154


class DungeonScene:
    def __init__(self, ctx: GameContext) -> None:
        assert ctx.session is not None
        self.ctx = ctx
        self.session: GameSession = ctx.session
        self._next: SceneTransition | None = None
        self._message: str = ""
        self._hover_slot: int | None = None
        self._logged_end = False

        self.btn_settings = Button(rect=pygame.Rect(700, 24, 130, 44), text="Settings", on_click=self._on_settings)
        self.btn_new = Button(rect=pygame.Rect(850, 24, 140, 44), text="New Quest", on_click=self._on_new_quest)
        self.btn_flee = Button(rect=pygame.Rect(457, 160, 110, 60), text="Flee", on_click=self._on_flee)
        self.btn_again = Button(rect=pygame.Rect(387, 470, 250, 56), text="Try Again", on_click=self._on_new_quest)

    # -------- Navigation --------
    def _go(self, scene: Scene) -> None:
        self._next = go_to(scene)

    def _on_settings(self) -> None:
        from .settings import SettingsScene

        self._go(SettingsScene(self.ctx))

    def _on_graveyard(self) -> None:
        from .graveyard import GraveyardScene

        self._go(GraveyardScene(self.ctx))

    def _on_new_quest(self) -> None:
        self.session.new_session()
        self._message = ""
        self._hover_slot = None
        self._logged_end = False

    # -------- Intents --------
    def _report(self, res: StepResult) -> None:
        self._message = "" if res.ok else (res.error or "Nothing happens.")

    def _on_flee(self) -> None:
        self._report(self.session.flee())

    def _on_slot(self, slot: int) -> None:
        self._report(self.session.select_room_slot(slot))
        self._hover_slot = None

    def _on_weapon(self) -> None:
        if self.session.state.weapon is None:
            return
        self._report(self.session.toggle_bare_hands())

    # -------- Layout --------
    def _slot_rect(self, slot: int) -> pygame.Rect:
        total = 4 * CARD_W + 3 * SLOT_GAP
        x0 = (self.ctx.screen.get_width() - total) // 2
        return pygame.Rect(x0 + slot * (CARD_W + SLOT_GAP), ROOM_Y, CARD_W, CARD_H)

    def _deck_rect(self) -> pygame.Rect:
        return pygame.Rect(80, 110, PILE_W, PILE_H)

    def _graveyard_rect(self) -> pygame.Rect:
        return pygame.Rect(834, 110, PILE_W, PILE_H)

    def _weapon_rect(self) -> pygame.Rect:
        return pygame.Rect(580, 545, 90, 126)

    def _hit_test_slot(self, pos: tuple[int, int]) -> int | None:
        for slot, card in enumerate(self.session.state.room):
            if card is not None and self._slot_rect(slot).collidepoint(pos):
                return slot
        return None

    # -------- Scene protocol --------
    def handle_event(self, event: pygame.event.Event) -> None:
        if self.btn_new.handle_event(event) or self.btn_settings.handle_event(event):
            return

        if self.session.status != "playing":
            self.btn_again.handle_event(event)
            return

        if event.type == pygame.MOUSEMOTION:
            self._hover_slot = self._hit_test_slot(event.pos)
            return

        self.btn_flee.enabled = can_flee_now(self.session.state)
        if self.btn_flee.handle_event(event):
            return

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            slot = self._hit_test_slot(event.pos)
            if slot is not None:
                self._on_slot(slot)
                return
            if self._weapon_rect().collidepoint(event.pos):
                self._on_weapon()
                return
            if self._graveyard_rect().collidepoint(event.pos) and self.session.state.discard:
                self._on_graveyard()
                return

        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4):
                self._on_slot(event.key - pygame.K_1)
            elif event.key == pygame.K_f:
                self._on_flee()
            elif event.key == pygame.K_b:
                self._on_weapon()

    def update(self, dt: float) -> SceneTransition | None:
        if self.session.status != "playing" and not self._logged_end:
            state = self.session.state
            self.ctx.telemetry.log(
                "quest_finished",
                {
                    "seed": state.seed,
                    "status": state.status,
                    "health": state.health,
                    "rooms_entered": state.rooms_entered,
                    "deck_left": len(state.deck),
                },
            )
            self._logged_end = True
        return self._next

    def render(self, screen: pygame.Surface) -> None:
        pal = self.ctx.palette
        fonts = self.ctx.fonts
        state = self.session.state
        system = self.session.ranking_system
        screen.fill(pal.background)

        draw_text(screen, fonts.big, "SCOUNDREL", (40, 24), color=pal.accent)
        draw_text(screen, fonts.small, "SURVIVE THE DUNGEON", (42, 66), color=pal.muted)
        self.btn_settings.draw(screen, fonts.ui, pal)
        self.btn_new.draw(screen, fonts.ui, pal)

        # deck / flee / graveyard row
        deck_rect = self._deck_rect()
        draw_card(screen, fonts.card, deck_rect, None, pal, system, face_down=bool(state.deck))
        draw_text(screen, fonts.ui, f"Dungeon: {len(state.deck)}", (deck_rect.x, deck_rect.bottom + 8), color=pal.text)

        self.btn_flee.enabled = can_flee_now(state)
        self.btn_flee.draw(screen, fonts.ui, pal)

        gy_rect = self._graveyard_rect()
        top = state.discard[0] if state.discard else None
        draw_card(screen, fonts.card, gy_rect, top, pal, system)
        draw_text(screen, fonts.ui, f"Graveyard: {len(state.discard)}", (gy_rect.x - 10, gy_rect.bottom + 8), color=pal.text)

        # room
        for slot, card in enumerate(state.room):
            rect = self._slot_rect(slot)
            draw_card(screen, fonts.card, rect, card, pal, system)
            if card is not None and slot == self._hover_slot:
                pygame.draw.rect(screen, pal.accent, rect, width=3, border_radius=10)
                self._draw_preview_tag(screen, slot)

        self._draw_vitality(screen)
        self._draw_weapon_panel(screen)

        if self._message:
            draw_text(screen, fonts.ui, self._message, (40, 720), color=pal.accent)

        if state.status != "playing":
            self._draw_game_over(screen)

    def _draw_preview_tag(self, screen: pygame.Surface, slot: int) -> None:
        card = self.session.state.room[slot]
        if card is None:
            return
        pal = self.ctx.palette
        delta = self.session.preview(slot)
        if is_monster(card):
            text, color = (f"{delta} Vitality", pal.danger) if delta < 0 else ("Protected!", pal.heal)
        elif is_potion(card) and not self.session.state.potion_used_this_room:
            text, color = f"+{delta} Vitality", pal.heal
        else:
            return
        rect = self._slot_rect(slot)
        img = self.ctx.fonts.small.render(text, True, (255, 255, 255))
        tag = img.get_rect(center=(rect.centerx, rect.y - 18)).inflate(16, 8)
        pygame.draw.rect(screen, color, tag, border_radius=8)
        screen.blit(img, img.get_rect(center=tag.center).topleft)

    def _draw_vitality(self, screen: pygame.Surface) -> None:
        pal = self.ctx.palette
        fonts = self.ctx.fonts
        state = self.session.state
        max_hp = state.config.max_health
        bar = pygame.Rect(40, 580, 480, 36)

        delta = self.session.preview(self._hover_slot) if self._hover_slot is not None else 0
        shown = self.session.preview_health(self._hover_slot) if delta else state.health
        label = f"VITALITY  {state.health} -> {shown} / {max_hp}" if delta else f"VITALITY  {state.health} / {max_hp}"
        draw_text(screen, fonts.ui, label, (bar.x, bar.y - 28), color=pal.danger)

        pygame.draw.rect(screen, pal.slot, bar, border_radius=12)
        fill = bar.copy()
        fill.width = int(bar.width * state.health / max_hp)
        if fill.width > 0:
            pygame.draw.rect(screen, pal.danger, fill, border_radius=12)
        if delta:
            lo = min(state.health, shown)
            ghost = pygame.Rect(
                bar.x + int(bar.width * lo / max_hp),
                bar.y,
                int(bar.width * abs(shown - state.health) / max_hp),
                bar.height,
            )
            pygame.draw.rect(screen, pal.heal if delta > 0 else pal.muted, ghost)
        pygame.draw.rect(screen, pal.border, bar, width=2, border_radius=12)

    def _draw_weapon_panel(self, screen: pygame.Surface) -> None:
        pal = self.ctx.palette
        fonts = self.ctx.fonts
        state = self.session.state
        panel = pygame.Rect(560, 525, 424, 166)
        pygame.draw.rect(screen, pal.panel, panel, border_radius=16)
        pygame.draw.rect(screen, pal.border, panel, width=2, border_radius=16)

        weapon = state.weapon
        armed = weapon is not None and not state.bare_hands
        rect = self._weapon_rect()
        if weapon is None:
            draw_card(screen, fonts.card, rect, None, pal, self.session.ranking_system)
        else:
            draw_card(screen, fonts.card, rect, weapon.card, pal, self.session.ranking_system, dimmed=not armed)

        x = rect.right + 20
        draw_text(screen, fonts.small, "ACTIVE TOOL", (x, panel.y + 18), color=pal.muted)
        draw_text(screen, fonts.ui, "Equipped Weapon" if armed else "Bare Hands", (x, panel.y + 38),
                  color=pal.accent if armed else pal.muted)
        power = weapon.strength if armed and weapon is not None else 0
        draw_text(screen, fonts.ui, f"Power: {power}", (x, panel.y + 68), color=pal.text)

        if weapon is None:
            note = "Relic required for defense."
        elif state.bare_hands:
            note = "Weapon inactive (click to re-arm)."
        elif weapon.last_monster_defeated is None:
            note = "Durability: Full"
        else:
            limit = rank_label(weapon.last_monster_defeated, self.session.ranking_system)
            note = f"Durability: Target < {limit}"
        draw_text(screen, fonts.small, note, (x, panel.y + 100), color=pal.text)
        if weapon is not None:
            draw_text(screen, fonts.small, "Click the weapon or press B to toggle.", (x, panel.y + 124), color=pal.muted)

    def _draw_game_over(self, screen: pygame.Surface) -> None:
        pal = self.ctx.palette
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 200))
        screen.blit(overlay, (0, 0))

        won = self.session.status == "won"
        title = "TRIUMPH" if won else "DEFEAT"
        subtitle = "The dungeon is cleared." if won else "The dungeon claims another soul."
        img = self.ctx.fonts.big.render(title, True, pal.accent if won else pal.danger)
        screen.blit(img, img.get_rect(center=(screen.get_width() // 2, 360)).topleft)
        sub = self.ctx.fonts.ui.render(subtitle, True, (236, 236, 240))
        screen.blit(sub, sub.get_rect(center=(screen.get_width() // 2, 410)).topleft)
        self.btn_again.draw(screen, self.ctx.fonts.ui, pal)
