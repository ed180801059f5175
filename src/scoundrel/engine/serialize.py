from __future__ import annotations

from typing import Sequence

from .actions import Action, FleeAction, SelectSlotAction, ToggleBareHandsAction
from .dungeon import DungeonState, can_flee_now, monsters_remaining
from .ranks import card_code, card_label, role
from .types import ALL_SUITS, Card, RankingSystem, Suit, Weapon


def action_to_dict(a: Action) -> dict[str, object]:
    if isinstance(a, SelectSlotAction):
        return {"type": "select_slot", "slot": a.slot}
    if isinstance(a, FleeAction):
        return {"type": "flee"}
    if isinstance(a, ToggleBareHandsAction):
        return {"type": "toggle_bare_hands"}
    # should be unreachable
    return {"type": "unknown"}


def card_to_dict(c: Card | None, system: RankingSystem = "standard") -> dict[str, object] | None:
    if c is None:
        return None
    return {
        "id": c.id,
        "suit": c.suit,
        "rank": c.rank,
        "role": role(c),
        "label": card_label(c, system),
        "code": card_code(c, system),
    }


def _weapon_to_dict(w: Weapon | None, system: RankingSystem) -> dict[str, object] | None:
    if w is None:
        return None
    return {
        "card": card_to_dict(w.card, system),
        "strength": w.strength,
        "last_monster_defeated": w.last_monster_defeated,
    }


def graveyard_groups(discard: Sequence[Card]) -> dict[Suit, list[Card]]:
    """Discard pile grouped by suit, each group sorted by rank. Display only."""
    groups: dict[Suit, list[Card]] = {s: [] for s in ALL_SUITS}
    for c in discard:
        groups[c.suit].append(c)
    for s in groups:
        groups[s].sort(key=lambda c: c.rank)
    return groups


def snapshot(state: DungeonState, ranking_system: RankingSystem = "standard") -> dict[str, object]:
    """Return a JSON-serializable read-only view of the current dungeon state."""
    return {
        "seed": state.seed,
        "status": state.status,
        "ranking_system": ranking_system,
        "health": state.health,
        "max_health": state.config.max_health,
        "deck_count": len(state.deck),
        "room": [card_to_dict(c, ranking_system) for c in state.room],
        "discard": [card_to_dict(c, ranking_system) for c in state.discard],
        "weapon": _weapon_to_dict(state.weapon, ranking_system),
        "bare_hands": state.bare_hands,
        "can_flee": state.can_flee,
        "flee_available": can_flee_now(state),
        "potion_used_this_room": state.potion_used_this_room,
        "monsters_remaining": monsters_remaining(state),
        "rooms_entered": state.rooms_entered,
        "action_log": [action_to_dict(a) for a in state.action_log],
    }
