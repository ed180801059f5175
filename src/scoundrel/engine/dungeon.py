from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .actions import Action, FleeAction, SelectSlotAction, ToggleBareHandsAction
from .combat import potion_heal, resolve_fight
from .deck import build_deck
from .ranks import is_monster, role
from .types import MAX_HEALTH, ROOM_SIZE, Card, GameStatus, Weapon

Event = dict[str, object]


@dataclass(frozen=True)
class DungeonConfig:
    max_health: int = MAX_HEALTH
    room_size: int = ROOM_SIZE
    refill_at: int = 1  # auto-refill once this many cards (or fewer) remain


@dataclass
class StepResult:
    ok: bool
    events: list[Event]
    error: str | None = None


@dataclass
class DungeonState:
    config: DungeonConfig
    seed: int
    rng: random.Random
    deck: list[Card]
    room: list[Card | None]
    health: int
    discard: list[Card] = field(default_factory=list)  # most recent first
    weapon: Weapon | None = None
    bare_hands: bool = False
    can_flee: bool = True
    fled_last_turn: bool = False
    potion_used_this_room: bool = False
    status: GameStatus = "playing"
    rooms_entered: int = 0
    action_log: list[Action] = field(default_factory=list)
    event_log: list[Event] = field(default_factory=list)


def room_cards(state: DungeonState) -> list[Card]:
    return [c for c in state.room if c is not None]


def occupied_count(state: DungeonState) -> int:
    return sum(1 for c in state.room if c is not None)


def monsters_remaining(state: DungeonState) -> int:
    in_deck = sum(1 for c in state.deck if is_monster(c))
    in_room = sum(1 for c in state.room if c is not None and is_monster(c))
    return in_deck + in_room


def can_flee_now(state: DungeonState) -> bool:
    return (
        state.status == "playing"
        and state.can_flee
        and occupied_count(state) == state.config.room_size
    )


def draw_room(state: DungeonState, forced: bool = False) -> bool:
    """Fill the empty slots from the top of the deck.

    Cards still in the room keep their order and move to the front. An
    unforced draw only happens when at most `refill_at` cards remain.
    Returns True when a draw took place.
    """
    if not state.deck:
        return False
    current = room_cards(state)
    if not forced and current and len(current) > state.config.refill_at:
        return False

    size = state.config.room_size
    needed = size - len(current)
    batch = state.deck[:needed]
    del state.deck[:needed]
    state.room = current + batch + [None] * (size - len(current) - len(batch))

    state.can_flee = not state.fled_last_turn
    state.potion_used_this_room = False
    state.rooms_entered += 1
    state.event_log.append(
        {"type": "ROOM_DRAWN", "drawn": [c.id for c in batch], "deck_left": len(state.deck)}
    )
    return True


def settle(state: DungeonState) -> None:
    """Run the automatic transitions until nothing changes.

    Covers both the initial deal and the refill once a room is down to its
    last card.
    """
    while state.status == "playing" and occupied_count(state) <= state.config.refill_at:
        if not draw_room(state, forced=True):
            break


def _end_game(state: DungeonState, status: GameStatus, reason: str) -> None:
    state.status = status
    state.event_log.append({"type": "GAME_ENDED", "status": status, "reason": reason})


def _check_won(state: DungeonState) -> None:
    if state.status != "playing":
        return
    if monsters_remaining(state) == 0:
        _end_game(state, "won", "dungeon_cleared")


def _discard_from_room(state: DungeonState, slot: int) -> None:
    card = state.room[slot]
    if card is None:
        return
    state.discard.insert(0, card)
    state.room[slot] = None


def _quaff_potion(state: DungeonState, slot: int, card: Card) -> None:
    if state.potion_used_this_room:
        state.event_log.append({"type": "POTION_WASTED", "card_id": card.id})
    else:
        healed = potion_heal(state.health, card.rank, False, state.config.max_health)
        state.health += healed
        state.potion_used_this_room = True
        state.event_log.append({"type": "POTION_QUAFFED", "card_id": card.id, "amount": healed})
    _discard_from_room(state, slot)


def _equip_weapon(state: DungeonState, slot: int, card: Card) -> None:
    if state.weapon is not None:
        state.discard.insert(0, state.weapon.card)
        state.event_log.append({"type": "WEAPON_DISCARDED", "card_id": state.weapon.card.id})
    state.weapon = Weapon.from_card(card)
    state.bare_hands = False
    state.room[slot] = None
    state.event_log.append({"type": "WEAPON_EQUIPPED", "card_id": card.id, "strength": card.rank})


def _fight_monster(state: DungeonState, slot: int, card: Card) -> bool:
    """Returns False when the fight killed the player."""
    outcome = resolve_fight(card.rank, state.weapon, state.bare_hands)
    health = state.health - outcome.damage
    if health <= 0:
        # The monster stays in the room; the run ends mid-resolution.
        state.health = 0
        _end_game(state, "lost", "slain")
        return False

    used_weapon = outcome.weapon is not state.weapon
    state.health = health
    state.weapon = outcome.weapon
    _discard_from_room(state, slot)
    state.event_log.append(
        {
            "type": "MONSTER_SLAIN",
            "card_id": card.id,
            "damage": outcome.damage,
            "used_weapon": used_weapon,
        }
    )
    return True


def _select_slot(state: DungeonState, action: SelectSlotAction) -> StepResult:
    if action.slot < 0 or action.slot >= len(state.room):
        return StepResult(ok=False, events=[], error="Invalid room slot.")
    card = state.room[action.slot]
    if card is None:
        return StepResult(ok=False, events=[], error="That slot is empty.")

    r = role(card)
    if r == "potion":
        _quaff_potion(state, action.slot, card)
    elif r == "weapon":
        _equip_weapon(state, action.slot, card)
    elif r == "monster":
        if not _fight_monster(state, action.slot, card):
            return StepResult(ok=True, events=[])

    state.fled_last_turn = False
    _check_won(state)
    return StepResult(ok=True, events=[])


def _flee(state: DungeonState) -> StepResult:
    if not state.can_flee:
        return StepResult(ok=False, events=[], error="You cannot flee two rooms in a row.")
    cards = room_cards(state)
    if len(cards) < state.config.room_size:
        return StepResult(ok=False, events=[], error="You can only flee a full room.")

    # Back under the dungeon in left-to-right order; no reshuffle.
    state.deck.extend(cards)
    state.room = [None] * state.config.room_size
    state.can_flee = False
    state.fled_last_turn = True
    state.event_log.append({"type": "FLED", "returned": [c.id for c in cards]})
    return StepResult(ok=True, events=[])


def _toggle_bare_hands(state: DungeonState) -> StepResult:
    if state.weapon is None:
        return StepResult(ok=False, events=[], error="No weapon equipped.")
    state.bare_hands = not state.bare_hands
    state.event_log.append({"type": "BARE_HANDS_TOGGLED", "bare_hands": state.bare_hands})
    return StepResult(ok=True, events=[])


def step(state: DungeonState, action: Action) -> StepResult:
    """Apply a single player intent and settle the automatic transitions.

    Mutates `state` in place. Rejected intents leave the state untouched and
    come back with ok=False and a reason. Deterministic for a given
    (seed, deck, action sequence).
    """
    if state.status != "playing":
        return StepResult(ok=False, events=[], error="The quest is over.")

    state.action_log.append(action)
    before = len(state.event_log)

    if isinstance(action, SelectSlotAction):
        result = _select_slot(state, action)
    elif isinstance(action, FleeAction):
        result = _flee(state)
    elif isinstance(action, ToggleBareHandsAction):
        result = _toggle_bare_hands(state)
    else:
        return StepResult(ok=False, events=[], error="Unknown action.")

    if result.ok:
        settle(state)
        result.events = state.event_log[before:]
    return result


def preview_health_delta(state: DungeonState, slot: int) -> int:
    """Health change that selecting `slot` would cause right now.

    Uses the same combat and potion rules as `step`, without mutating.
    """
    if state.status != "playing":
        return 0
    if slot < 0 or slot >= len(state.room):
        return 0
    card = state.room[slot]
    if card is None:
        return 0
    r = role(card)
    if r == "monster":
        return -resolve_fight(card.rank, state.weapon, state.bare_hands).damage
    if r == "potion":
        return potion_heal(
            state.health, card.rank, state.potion_used_this_room, state.config.max_health
        )
    return 0


def preview_health(state: DungeonState, slot: int) -> int:
    value = state.health + preview_health_delta(state, slot)
    return max(0, min(state.config.max_health, value))


def new_dungeon(
    seed: int,
    config: DungeonConfig | None = None,
    deck: Sequence[Card] | None = None,
) -> DungeonState:
    """Start a run: shuffle a fresh deck (or take `deck` as-is) and deal the first room."""
    cfg = config or DungeonConfig()
    if cfg.room_size < 1 or not 0 <= cfg.refill_at < cfg.room_size:
        raise ValueError("refill_at must be smaller than room_size.")

    rng = random.Random(seed)
    if deck is None:
        cards = build_deck(rng)
    else:
        cards = list(deck)
        if len({c.id for c in cards}) != len(cards):
            raise ValueError("Deck card ids must be unique.")

    state = DungeonState(
        config=cfg,
        seed=seed,
        rng=rng,
        deck=cards,
        room=[None] * cfg.room_size,
        health=cfg.max_health,
    )
    settle(state)
    return state


def replay(
    seed: int,
    actions: Iterable[Action],
    config: DungeonConfig | None = None,
    deck: Sequence[Card] | None = None,
) -> DungeonState:
    state = new_dungeon(seed, config=config, deck=deck)
    for a in actions:
        step(state, a)
        if state.status != "playing":
            break
    return state
