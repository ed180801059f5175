from __future__ import annotations

import random
from typing import Sequence

from .types import ALL_SUITS, MAX_ITEM_RANK, MAX_MONSTER_RANK, MIN_RANK, MONSTER_SUITS, Card

DECK_SIZE = 44


def fresh_cards() -> list[Card]:
    """The 44 dungeon cards in canonical (suit, rank) order, unshuffled."""
    cards: list[Card] = []
    for suit in ALL_SUITS:
        top = MAX_MONSTER_RANK if suit in MONSTER_SUITS else MAX_ITEM_RANK
        for rank in range(MIN_RANK, top + 1):
            cards.append(Card(id=f"{suit}-{rank}", suit=suit, rank=rank))
    return cards


def shuffle(rng: random.Random, cards: Sequence[Card]) -> list[Card]:
    # random.Random.shuffle is a Fisher-Yates pass, so every ordering is
    # reachable with equal probability for a given RNG.
    out = list(cards)
    rng.shuffle(out)
    return out


def build_deck(rng: random.Random) -> list[Card]:
    return shuffle(rng, fresh_cards())
