from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Suit = Literal["hearts", "diamonds", "spades", "clubs"]
Role = Literal["monster", "weapon", "potion"]
RankingSystem = Literal["standard", "alternate"]
GameStatus = Literal["playing", "won", "lost"]
Theme = Literal["light", "dark"]

ALL_SUITS: tuple[Suit, ...] = ("hearts", "diamonds", "spades", "clubs")
MONSTER_SUITS: tuple[Suit, ...] = ("spades", "clubs")
RANKING_SYSTEMS: tuple[RankingSystem, ...] = ("standard", "alternate")
THEMES: tuple[Theme, ...] = ("light", "dark")

MAX_HEALTH = 20
ROOM_SIZE = 4

MIN_RANK = 2
MAX_MONSTER_RANK = 14
MAX_ITEM_RANK = 10  # weapons and potions stop at ten


@dataclass(frozen=True)
class Card:
    id: str
    suit: Suit
    rank: int


@dataclass(frozen=True)
class Weapon:
    """The equipped weapon.

    last_monster_defeated is the durability ratchet: once set, the weapon only
    works against monsters strictly weaker than that value.
    """

    card: Card
    strength: int
    last_monster_defeated: int | None = None

    @staticmethod
    def from_card(card: Card) -> "Weapon":
        return Weapon(card=card, strength=card.rank, last_monster_defeated=None)
