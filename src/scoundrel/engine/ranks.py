from __future__ import annotations

from .types import MAX_MONSTER_RANK, MIN_RANK, Card, RankingSystem, Role, Suit

_FACE_LABELS: dict[RankingSystem, dict[int, str]] = {
    "standard": {11: "J", 12: "Q", 13: "K", 14: "A"},
    "alternate": {11: "A", 12: "J", 13: "Q", 14: "K"},
}

_SUIT_SYMBOLS: dict[Suit, str] = {
    "hearts": "♥",
    "diamonds": "♦",
    "spades": "♠",
    "clubs": "♣",
}

_SUIT_CODES: dict[Suit, str] = {"hearts": "H", "diamonds": "D", "spades": "S", "clubs": "C"}

_ROLE_TITLES: dict[Role, str] = {
    "potion": "Spent Potions",
    "weapon": "Used Weapons",
    "monster": "Slain Monsters",
}


def role_of_suit(suit: Suit) -> Role:
    if suit == "hearts":
        return "potion"
    if suit == "diamonds":
        return "weapon"
    if suit in ("spades", "clubs"):
        return "monster"
    raise ValueError(f"Unknown suit: {suit!r}")


def role(card: Card) -> Role:
    return role_of_suit(card.suit)


def is_monster(card: Card) -> bool:
    return role(card) == "monster"


def is_weapon(card: Card) -> bool:
    return role(card) == "weapon"


def is_potion(card: Card) -> bool:
    return role(card) == "potion"


def rank_label(rank: int, system: RankingSystem = "standard") -> str:
    """Face label for a rank.

    Only the label depends on the ranking system; combat and healing always
    use the raw rank.
    """
    if rank < MIN_RANK or rank > MAX_MONSTER_RANK:
        raise ValueError(f"Rank out of range: {rank}")
    if rank <= 10:
        return str(rank)
    faces = _FACE_LABELS.get(system)
    if faces is None:
        raise ValueError(f"Unknown ranking system: {system!r}")
    return faces[rank]


def suit_symbol(suit: Suit) -> str:
    return _SUIT_SYMBOLS[suit]


def card_label(card: Card, system: RankingSystem = "standard") -> str:
    return f"{rank_label(card.rank, system)}{suit_symbol(card.suit)}"


def card_code(card: Card, system: RankingSystem = "standard") -> str:
    # Two characters: ten is written as "0" so every code has the same width.
    label = rank_label(card.rank, system)
    rank_code = "0" if label == "10" else label
    return f"{rank_code}{_SUIT_CODES[card.suit]}"


def role_title(r: Role) -> str:
    return _ROLE_TITLES[r]
