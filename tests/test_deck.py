from __future__ import annotations

import random
from collections import Counter

from scoundrel.engine.deck import DECK_SIZE, build_deck, fresh_cards, shuffle
from scoundrel.engine.ranks import role


def test_deck_has_44_unique_cards() -> None:
    deck = build_deck(random.Random(1))
    assert len(deck) == DECK_SIZE == 44
    assert len({c.id for c in deck}) == 44


def test_rank_distribution_per_suit() -> None:
    by_suit: dict[str, list[int]] = {}
    for c in build_deck(random.Random(2)):
        by_suit.setdefault(c.suit, []).append(c.rank)
    assert sorted(by_suit["spades"]) == list(range(2, 15))
    assert sorted(by_suit["clubs"]) == list(range(2, 15))
    assert sorted(by_suit["diamonds"]) == list(range(2, 11))
    assert sorted(by_suit["hearts"]) == list(range(2, 11))


def test_role_counts() -> None:
    roles = Counter(role(c) for c in fresh_cards())
    assert roles == {"monster": 26, "weapon": 9, "potion": 9}


def test_same_seed_same_order() -> None:
    a = build_deck(random.Random(99))
    b = build_deck(random.Random(99))
    c = build_deck(random.Random(100))
    assert a == b
    assert a != c


def test_shuffle_leaves_input_alone() -> None:
    cards = fresh_cards()
    before = list(cards)
    out = shuffle(random.Random(3), cards)
    assert cards == before
    assert sorted(out, key=lambda c: c.id) == sorted(before, key=lambda c: c.id)


def test_shuffle_positions_roughly_uniform() -> None:
    rng = random.Random(12345)
    runs = 8800
    first: Counter[str] = Counter()
    last: Counter[str] = Counter()
    for _ in range(runs):
        deck = build_deck(rng)
        first[deck[0].id] += 1
        last[deck[-1].id] += 1

    # 200 expected per card, standard deviation about 14
    for card in fresh_cards():
        assert 120 < first[card.id] < 280, card.id
        assert 120 < last[card.id] < 280, card.id
