from __future__ import annotations

import pytest

from scoundrel.engine.ranks import card_code, card_label, rank_label, role, role_of_suit
from scoundrel.engine.types import Card


def test_roles_follow_suit() -> None:
    assert role_of_suit("hearts") == "potion"
    assert role_of_suit("diamonds") == "weapon"
    assert role_of_suit("spades") == "monster"
    assert role_of_suit("clubs") == "monster"
    assert role(Card(id="clubs-14", suit="clubs", rank=14)) == "monster"


def test_standard_face_labels() -> None:
    assert [rank_label(r, "standard") for r in (11, 12, 13, 14)] == ["J", "Q", "K", "A"]


def test_alternate_face_labels() -> None:
    assert [rank_label(r, "alternate") for r in (11, 12, 13, 14)] == ["A", "J", "Q", "K"]


def test_numerals_ignore_ranking_system() -> None:
    for r in range(2, 11):
        assert rank_label(r, "standard") == rank_label(r, "alternate") == str(r)


def test_rank_out_of_range() -> None:
    with pytest.raises(ValueError):
        rank_label(1)
    with pytest.raises(ValueError):
        rank_label(15)


def test_card_label_and_code() -> None:
    king = Card(id="spades-13", suit="spades", rank=13)
    ten = Card(id="hearts-10", suit="hearts", rank=10)
    assert card_label(king) == "K♠"
    assert card_label(king, "alternate") == "Q♠"
    assert card_code(king) == "KS"
    assert card_code(ten) == "0H"
