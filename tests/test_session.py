from __future__ import annotations

from typing import Sequence

import pytest

from scoundrel.engine.dungeon import Event
from scoundrel.engine.session import GameSession
from scoundrel.engine.types import Card


def test_new_session_resets_everything() -> None:
    session = GameSession(seed=5)
    first = next(i for i, c in enumerate(session.state.room) if c is not None)
    session.select_room_slot(first)
    assert session.state.discard or session.state.weapon is not None

    session.new_session(seed=6)
    snap = session.snapshot()
    assert snap["health"] == 20
    assert snap["deck_count"] == 40
    assert snap["discard"] == []
    assert snap["weapon"] is None
    assert snap["status"] == "playing"
    assert snap["can_flee"] is True
    assert snap["seed"] == 6


def test_changing_ranking_system_starts_new_quest() -> None:
    session = GameSession(seed=11)
    session.flee()
    assert not session.state.can_flee

    session.set_ranking_system("alternate")
    assert session.ranking_system == "alternate"
    assert session.state.can_flee
    assert session.state.rooms_entered == 1
    assert session.state.action_log == []


def test_unknown_ranking_system() -> None:
    with pytest.raises(ValueError):
        GameSession(ranking_system="roman")  # type: ignore[arg-type]
    session = GameSession(seed=1)
    with pytest.raises(ValueError):
        session.set_ranking_system("roman")  # type: ignore[arg-type]


def test_labels_follow_ranking_but_mechanics_do_not() -> None:
    ace = Card(id="spades-14", suit="spades", rank=14)
    pot = Card(id="hearts-2", suit="hearts", rank=2)
    session = GameSession(seed=1)
    session.new_session(seed=1, deck=[ace, pot])
    room = session.snapshot()["room"]
    assert isinstance(room, list)
    assert room[0]["label"] == "A♠"

    session = GameSession(ranking_system="alternate", seed=1)
    session.new_session(seed=1, deck=[ace, pot])
    room = session.snapshot()["room"]
    assert isinstance(room, list)
    assert room[0]["label"] == "K♠"
    assert session.preview(0) == -14


def test_events_forwarded_to_listener() -> None:
    seen: list[tuple[str, str]] = []

    def listener(kind: str, events: Sequence[Event]) -> None:
        for e in events:
            seen.append((kind, str(e.get("type", ""))))

    session = GameSession(seed=3, on_events=listener)
    assert ("events", "ROOM_DRAWN") in seen
    assert seen[0][0] == "session_started"

    seen.clear()
    res = session.flee()
    assert res.ok
    assert [t for _, t in seen] == ["FLED", "ROOM_DRAWN"]

    seen.clear()
    assert not session.flee().ok
    assert seen == []


def test_intents_ignored_after_game_over() -> None:
    monster = Card(id="clubs-12", suit="clubs", rank=12)
    session = GameSession(seed=1)
    session.new_session(seed=1, deck=[monster])
    session.select_room_slot(0)
    assert session.status == "won"
    assert not session.flee().ok
    assert not session.toggle_bare_hands().ok
    assert not session.select_room_slot(0).ok

    session.new_session(seed=2)
    assert session.status == "playing"


def test_graveyard_grouping() -> None:
    cards = [
        Card(id="spades-9", suit="spades", rank=9),
        Card(id="hearts-4", suit="hearts", rank=4),
        Card(id="spades-3", suit="spades", rank=3),
        Card(id="diamonds-2", suit="diamonds", rank=2),
        Card(id="clubs-14", suit="clubs", rank=14),
    ]
    session = GameSession(seed=1)
    session.new_session(seed=1, deck=cards)
    for slot in (0, 1, 2):
        assert session.select_room_slot(slot).ok

    groups = session.graveyard()
    assert list(groups) == ["hearts", "diamonds", "spades", "clubs"]
    assert [c.rank for c in groups["spades"]] == [3, 9]
    assert [c.rank for c in groups["hearts"]] == [4]
    assert groups["diamonds"] == []
