from __future__ import annotations

from dataclasses import dataclass, replace

from .types import MAX_HEALTH, Weapon


@dataclass(frozen=True)
class FightOutcome:
    damage: int
    weapon: Weapon | None


def weapon_usable(monster_value: int, weapon: Weapon | None, bare_hands: bool) -> bool:
    if weapon is None or bare_hands:
        return False
    if weapon.last_monster_defeated is None:
        return True
    return monster_value < weapon.last_monster_defeated


def resolve_fight(monster_value: int, weapon: Weapon | None, bare_hands: bool) -> FightOutcome:
    """Damage taken from a monster and the weapon as it stands afterwards.

    Pure: the caller applies the damage and keeps the returned weapon. Using
    the weapon always tightens its ratchet to the monster's value, even when
    the blow is fully absorbed.
    """
    if weapon is not None and weapon_usable(monster_value, weapon, bare_hands):
        damage = max(0, monster_value - weapon.strength)
        return FightOutcome(damage=damage, weapon=replace(weapon, last_monster_defeated=monster_value))
    return FightOutcome(damage=monster_value, weapon=weapon)


def potion_heal(health: int, potion_value: int, potion_used: bool, max_health: int = MAX_HEALTH) -> int:
    """Health actually restored by a potion; only the first one in a room counts."""
    if potion_used:
        return 0
    return max(0, min(max_health - health, potion_value))
