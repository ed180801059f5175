"""Deterministic, headless rules engine for Scoundrel.

IMPORTANT: This package must never import pygame.
"""

from .actions import Action, FleeAction, SelectSlotAction, ToggleBareHandsAction
from .dungeon import DungeonConfig, DungeonState, StepResult, new_dungeon, step
from .session import GameSession
from .types import Card, GameStatus, RankingSystem, Role, Suit, Weapon

__all__ = [
    "Action",
    "Card",
    "DungeonConfig",
    "DungeonState",
    "FleeAction",
    "GameSession",
    "GameStatus",
    "RankingSystem",
    "Role",
    "SelectSlotAction",
    "StepResult",
    "Suit",
    "ToggleBareHandsAction",
    "Weapon",
    "new_dungeon",
    "step",
]
