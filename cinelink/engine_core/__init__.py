"""
Engine Core - Game state and move validation for the movie chain game.

The engine:
1. Seeds each game with a random catalog movie
2. Picks a random win condition (genre or release year)
3. Validates each move with the active link rule
4. Records history and decides wins and forfeits
"""

from .state import GameState, GamePhase, Player
from .history import GameMove, MoveHistory
from .link_rules import (
    LinkRule,
    LinkCheck,
    LINK_RULES,
    ACTOR_LINK,
    DIRECTOR_LINK,
    WRITER_LINK,
    COMPOSER_LINK,
    CINEMATOGRAPHER_LINK,
    link_rule_for,
)
from .win_rules import WinCondition, WinConditionKind
from .result import MoveResult, MoveOutcome, ForfeitReason, EmptyTitlePolicy
from .engine import GameEngine

__all__ = [
    "GameState",
    "GamePhase",
    "Player",
    "GameMove",
    "MoveHistory",
    "LinkRule",
    "LinkCheck",
    "LINK_RULES",
    "ACTOR_LINK",
    "DIRECTOR_LINK",
    "WRITER_LINK",
    "COMPOSER_LINK",
    "CINEMATOGRAPHER_LINK",
    "link_rule_for",
    "WinCondition",
    "WinConditionKind",
    "MoveResult",
    "MoveOutcome",
    "ForfeitReason",
    "EmptyTitlePolicy",
    "GameEngine",
]
