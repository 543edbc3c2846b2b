"""
Game State - Players, phases and the per-game state container.

A GameState is constructed once with two players and reset for each
new game. The engine is the only thing that mutates it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .history import MoveHistory

if TYPE_CHECKING:
    from ..catalog import Movie
    from .link_rules import LinkRule
    from .win_rules import WinCondition


class GamePhase(Enum):
    """High-level game phases."""
    SETUP = "setup"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(eq=False)
class Player:
    """
    Per-game player state.

    The name is fixed for the player's lifetime; played movies and
    link usage are cleared by reset_for_new_game().
    """
    name: str
    played_movies: list[Movie] = field(default_factory=list)
    link_usage: dict[str, int] = field(default_factory=dict)

    def add_played_movie(self, movie: Movie):
        self.played_movies.append(movie)

    def record_link_usage(self, rule_id: str):
        self.link_usage[rule_id] = self.link_usage.get(rule_id, 0) + 1

    def reset_for_new_game(self):
        self.played_movies.clear()
        self.link_usage.clear()

    def __str__(self) -> str:
        return self.name


@dataclass
class GameState:
    """
    Complete state of the game in progress.

    Invariants:
    - history[0] is the seed move once the game is initialized
    - active_link_rule is cleared after every accepted move and turn switch
    - phase becomes GAME_OVER exactly once per game
    """
    current_player: Player
    other_player: Player

    phase: GamePhase = GamePhase.SETUP
    winner: Player | None = None
    unplayable: bool = False
    active_link_rule: LinkRule | None = None
    win_condition: WinCondition | None = None
    history: MoveHistory = field(default_factory=MoveHistory)
    moves_made: int = 0  # Player moves after the seed

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    def reset(self):
        """Clear everything that belongs to a single game."""
        self.phase = GamePhase.SETUP
        self.winner = None
        self.unplayable = False
        self.active_link_rule = None
        self.win_condition = None
        self.history.clear()
        self.moves_made = 0
        self.current_player.reset_for_new_game()
        self.other_player.reset_for_new_game()

    def swap_players(self):
        self.current_player, self.other_player = self.other_player, self.current_player

    def finish(self, winner: Player | None):
        """Mark the game terminal with the given winner (None for unplayable)."""
        self.phase = GamePhase.GAME_OVER
        self.winner = winner
