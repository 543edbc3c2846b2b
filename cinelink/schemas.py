"""
Pydantic Schemas - Serializable views of the game for display layers.

These models are read-only snapshots; nothing here feeds back into
the engine.
"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

from pydantic import BaseModel, Field

from .engine_core.result import ForfeitReason, MoveOutcome, MoveResult

if TYPE_CHECKING:
    from .catalog import Movie
    from .engine_core import GameEngine, GameMove, Player


# =============================================================================
# Shared Models
# =============================================================================

class MovieInfo(BaseModel):
    """Movie information for display."""
    title: str
    year: int
    genres: list[str] = Field(default_factory=list)

    @classmethod
    def from_movie(cls, movie: Movie) -> MovieInfo:
        return cls(title=movie.title, year=movie.year, genres=sorted(movie.genres))


class MoveInfo(BaseModel):
    """One entry of the move history."""
    index: int
    movie: MovieInfo
    player: Optional[str] = Field(default=None, description="None for the seed movie")
    link_rule: str
    justification: str
    first_move: bool = False

    @classmethod
    def from_move(cls, index: int, move: GameMove) -> MoveInfo:
        return cls(
            index=index,
            movie=MovieInfo.from_movie(move.movie),
            player=move.player.name if move.player else None,
            link_rule=move.link_rule_id,
            justification=move.justification,
            first_move=move.first_move,
        )


class PlayerInfo(BaseModel):
    """Player information for display."""
    name: str
    is_current_turn: bool = False
    played_movies: list[str] = Field(default_factory=list)
    link_usage: dict[str, int] = Field(default_factory=dict)
    progress: str = "N/A"


# =============================================================================
# Results and snapshots
# =============================================================================

class MoveResultInfo(BaseModel):
    """Serialized MoveResult."""
    outcome: MoveOutcome
    message: str
    forfeit_reason: Optional[ForfeitReason] = None
    movie: Optional[MovieInfo] = None
    justification: Optional[str] = None
    winner: Optional[str] = None

    @classmethod
    def from_result(cls, result: MoveResult) -> MoveResultInfo:
        return cls(
            outcome=result.outcome,
            message=result.message,
            forfeit_reason=result.forfeit_reason,
            movie=MovieInfo.from_movie(result.movie) if result.movie else None,
            justification=result.justification,
            winner=result.winner.name if result.winner else None,
        )


class GameSnapshot(BaseModel):
    """Full view of the game at a point in time."""
    round_number: int
    game_over: bool
    unplayable: bool = False
    winner: Optional[str] = None
    win_condition: str
    active_link_rule: Optional[str] = None
    last_movie: Optional[MovieInfo] = None
    players: list[PlayerInfo] = Field(default_factory=list)
    history: list[MoveInfo] = Field(default_factory=list)


def _player_info(engine: GameEngine, player: Player) -> PlayerInfo:
    return PlayerInfo(
        name=player.name,
        is_current_turn=player is engine.current_player,
        played_movies=[m.title for m in player.played_movies],
        link_usage=dict(player.link_usage),
        progress=engine.player_progress(player),
    )


def build_snapshot(engine: GameEngine) -> GameSnapshot:
    """Capture the engine's current state as a GameSnapshot."""
    last = engine.last_played_movie
    rule = engine.active_link_rule
    return GameSnapshot(
        round_number=engine.round_number,
        game_over=engine.is_game_over,
        unplayable=engine.is_unplayable,
        winner=engine.winner.name if engine.winner else None,
        win_condition=engine.win_condition_description,
        active_link_rule=rule.rule_id if rule else None,
        last_movie=MovieInfo.from_movie(last) if last else None,
        players=[
            _player_info(engine, engine.current_player),
            _player_info(engine, engine.other_player),
        ],
        history=[MoveInfo.from_move(i, move) for i, move in enumerate(engine.history)],
    )
