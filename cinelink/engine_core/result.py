"""
Move Results - What the engine reports back for each submission.

Outcomes:
- USAGE_ERROR: caller bug (game over, no link rule); nothing changed
- EMPTY_INPUT: blank title under the "signal" policy; nothing changed
- FORFEIT: the submitting player lost (see ForfeitReason)
- VALID: move accepted
- WIN: move accepted and the player met the win condition
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..catalog import Movie
    from .state import Player


class MoveOutcome(Enum):
    USAGE_ERROR = "usage_error"
    EMPTY_INPUT = "empty_input"
    FORFEIT = "forfeit"
    VALID = "valid"
    WIN = "win"


class ForfeitReason(Enum):
    EMPTY_TITLE = "empty_title"
    NOT_FOUND = "not_found"
    REPEATED = "repeated"
    INVALID_LINK = "invalid_link"


class EmptyTitlePolicy(Enum):
    """How a blank submission is treated."""
    FORFEIT = "forfeit"  # Submitting player loses
    SIGNAL = "signal"  # Non-terminal EMPTY_INPUT, caller may re-prompt


@dataclass(frozen=True)
class MoveResult:
    """Result of one submit_move() call."""
    outcome: MoveOutcome
    message: str
    forfeit_reason: ForfeitReason | None = None
    movie: Movie | None = None
    justification: str | None = None
    winner: Player | None = None

    @property
    def accepted(self) -> bool:
        return self.outcome in {MoveOutcome.VALID, MoveOutcome.WIN}

    @property
    def is_terminal(self) -> bool:
        return self.outcome in {MoveOutcome.FORFEIT, MoveOutcome.WIN}

    @classmethod
    def usage_error(cls, message: str) -> MoveResult:
        return cls(MoveOutcome.USAGE_ERROR, message)

    @classmethod
    def empty_input(cls) -> MoveResult:
        return cls(MoveOutcome.EMPTY_INPUT, "No movie title entered.")

    @classmethod
    def forfeit(
        cls,
        reason: ForfeitReason,
        message: str,
        winner: Player,
        movie: Movie | None = None,
    ) -> MoveResult:
        return cls(
            MoveOutcome.FORFEIT,
            message,
            forfeit_reason=reason,
            movie=movie,
            winner=winner,
        )

    @classmethod
    def valid(cls, movie: Movie, justification: str) -> MoveResult:
        return cls(
            MoveOutcome.VALID,
            f"{movie.title} is a valid link!",
            movie=movie,
            justification=justification,
        )

    @classmethod
    def win(cls, movie: Movie, justification: str, winner: Player) -> MoveResult:
        return cls(
            MoveOutcome.WIN,
            f"{movie.title} is the winning link! {winner.name} wins!",
            movie=movie,
            justification=justification,
            winner=winner,
        )
