"""
Move History - Append-only log of the movies played in one game.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from ..catalog import Movie
    from .state import Player


SEED_RULE_ID = "N/A"
SEED_JUSTIFICATION = "Initial Game Movie"


@dataclass(frozen=True)
class GameMove:
    """One history entry. player is None only for the seed movie."""
    movie: Movie
    player: Player | None
    link_rule_id: str
    justification: str
    first_move: bool = False

    @property
    def is_seed(self) -> bool:
        return self.player is None


class MoveHistory:
    """
    Ordered, append-only record of moves.

    Entry 0 is the seed movie; every later entry belongs to a player.
    """

    def __init__(self):
        self._moves: list[GameMove] = []

    def seed(self, movie: Movie) -> GameMove:
        """Start the history with the system-chosen movie."""
        if self._moves:
            raise ValueError("History already seeded")
        move = GameMove(movie, None, SEED_RULE_ID, SEED_JUSTIFICATION)
        self._moves.append(move)
        return move

    def record(
        self,
        movie: Movie,
        player: Player,
        link_rule_id: str,
        justification: str,
        first_move: bool = False,
    ) -> GameMove:
        """Append a player move."""
        if not self._moves:
            raise ValueError("History must be seeded before recording moves")
        move = GameMove(movie, player, link_rule_id, justification, first_move)
        self._moves.append(move)
        return move

    def clear(self):
        self._moves.clear()

    def contains_title(self, title: str) -> bool:
        """Case-insensitive check against every movie played so far."""
        folded = title.casefold()
        return any(m.movie.title.casefold() == folded for m in self._moves)

    @property
    def last(self) -> GameMove | None:
        return self._moves[-1] if self._moves else None

    @property
    def only_seed(self) -> bool:
        """True when no player has moved yet."""
        return len(self._moves) == 1

    @property
    def entries(self) -> tuple[GameMove, ...]:
        return tuple(self._moves)

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[GameMove]:
        return iter(tuple(self._moves))

    def __getitem__(self, index: int) -> GameMove:
        return self._moves[index]
