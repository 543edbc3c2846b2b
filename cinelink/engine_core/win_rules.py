"""
Win Rules - Genre-target and year-target win conditions.

One WinCondition is picked at random when a game starts and stays
fixed until the next game. A player wins once at least `threshold`
of their played movies qualify.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Iterable

if TYPE_CHECKING:
    from ..catalog import Movie
    from .state import Player


DEFAULT_WIN_THRESHOLD = 1


class WinConditionKind(Enum):
    GENRE = "genre"
    YEAR = "year"


_QUALIFIERS: dict[WinConditionKind, Callable[[Movie, object], bool]] = {
    WinConditionKind.GENRE: lambda movie, target: target in movie.genres,
    WinConditionKind.YEAR: lambda movie, target: movie.year == target,
}


@dataclass(frozen=True)
class WinCondition:
    """
    A win condition instance.

    target is a genre name for GENRE, a release year for YEAR.
    """
    kind: WinConditionKind
    target: str | int
    threshold: int = DEFAULT_WIN_THRESHOLD

    def __post_init__(self):
        if self.threshold < 1:
            raise ValueError("Win threshold must be at least 1")

    @classmethod
    def genre(cls, genre: str, threshold: int = DEFAULT_WIN_THRESHOLD) -> WinCondition:
        return cls(WinConditionKind.GENRE, genre, threshold)

    @classmethod
    def year(cls, year: int, threshold: int = DEFAULT_WIN_THRESHOLD) -> WinCondition:
        return cls(WinConditionKind.YEAR, year, threshold)

    def qualifies(self, movie: Movie) -> bool:
        return _QUALIFIERS[self.kind](movie, self.target)

    def count(self, movies: Iterable[Movie]) -> int:
        return sum(1 for movie in movies if self.qualifies(movie))

    def check_win(self, player: Player) -> bool:
        return self.count(player.played_movies) >= self.threshold

    def progress(self, player: Player) -> str:
        count = self.count(player.played_movies)
        if self.kind == WinConditionKind.GENRE:
            return f"{count}/{self.threshold} {self.target}"
        return f"{count}/{self.threshold} from {self.target}"

    @property
    def description(self) -> str:
        if self.kind == WinConditionKind.GENRE:
            return f"Player wins by naming {self.threshold} movie(s) in the genre: {self.target}"
        return f"Player wins by naming {self.threshold} movie(s) released in {self.target}"

    def __str__(self) -> str:
        return self.description
