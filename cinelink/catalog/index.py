"""
Movie Catalog - Read-only title index consumed by the engine.

The engine only needs two queries:
- lookup_by_title(title): exact, case-sensitive title match
- all_titles(): every known title, for seed selection and
  for deriving win-condition targets
"""

from __future__ import annotations
from typing import Iterable, Protocol

from loguru import logger

from .models import Movie


class Catalog(Protocol):
    """What the game engine requires from a movie catalog."""

    def lookup_by_title(self, title: str) -> Movie | None:
        ...

    def all_titles(self) -> set[str]:
        ...


class MovieCatalog:
    """
    In-memory catalog indexed by exact title.

    Usage:
        catalog = MovieCatalog([inception, tenet])
        catalog.lookup_by_title("Inception")
    """

    def __init__(self, movies: Iterable[Movie] = ()):
        self._by_title: dict[str, Movie] = {}
        for movie in movies:
            self.add(movie)

    def add(self, movie: Movie) -> bool:
        """
        Index a movie by title.

        Returns False if the title was already indexed; the first
        record wins.
        """
        if movie.title in self._by_title:
            logger.warning(
                f"[Catalog] Duplicate title '{movie.title}' ({movie.year}) ignored"
            )
            return False
        self._by_title[movie.title] = movie
        return True

    def lookup_by_title(self, title: str) -> Movie | None:
        return self._by_title.get(title)

    def all_titles(self) -> set[str]:
        return set(self._by_title)

    def movies(self) -> list[Movie]:
        return list(self._by_title.values())

    def genres(self) -> set[str]:
        """All non-blank genres across the catalog."""
        return {
            genre
            for movie in self._by_title.values()
            for genre in movie.genres
            if genre and genre.strip()
        }

    def years(self) -> set[int]:
        """All known (positive) release years."""
        return {m.year for m in self._by_title.values() if m.year > 0}

    def __len__(self) -> int:
        return len(self._by_title)

    def __contains__(self, title: object) -> bool:
        return title in self._by_title
