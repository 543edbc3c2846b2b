"""
Pytest fixtures for CineLink tests.
"""

import csv
import json

import pytest

from ..catalog import Movie, MovieCatalog, CreditRole
from ..engine_core import GameEngine, Player, EmptyTitlePolicy, WinConditionKind


class ScriptedRandom:
    """
    Stand-in for random.Random that returns scripted picks.

    Each choice() call consumes the next scripted value, which must be
    one of the options offered. Falls back to the first option once
    the script runs out.
    """

    def __init__(self, picks=()):
        self.picks = list(picks)
        self.offered: list[list] = []

    def choice(self, seq):
        self.offered.append(list(seq))
        if not self.picks:
            return seq[0]
        pick = self.picks.pop(0)
        assert pick in seq, f"{pick!r} not among {list(seq)!r}"
        return pick


def make_movie(title, year, genres=(), **people) -> Movie:
    """Build a movie; people keyword args map role name -> list of names."""
    movie = Movie(title=title, year=year)
    for genre in genres:
        movie.add_genre(genre)
    for role_name, names in people.items():
        for name in names:
            movie.add_person(name, CreditRole(role_name))
    return movie


@pytest.fixture
def movies() -> list[Movie]:
    return [
        make_movie(
            "Inception", 2010, ["Action", "Science Fiction", "Thriller"],
            actor=["Leonardo DiCaprio", "Tom Hardy", "Michael Caine"],
            director=["Christopher Nolan"],
            writer=["Christopher Nolan"],
            composer=["Hans Zimmer"],
            cinematographer=["Wally Pfister"],
        ),
        make_movie(
            "The Prestige", 2006, ["Drama", "Mystery"],
            actor=["Hugh Jackman", "Christian Bale", "Michael Caine"],
            director=["Christopher Nolan"],
            writer=["Jonathan Nolan", "Christopher Nolan"],
            composer=["David Julyan"],
            cinematographer=["Wally Pfister"],
        ),
        make_movie(
            "The Dark Knight", 2008, ["Action", "Crime", "Drama"],
            actor=["Christian Bale", "Heath Ledger", "Michael Caine"],
            director=["Christopher Nolan"],
            writer=["Jonathan Nolan", "Christopher Nolan"],
            composer=["Hans Zimmer", "James Newton Howard"],
            cinematographer=["Wally Pfister"],
        ),
        make_movie(
            "Interstellar", 2014, ["Adventure", "Drama", "Science Fiction"],
            actor=["Matthew McConaughey", "Anne Hathaway", "Michael Caine"],
            director=["Christopher Nolan"],
            writer=["Jonathan Nolan", "Christopher Nolan"],
            composer=["Hans Zimmer"],
            cinematographer=["Hoyte van Hoytema"],
        ),
        make_movie(
            "Jaws", 1975, ["Adventure", "Thriller"],
            actor=["Roy Scheider", "Robert Shaw"],
            director=["Steven Spielberg"],
            writer=["Peter Benchley"],
            composer=["John Williams"],
            cinematographer=["Bill Butler"],
        ),
        make_movie(
            "Catch Me If You Can", 2002, ["Crime", "Drama"],
            actor=["Leonardo DiCaprio", "Tom Hanks"],
            director=["Steven Spielberg"],
            writer=["Jeff Nathanson"],
            composer=["John Williams"],
            cinematographer=["Janusz Kaminski"],
        ),
    ]


@pytest.fixture
def catalog(movies) -> MovieCatalog:
    return MovieCatalog(movies)


@pytest.fixture
def make_engine(catalog):
    """
    Factory for engines with scripted randomness.

    Picks are consumed in order: seed title, win-condition family,
    win-condition target.
    """
    def _make(*picks, movies=None, threshold=1, policy=EmptyTitlePolicy.FORFEIT):
        source = catalog if movies is None else MovieCatalog(movies)
        return GameEngine(
            source,
            Player("Alice"),
            Player("Bob"),
            rng=ScriptedRandom(picks),
            win_threshold=threshold,
            empty_title_policy=policy,
        )
    return _make


@pytest.fixture
def engine(make_engine) -> GameEngine:
    """Started game: seed Jaws, win by naming a Mystery movie."""
    engine = make_engine("Jaws", WinConditionKind.GENRE, "Mystery")
    engine.start_new_game()
    return engine


def _write_csv(path, header, rows):
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        writer.writerows(rows)


@pytest.fixture
def tmdb_files(tmp_path):
    movies_csv = tmp_path / "movies.csv"
    credits_csv = tmp_path / "credits.csv"
    _write_csv(movies_csv, ["budget", "Genres", "ID", "Title", "Release_Date"], [
        [160000000, json.dumps([{"id": 28, "name": "Action"}, {"id": 878, "name": "Science Fiction"}]),
         27205, "Inception", "2010-07-15"],
        [40000000, json.dumps([{"id": 18, "name": "Drama"}]), 1124, "The Prestige", "2006-10-19"],
        [0, "[]", 999, "Undated", ""],
        [0, "not json", 998, "Broken", "2001-01-01"],
    ])
    _write_csv(credits_csv, ["movie_id", "title", "cast", "crew"], [
        [27205, "Inception",
         json.dumps([{"name": "Leonardo DiCaprio"}, {"name": "Michael Caine"}]),
         json.dumps([
             {"job": "Director", "name": "Christopher Nolan"},
             {"job": "Screenplay", "name": "Christopher Nolan"},
             {"job": "Original Music Composer", "name": "Hans Zimmer"},
             {"job": "Director of Photography", "name": "Wally Pfister"},
             {"job": "Editor", "name": "Lee Smith"},
             {"job": "Casting Director", "name": "John Papsidera"},
         ])],
        [1124, "The Prestige",
         json.dumps([{"name": "Christian Bale"}, {"name": "Michael Caine"}]),
         json.dumps([{"job": "Director", "name": "Christopher Nolan"}])],
        [424242, "Unknown", "[]", "[]"],
    ])
    return movies_csv, credits_csv
