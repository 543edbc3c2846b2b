"""
TMDB Loader - Builds a MovieCatalog from the TMDB 5000 CSV pair.

Two files are read:
- movies CSV: id, title, release_date, genres (JSON list of {"name": ...})
- credits CSV: movie_id, cast (JSON list), crew (JSON list with "job")

Malformed rows are skipped with a warning; a missing file is an error.
"""

from __future__ import annotations
import csv
import json
from pathlib import Path
from typing import Any

from loguru import logger

from .index import MovieCatalog
from .models import CreditRole, Movie


# Only these exact jobs count as directing; "Casting Director" and
# "Art Director" do not.
DIRECTOR_JOBS = frozenset({"director", "co-director"})

# Crew job keywords -> credit role. Checked in order, first match wins.
CREW_JOB_ROLES: list[tuple[tuple[str, ...], CreditRole]] = [
    (("cinematographer", "photography"), CreditRole.CINEMATOGRAPHER),
    (("writer", "screenplay"), CreditRole.WRITER),
    (("composer",), CreditRole.COMPOSER),
]

# TMDB rows carry large JSON blobs in single cells
csv.field_size_limit(2**31 - 1)


def load_tmdb_catalog(movies_csv: str | Path, credits_csv: str | Path) -> MovieCatalog:
    """
    Load movies and their credits into a catalog.

    Raises:
        FileNotFoundError: if either file does not exist
    """
    movies_path = Path(movies_csv)
    credits_path = Path(credits_csv)
    for path in (movies_path, credits_path):
        if not path.exists():
            raise FileNotFoundError(f"Movie data file not found: {path}")

    logger.info(f"[Loader] Loading movies from {movies_path}...")
    by_id: dict[int, Movie] = {}
    for line_num, row in _read_rows(movies_path):
        try:
            movie = parse_movie_row(row)
        except (KeyError, ValueError) as e:
            logger.warning(f"[Loader] Skipping invalid movie row {line_num}: {e}")
            continue
        by_id[movie.movie_id] = movie

    logger.info(f"[Loader] Loading credits from {credits_path}...")
    for line_num, row in _read_rows(credits_path):
        try:
            apply_credits_row(row, by_id)
        except (KeyError, ValueError) as e:
            logger.warning(f"[Loader] Skipping invalid credits row {line_num}: {e}")

    catalog = MovieCatalog(by_id.values())
    logger.info(f"[Loader] Loaded {len(catalog)} movies.")
    return catalog


def parse_movie_row(row: dict[str, str]) -> Movie:
    """Convert one movies-CSV row into a Movie (without credits)."""
    movie = Movie(
        title=_field(row, "title"),
        year=parse_year(_field(row, "release_date")),
        movie_id=int(_field(row, "id")),
    )
    for genre in _parse_json_list(_field(row, "genres")):
        name = genre.get("name")
        if name:
            movie.add_genre(name)
    return movie


def apply_credits_row(row: dict[str, str], by_id: dict[int, Movie]) -> Movie | None:
    """
    Add the cast and crew of one credits-CSV row to its movie.

    Returns the updated movie, or None if the id is unknown.
    """
    movie = by_id.get(int(_field(row, "movie_id")))
    if movie is None:
        return None

    for member in _parse_json_list(_field(row, "cast")):
        if member.get("name"):
            movie.add_person(member["name"], CreditRole.ACTOR)

    for member in _parse_json_list(_field(row, "crew")):
        name = member.get("name")
        job = member.get("job")
        if not name or not job:
            continue
        role = crew_role_for_job(job)
        if role:
            movie.add_person(name, role)

    return movie


def crew_role_for_job(job: str) -> CreditRole | None:
    """Map a TMDB crew job title to a credit role, if it has one."""
    job = job.strip().lower()
    if job in DIRECTOR_JOBS:
        return CreditRole.DIRECTOR
    for keywords, role in CREW_JOB_ROLES:
        if any(keyword in job for keyword in keywords):
            return role
    return None


def parse_year(date: str | None) -> int:
    """Extract the year from YYYY-MM-DD; 0 when missing or invalid."""
    if not date or len(date) < 4:
        return 0
    try:
        return int(date[:4])
    except ValueError:
        logger.warning(f"[Loader] Invalid release date: {date}")
        return 0


def _read_rows(path: Path):
    """Yield (line number, row) with lower-cased header keys."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames:
            reader.fieldnames = [name.strip().lower() for name in reader.fieldnames]
        for row in reader:
            yield reader.line_num, row


def _field(row: dict[str, str], name: str) -> str:
    value = row.get(name)
    if value is None:
        raise KeyError(f"Missing field: {name}")
    return value


def _parse_json_list(raw: str) -> list[dict[str, Any]]:
    if not raw or not raw.strip():
        return []
    try:
        data = json.loads(raw)
    except ValueError:
        # Some exports double the quotes inside the JSON cell
        data = json.loads(raw.replace('""', '"'))
    if not isinstance(data, list):
        raise ValueError("Expected a JSON list")
    return [item for item in data if isinstance(item, dict)]
