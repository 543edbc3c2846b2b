"""
Catalog - Movie records and the read-only index the engine queries.

The catalog is populated once (usually from the TMDB CSV pair) before
any game starts and is never mutated by the engine.
"""

from .models import Movie, Person, CreditRole
from .index import Catalog, MovieCatalog
from .loader import load_tmdb_catalog

__all__ = [
    "Movie",
    "Person",
    "CreditRole",
    "Catalog",
    "MovieCatalog",
    "load_tmdb_catalog",
]
