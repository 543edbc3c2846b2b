"""
Catalog Models - Movies and the people credited on them.

Identity rules:
- A Movie is identified by (title, year); attribute sets are mutable
  and filled in while the catalog is loaded.
- A Person is identified by name only. The role tag records where the
  person was credited, but two people with the same name are equal
  regardless of role.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


class CreditRole(Enum):
    """Credit categories a person can hold on a movie."""
    ACTOR = "actor"
    DIRECTOR = "director"
    WRITER = "writer"
    COMPOSER = "composer"
    CINEMATOGRAPHER = "cinematographer"

    @property
    def label(self) -> str:
        """Display label, e.g. 'Director'."""
        return self.value.capitalize()


@dataclass(frozen=True)
class Person:
    """A credited person. Equality and hashing use the name only."""
    name: str
    role: CreditRole | None = None

    def __hash__(self):
        return hash(self.name)

    def __eq__(self, other):
        if not isinstance(other, Person):
            return False
        return self.name == other.name

    def __str__(self) -> str:
        if self.role is None:
            return self.name
        return f"{self.name} ({self.role.name})"


@dataclass(eq=False)
class Movie:
    """
    A movie record owned by the catalog.

    Note: genres and credits are mutable, but identity is fixed
    to (title, year).
    """
    title: str
    year: int
    movie_id: int | None = None
    genres: set[str] = field(default_factory=set)
    credits: dict[CreditRole, set[Person]] = field(
        default_factory=lambda: {role: set() for role in CreditRole}
    )

    def __post_init__(self):
        if not self.title or not self.title.strip():
            raise ValueError("Title cannot be empty")

    def __hash__(self):
        return hash((self.title, self.year))

    def __eq__(self, other):
        if not isinstance(other, Movie):
            return False
        return self.title == other.title and self.year == other.year

    def __str__(self) -> str:
        return f"{self.title} ({self.year})"

    def add_genre(self, genre: str):
        self.genres.add(genre)

    def add_person(self, name: str, role: CreditRole) -> Person:
        """Credit a person on this movie under the given role."""
        person = Person(name=name, role=role)
        self.credits.setdefault(role, set()).add(person)
        return person

    def people(self, role: CreditRole) -> set[Person]:
        """Get the people credited under a role."""
        return self.credits.get(role, set())

    @property
    def actors(self) -> set[Person]:
        return self.people(CreditRole.ACTOR)

    @property
    def directors(self) -> set[Person]:
        return self.people(CreditRole.DIRECTOR)

    @property
    def writers(self) -> set[Person]:
        return self.people(CreditRole.WRITER)

    @property
    def composers(self) -> set[Person]:
        return self.people(CreditRole.COMPOSER)

    @property
    def cinematographers(self) -> set[Person]:
        return self.people(CreditRole.CINEMATOGRAPHER)
