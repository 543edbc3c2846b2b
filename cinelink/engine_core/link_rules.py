"""
Link Rules - Decide whether two movies share a credited person.

A LinkRule is a tagged variant over the credit role: all five rules
(actor, director, writer, composer, cinematographer) share a single
implementation and differ only in which credit set they compare.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..catalog import CreditRole, Movie, Person


@dataclass(frozen=True)
class LinkCheck:
    """Outcome of validating one link."""
    valid: bool
    reason: str  # Justification if valid, explanation if not
    shared_person: Person | None = None


@dataclass(frozen=True)
class LinkRule:
    """Link by a shared person in one credit role."""
    role: CreditRole

    @property
    def rule_id(self) -> str:
        return self.role.value

    @property
    def label(self) -> str:
        return self.role.label

    def shared_people(self, previous: Movie, candidate: Movie) -> set[Person]:
        """People credited in this role on both movies (matched by name)."""
        return previous.people(self.role) & candidate.people(self.role)

    def is_valid_link(self, previous: Movie, candidate: Movie) -> bool:
        return bool(self.shared_people(previous, candidate))

    def validate(self, previous: Movie, candidate: Movie) -> LinkCheck:
        shared = self.shared_people(previous, candidate)
        if not shared:
            return LinkCheck(
                valid=False,
                reason=(
                    f"No shared {self.role.value} between "
                    f"'{previous.title}' and '{candidate.title}'"
                ),
            )
        person = min(shared, key=lambda p: p.name)
        return LinkCheck(
            valid=True,
            reason=f"Shared {self.label}: {person.name}",
            shared_person=person,
        )

    def __str__(self) -> str:
        return self.label


ACTOR_LINK = LinkRule(CreditRole.ACTOR)
DIRECTOR_LINK = LinkRule(CreditRole.DIRECTOR)
WRITER_LINK = LinkRule(CreditRole.WRITER)
COMPOSER_LINK = LinkRule(CreditRole.COMPOSER)
CINEMATOGRAPHER_LINK = LinkRule(CreditRole.CINEMATOGRAPHER)

LINK_RULES: dict[str, LinkRule] = {
    rule.rule_id: rule
    for rule in (ACTOR_LINK, DIRECTOR_LINK, WRITER_LINK, COMPOSER_LINK, CINEMATOGRAPHER_LINK)
}


def link_rule_for(name: str | CreditRole) -> LinkRule:
    """
    Look up a link rule by role or role name (case-insensitive).

    Raises:
        ValueError: if no rule matches
    """
    if isinstance(name, CreditRole):
        return LINK_RULES[name.value]
    rule = LINK_RULES.get(name.strip().lower())
    if rule is None:
        raise ValueError(f"Unknown link rule: {name}")
    return rule
