"""Badge requirement table.

Each badge stores a requirement key. Keys that name a known ``Requirement``
map to a predicate over the user's activity counts; anything else (for
example ``challenge_streak_7``, which has no rule yet) is never satisfied.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, TypeVar


@dataclass(frozen=True)
class BadgeCounts:
    """Activity totals a badge rule can look at."""

    quiz_attempts: int = 0
    carbon_footprints: int = 0
    completed_challenges: int = 0
    community_posts: int = 0


class Requirement(str, Enum):
    QUIZ_COUNT_1 = "quiz_count_1"
    QUIZ_COUNT_10 = "quiz_count_10"
    CARBON_CALC_1 = "carbon_calc_1"
    CHALLENGE_COUNT_5 = "challenge_count_5"
    POST_COUNT_1 = "post_count_1"


RULES: dict[Requirement, Callable[[BadgeCounts], bool]] = {
    Requirement.QUIZ_COUNT_1: lambda c: c.quiz_attempts >= 1,
    Requirement.QUIZ_COUNT_10: lambda c: c.quiz_attempts >= 10,
    Requirement.CARBON_CALC_1: lambda c: c.carbon_footprints >= 1,
    Requirement.CHALLENGE_COUNT_5: lambda c: c.completed_challenges >= 5,
    Requirement.POST_COUNT_1: lambda c: c.community_posts >= 1,
}


def parse_requirement(key: str) -> Requirement | None:
    """Return the Requirement for a stored key, or None if the key is unknown."""
    try:
        return Requirement(key)
    except ValueError:
        return None


def is_satisfied(key: str, counts: BadgeCounts) -> bool:
    requirement = parse_requirement(key)
    if requirement is None:
        return False
    return RULES[requirement](counts)


class _BadgeLike(Protocol):
    id: str
    requirement: str


B = TypeVar("B", bound=_BadgeLike)


def select_new_badges(
    badges: Iterable[B],
    earned_ids: set[str],
    counts: BadgeCounts,
) -> list[B]:
    """Badges not yet earned whose requirement now holds, in input order."""
    return [b for b in badges if b.id not in earned_ids and is_satisfied(b.requirement, counts)]
