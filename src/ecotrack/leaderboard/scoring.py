"""Leaderboard scoring. Pure functions, no I/O.

composite = avg_quiz_score + total_challenges * 5 + badge_count * 10

``avg_quiz_score`` is the mean per-attempt accuracy in percent, where an
attempt with no questions counts as 0. It is rounded half up to an integer
before it enters the composite.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

LEADERBOARD_SIZE = 20
CHALLENGE_WEIGHT = 5
BADGE_WEIGHT = 10


@dataclass(frozen=True)
class LeaderboardEntry:
    user_id: str
    full_name: str
    email: str
    total_quizzes: int
    avg_quiz_score: int
    total_challenges: int
    badge_count: int

    @property
    def score(self) -> int:
        return composite_score(self.avg_quiz_score, self.total_challenges, self.badge_count)


def round_accuracy(mean_accuracy: float | None) -> int:
    """Round half up; no attempts means 0."""
    if mean_accuracy is None:
        return 0
    return math.floor(mean_accuracy + 0.5)


def composite_score(avg_quiz_score: int, total_challenges: int, badge_count: int) -> int:
    return avg_quiz_score + total_challenges * CHALLENGE_WEIGHT + badge_count * BADGE_WEIGHT


def rank_entries(entries: list[LeaderboardEntry], size: int = LEADERBOARD_SIZE) -> list[LeaderboardEntry]:
    """Best composite first, keeping input order among ties, cut to ``size``."""
    # sorted() is stable, so equal scores keep the caller's order
    return sorted(entries, key=lambda e: e.score, reverse=True)[:size]
