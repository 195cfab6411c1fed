"""Leaderboard computation.

The board is recomputed from scratch on every call: one grouped query per
source table, joined in memory against the user list.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import case, func, literal, select

from ecotrack.db.models import DailyChallenge, QuizAttempt, User, UserBadge
from ecotrack.leaderboard.scoring import LeaderboardEntry, rank_entries, round_accuracy

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


async def _quiz_stats(db: AsyncSession) -> dict[str, tuple[int, float | None]]:
    accuracy = case(
        (QuizAttempt.total_questions > 0, QuizAttempt.correct_answers * 100.0 / QuizAttempt.total_questions),
        else_=literal(0.0),
    )
    result = await db.execute(
        select(QuizAttempt.user_id, func.count(), func.avg(accuracy)).group_by(QuizAttempt.user_id)
    )
    return {user_id: (count, float(avg) if avg is not None else None) for user_id, count, avg in result}


async def _completed_challenges(db: AsyncSession) -> dict[str, int]:
    result = await db.execute(
        select(DailyChallenge.user_id, func.count())
        .where(DailyChallenge.completed.is_(True))
        .group_by(DailyChallenge.user_id)
    )
    return dict(result.all())


async def _badge_counts(db: AsyncSession) -> dict[str, int]:
    result = await db.execute(select(UserBadge.user_id, func.count()).group_by(UserBadge.user_id))
    return dict(result.all())


async def rank(db: AsyncSession) -> tuple[list[LeaderboardEntry], int]:
    """Return the top entries, best first, and the number of users ranked."""
    users = (
        await db.execute(select(User.id, User.full_name, User.email).order_by(User.created_at, User.id))
    ).all()
    quiz = await _quiz_stats(db)
    challenges = await _completed_challenges(db)
    badges = await _badge_counts(db)

    entries = []
    for user_id, full_name, email in users:
        total_quizzes, mean_accuracy = quiz.get(user_id, (0, None))
        entries.append(
            LeaderboardEntry(
                user_id=user_id,
                full_name=full_name or "Anonymous",
                email=email,
                total_quizzes=total_quizzes,
                avg_quiz_score=round_accuracy(mean_accuracy),
                total_challenges=challenges.get(user_id, 0),
                badge_count=badges.get(user_id, 0),
            )
        )

    return rank_entries(entries), len(entries)
