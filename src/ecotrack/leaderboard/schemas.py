"""Leaderboard response schema."""

from __future__ import annotations

from ecotrack.schemas import ORMModel


class LeaderboardEntryResponse(ORMModel):
    user_id: str
    full_name: str
    email: str
    total_quizzes: int
    avg_quiz_score: int
    total_challenges: int
    badge_count: int
    score: int
