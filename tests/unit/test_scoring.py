"""Unit tests for leaderboard scoring."""

from __future__ import annotations

from ecotrack.leaderboard.scoring import (
    LEADERBOARD_SIZE,
    LeaderboardEntry,
    composite_score,
    rank_entries,
    round_accuracy,
)


def _entry(user_id: str, avg: int = 0, challenges: int = 0, badges: int = 0) -> LeaderboardEntry:
    return LeaderboardEntry(
        user_id=user_id,
        full_name=user_id.title(),
        email=f"{user_id}@example.com",
        total_quizzes=1 if avg else 0,
        avg_quiz_score=avg,
        total_challenges=challenges,
        badge_count=badges,
    )


class TestCompositeScore:
    def test_formula(self):
        """80% accuracy, 2 challenges, 1 badge = 80 + 10 + 10."""
        assert composite_score(80, 2, 1) == 100

    def test_zero(self):
        assert composite_score(0, 0, 0) == 0

    def test_entry_property(self):
        assert _entry("a", avg=50, challenges=3, badges=2).score == 85


class TestRoundAccuracy:
    def test_no_attempts(self):
        assert round_accuracy(None) == 0

    def test_half_rounds_up(self):
        assert round_accuracy(62.5) == 63
        assert round_accuracy(87.5) == 88

    def test_below_half_rounds_down(self):
        assert round_accuracy(81.25) == 81
        assert round_accuracy(0.4) == 0


class TestRankEntries:
    def test_descending(self):
        ranked = rank_entries([_entry("low", avg=10), _entry("high", avg=90), _entry("mid", challenges=8)])
        assert [e.user_id for e in ranked] == ["high", "mid", "low"]

    def test_ties_keep_input_order(self):
        ranked = rank_entries([_entry("first", badges=1), _entry("second", badges=1), _entry("top", badges=2)])
        assert [e.user_id for e in ranked] == ["top", "first", "second"]

    def test_truncates(self):
        entries = [_entry(f"u{i}", avg=i) for i in range(LEADERBOARD_SIZE + 5)]
        ranked = rank_entries(entries)
        assert len(ranked) == LEADERBOARD_SIZE
        assert ranked[0].user_id == f"u{LEADERBOARD_SIZE + 4}"

    def test_fewer_than_size(self):
        assert len(rank_entries([_entry("solo")])) == 1
        assert rank_entries([]) == []
