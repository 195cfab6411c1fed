"""Leaderboard ranking over real activity."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def _attempt(client: AsyncClient, total: int, correct: int) -> None:
    response = await client.post(
        "/api/quiz/attempts", json={"score": correct, "totalQuestions": total, "correctAnswers": correct}
    )
    assert response.status_code == 201


async def _completed_challenge(client: AsyncClient) -> None:
    created = await client.post("/api/challenges", json={"challengeName": "Carry a cloth bag"})
    await client.put(f"/api/challenges/{created.json()['data']['id']}", json={"completed": True})


async def test_composite_score(authed_client: AsyncClient):
    await _attempt(authed_client, 10, 8)
    await _attempt(authed_client, 5, 4)
    await _completed_challenge(authed_client)
    await _completed_challenge(authed_client)
    await authed_client.post("/api/badges/check")

    body = (await authed_client.get("/api/leaderboard")).json()
    entry = body["data"][0]
    assert entry["user_id"] == authed_client.user["id"]
    assert entry["total_quizzes"] == 2
    assert entry["avg_quiz_score"] == 80
    assert entry["total_challenges"] == 2
    assert entry["badge_count"] == 1
    assert entry["score"] == 100


async def test_accuracy_rounds_half_up(authed_client: AsyncClient):
    await _attempt(authed_client, 8, 7)
    await _attempt(authed_client, 8, 6)
    # (87.5 + 75) / 2 = 81.25
    entry = (await authed_client.get("/api/leaderboard")).json()["data"][0]
    assert entry["avg_quiz_score"] == 81

    await _attempt(authed_client, 4, 3)
    # (87.5 + 75 + 75) / 3 = 79.1666...
    entry = (await authed_client.get("/api/leaderboard")).json()["data"][0]
    assert entry["avg_quiz_score"] == 79


async def test_empty_attempt_counts_as_zero(authed_client: AsyncClient):
    await _attempt(authed_client, 0, 0)
    await _attempt(authed_client, 10, 10)
    entry = (await authed_client.get("/api/leaderboard")).json()["data"][0]
    assert entry["avg_quiz_score"] == 50


async def test_ordering_and_anonymous(authed_client: AsyncClient, make_user):
    quiet = await make_user("quiet@example.com", None)
    busy = await make_user("busy@example.com", "Nusrat Jahan")
    await _attempt(busy, 10, 10)
    await _completed_challenge(authed_client)

    body = (await authed_client.get("/api/leaderboard")).json()
    assert body["count"] == 3
    scores = [e["score"] for e in body["data"]]
    assert scores == sorted(scores, reverse=True)
    assert body["data"][0]["full_name"] == "Nusrat Jahan"
    assert body["data"][-1]["user_id"] == quiet.user["id"]
    assert body["data"][-1]["full_name"] == "Anonymous"
    assert body["data"][-1]["score"] == 0


async def test_top_twenty_only(make_user):
    users = [await make_user(f"user{i}@example.com", f"User {i}") for i in range(22)]

    body = (await users[0].get("/api/leaderboard")).json()
    assert len(body["data"]) == 20
    assert body["count"] == 22


async def test_ties_keep_signup_order(make_user):
    first = await make_user("first@example.com", "First")
    second = await make_user("second@example.com", "Second")

    data = (await first.get("/api/leaderboard")).json()["data"]
    assert [e["user_id"] for e in data] == [first.user["id"], second.user["id"]]


@pytest.mark.filterwarnings("error::sqlalchemy.exc.SADeprecationWarning")
async def test_ranking_queries_are_warning_free(authed_client: AsyncClient):
    await _attempt(authed_client, 4, 2)
    await _completed_challenge(authed_client)
    await authed_client.post("/api/badges/check")

    entry = (await authed_client.get("/api/leaderboard")).json()["data"][0]
    assert entry["total_challenges"] == 1
    assert entry["badge_count"] == 1
