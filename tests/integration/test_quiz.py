"""Quiz question bank (admin) and attempts (players)."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

QUESTION = {
    "questionText": "Which renewable energy source is most suitable for rural Bangladesh?",
    "difficulty": "easy",
    "category": "Energy",
    "points": 10,
    "explanation": "Abundant sunlight and cheap panels.",
    "answers": [
        {"answerText": "Wind Energy", "isCorrect": False},
        {"answerText": "Solar Energy", "isCorrect": True},
        {"answerText": "Hydroelectric Power"},
        {"answerText": "Geothermal Energy"},
    ],
}


async def _create(admin: AsyncClient, **overrides) -> dict:
    response = await admin.post("/api/quiz/questions", json={**QUESTION, **overrides})
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestQuestions:
    async def test_create_preserves_answers_and_order(self, admin_client: AsyncClient, authed_client: AsyncClient):
        created = await _create(admin_client)
        assert created["is_active"] is True
        assert created["created_by"] == admin_client.user["id"]
        assert [a["order_index"] for a in created["answers"]] == [0, 1, 2, 3]

        response = await authed_client.get("/api/quiz/questions")
        fetched = response.json()["data"][0]
        assert [(a["answer_text"], a["is_correct"], a["order_index"]) for a in fetched["answers"]] == [
            ("Wind Energy", False, 0),
            ("Solar Energy", True, 1),
            ("Hydroelectric Power", False, 2),
            ("Geothermal Energy", False, 3),
        ]
        assert "is_active" not in fetched

    async def test_explicit_order_index_respected(self, admin_client: AsyncClient):
        created = await _create(
            admin_client,
            answers=[
                {"answer_text": "B", "is_correct": True, "order_index": 1},
                {"answer_text": "A", "is_correct": False, "order_index": 0},
            ],
        )
        assert [(a["answer_text"], a["order_index"]) for a in created["answers"]] == [("A", 0), ("B", 1)]

    async def test_player_cannot_create(self, authed_client: AsyncClient):
        response = await authed_client.post("/api/quiz/questions", json=QUESTION)
        assert response.status_code == 403

    async def test_invalid_difficulty(self, admin_client: AsyncClient):
        response = await admin_client.post("/api/quiz/questions", json={**QUESTION, "difficulty": "extreme"})
        assert response.status_code == 422

    async def test_inactive_hidden_from_players(self, admin_client: AsyncClient, authed_client: AsyncClient):
        await _create(admin_client, isActive=False)
        await _create(admin_client, questionText="Active one")

        player_view = (await authed_client.get("/api/quiz/questions")).json()
        assert [q["question_text"] for q in player_view["data"]] == ["Active one"]

        admin_view = (await admin_client.get("/api/quiz/questions/all")).json()
        assert admin_view["count"] == 2

    async def test_all_questions_admin_only(self, authed_client: AsyncClient):
        assert (await authed_client.get("/api/quiz/questions/all")).status_code == 403

    async def test_limit(self, admin_client: AsyncClient):
        for i in range(3):
            await _create(admin_client, questionText=f"Q{i}")
        response = await admin_client.get("/api/quiz/questions", params={"limit": 2})
        assert [q["question_text"] for q in response.json()["data"]] == ["Q2", "Q1"]

    async def test_partial_update_keeps_answers(self, admin_client: AsyncClient):
        created = await _create(admin_client)
        response = await admin_client.put(f"/api/quiz/questions/{created['id']}", json={"points": 25})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["points"] == 25
        assert data["question_text"] == QUESTION["questionText"]
        assert len(data["answers"]) == 4

    async def test_update_replaces_answers(self, admin_client: AsyncClient):
        created = await _create(admin_client)
        response = await admin_client.put(
            f"/api/quiz/questions/{created['id']}",
            json={"answers": [{"answerText": "Yes", "isCorrect": True}, {"answerText": "No"}]},
        )
        data = response.json()["data"]
        assert [(a["answer_text"], a["is_correct"]) for a in data["answers"]] == [("Yes", True), ("No", False)]

        listed = (await admin_client.get("/api/quiz/questions/all")).json()["data"][0]
        assert len(listed["answers"]) == 2

    async def test_update_and_delete_missing(self, admin_client: AsyncClient):
        assert (await admin_client.put("/api/quiz/questions/nope", json={"points": 1})).status_code == 404
        assert (await admin_client.delete("/api/quiz/questions/nope")).status_code == 404

    async def test_delete(self, admin_client: AsyncClient):
        created = await _create(admin_client)
        response = await admin_client.delete(f"/api/quiz/questions/{created['id']}")
        assert response.status_code == 200
        assert (await admin_client.get("/api/quiz/questions/all")).json()["data"] == []


class TestAttempts:
    async def test_submit_and_list(self, authed_client: AsyncClient):
        response = await authed_client.post(
            "/api/quiz/attempts",
            json={
                "score": 30,
                "totalQuestions": 5,
                "correctAnswers": 3,
                "timeTaken": 95,
                "answers": [{"questionId": "q1", "answerId": "a1", "isCorrect": True}],
            },
        )
        assert response.status_code == 201
        stored = response.json()["data"]
        assert stored["answers"] == [{"question_id": "q1", "answer_id": "a1", "is_correct": True}]

        history = (await authed_client.get("/api/quiz/attempts")).json()
        assert history["count"] == 1
        row = history["data"][0]
        assert set(row) == {"id", "score", "total_questions", "completed_at"}
        # history reports correct answers as the score
        assert row["score"] == 3
        assert row["total_questions"] == 5

    async def test_correct_cannot_exceed_total(self, authed_client: AsyncClient):
        response = await authed_client.post(
            "/api/quiz/attempts", json={"totalQuestions": 2, "correctAnswers": 3}
        )
        assert response.status_code == 422

    async def test_history_is_private(self, authed_client: AsyncClient, make_user):
        other = await make_user("other@example.com")
        await other.post("/api/quiz/attempts", json={"totalQuestions": 1, "correctAnswers": 1})
        assert (await authed_client.get("/api/quiz/attempts")).json()["data"] == []
