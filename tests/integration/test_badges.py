"""Badge catalogue, evaluation and admin creation over HTTP."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

ATTEMPT = {"score": 3, "totalQuestions": 5, "correctAnswers": 3, "timeTaken": 40}
FOOTPRINT = {"electricityKwh": 120, "transportationKm": 40, "totalCo2Kg": 95.5, "category": "Medium"}


async def _complete_challenges(client: AsyncClient, n: int) -> None:
    for i in range(n):
        created = await client.post("/api/challenges", json={"challengeName": f"Challenge {i}"})
        challenge_id = created.json()["data"]["id"]
        response = await client.put(f"/api/challenges/{challenge_id}", json={"completed": True})
        assert response.status_code == 200


class TestCatalogue:
    async def test_seeded_badges(self, authed_client: AsyncClient):
        body = (await authed_client.get("/api/badges")).json()
        assert body["count"] == 7
        names = {b["name"] for b in body["data"]}
        assert {"First Steps", "Quiz Master", "Week Streak", "Carbon Reducer"} <= names

    async def test_requires_auth(self, client: AsyncClient):
        assert (await client.get("/api/badges")).status_code == 401


class TestCheck:
    async def test_no_activity_awards_nothing(self, authed_client: AsyncClient):
        response = await authed_client.post("/api/badges/check")
        assert response.status_code == 200
        assert response.json()["data"] == {"badges_awarded": 0}

    async def test_first_quiz_awards_first_steps_once(self, authed_client: AsyncClient):
        await authed_client.post("/api/quiz/attempts", json=ATTEMPT)

        first = await authed_client.post("/api/badges/check")
        assert first.json()["data"]["badges_awarded"] == 1
        again = await authed_client.post("/api/badges/check")
        assert again.json()["data"]["badges_awarded"] == 0

        earned = (await authed_client.get("/api/badges/user")).json()
        assert earned["count"] == 1
        assert earned["data"][0]["name"] == "First Steps"
        assert earned["data"][0]["earned_at"]

    async def test_busy_user_earns_five(self, authed_client: AsyncClient):
        for _ in range(10):
            await authed_client.post("/api/quiz/attempts", json=ATTEMPT)
        await authed_client.post("/api/carbon", json=FOOTPRINT)
        await authed_client.post("/api/community/posts", json={"content": "Cycled to work all week"})
        await _complete_challenges(authed_client, 5)

        response = await authed_client.post("/api/badges/check")
        assert response.json()["data"]["badges_awarded"] == 5

        names = {b["name"] for b in (await authed_client.get("/api/badges/user")).json()["data"]}
        assert names == {"First Steps", "Quiz Master", "Carbon Aware", "Eco Warrior", "Community Member"}

    async def test_uncompleted_challenges_do_not_count(self, authed_client: AsyncClient):
        for i in range(5):
            await authed_client.post("/api/challenges", json={"challengeName": f"Challenge {i}"})
        response = await authed_client.post("/api/badges/check")
        assert response.json()["data"]["badges_awarded"] == 0

    async def test_badges_are_per_user(self, authed_client: AsyncClient, make_user):
        other = await make_user("karim@example.com")
        await authed_client.post("/api/quiz/attempts", json=ATTEMPT)
        await authed_client.post("/api/badges/check")

        assert (await other.post("/api/badges/check")).json()["data"]["badges_awarded"] == 0
        assert (await other.get("/api/badges/user")).json()["count"] == 0


class TestCreate:
    BADGE = {"name": "Tree Hugger", "description": "Plant a tree", "icon": "TreePine", "requirement": "tree_count_1"}

    async def test_admin_creates_badge(self, admin_client: AsyncClient):
        response = await admin_client.post("/api/badges", json=self.BADGE)
        assert response.status_code == 201
        assert response.json()["data"]["requirement"] == "tree_count_1"
        assert (await admin_client.get("/api/badges")).json()["count"] == 8

    async def test_duplicate_name(self, admin_client: AsyncClient):
        response = await admin_client.post("/api/badges", json={**self.BADGE, "name": "First Steps"})
        assert response.status_code == 400
        assert response.json()["message"] == "Badge already exists"

    async def test_user_cannot_create(self, authed_client: AsyncClient):
        assert (await authed_client.post("/api/badges", json=self.BADGE)).status_code == 403

    async def test_unknown_requirement_never_awarded(self, admin_client: AsyncClient):
        await admin_client.post("/api/badges", json=self.BADGE)
        await admin_client.post("/api/quiz/attempts", json=ATTEMPT)
        response = await admin_client.post("/api/badges/check")
        assert response.json()["data"]["badges_awarded"] == 1
