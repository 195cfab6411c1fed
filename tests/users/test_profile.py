"""Tests for profile read/update."""

from httpx import AsyncClient


class TestProfile:
    async def test_get_own_profile(self, authed_client: AsyncClient):
        response = await authed_client.get("/api/profile")
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["email"] == "rahim@example.com"
        assert data["full_name"] == "Rahim Uddin"
        assert data["bio"] is None

    async def test_update_bio_and_avatar(self, authed_client: AsyncClient):
        response = await authed_client.put(
            "/api/profile",
            json={"bio": "Planting trees in Sylhet", "avatarUrl": "https://example.com/me.png"},
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["bio"] == "Planting trees in Sylhet"
        assert data["avatar_url"] == "https://example.com/me.png"
        assert data["full_name"] == "Rahim Uddin"

    async def test_omitted_fields_unchanged(self, authed_client: AsyncClient):
        await authed_client.put("/api/profile", json={"bio": "first"})
        response = await authed_client.put("/api/profile", json={"full_name": "Rahim U."})
        data = response.json()["data"]
        assert data["full_name"] == "Rahim U."
        assert data["bio"] == "first"

    async def test_profile_requires_auth(self, client: AsyncClient):
        response = await client.get("/api/profile")
        assert response.status_code == 401
        assert response.json()["success"] is False
