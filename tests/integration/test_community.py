"""Community feed: posts, likes, comments and cascading delete."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def _post(client: AsyncClient, content: str = "Cleaned up Karnaphuli riverbank today!") -> dict:
    response = await client.post("/api/community/posts", json={"content": content})
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestPosts:
    async def test_create_embeds_author_profile(self, authed_client: AsyncClient):
        post = await _post(authed_client)
        assert post["likes"] == 0
        assert post["user_id"] == authed_client.user["id"]
        assert post["profiles"] == {"full_name": "Rahim Uddin", "email": "rahim@example.com"}

    async def test_list_newest_first(self, authed_client: AsyncClient, make_user):
        other = await make_user("karim@example.com", "Karim")
        await _post(authed_client, "first")
        await _post(other, "second")

        response = await authed_client.get("/api/community/posts")
        body = response.json()
        assert body["count"] == 2
        assert [p["content"] for p in body["data"]] == ["second", "first"]
        assert body["data"][0]["profiles"]["full_name"] == "Karim"

    async def test_empty_content_rejected(self, authed_client: AsyncClient):
        response = await authed_client.post("/api/community/posts", json={"content": ""})
        assert response.status_code == 422

    async def test_anyone_can_like(self, authed_client: AsyncClient, make_user):
        post = await _post(authed_client)
        fan = await make_user("fan@example.com")

        await fan.put(f"/api/community/posts/{post['id']}/like")
        response = await authed_client.put(f"/api/community/posts/{post['id']}/like")
        assert response.status_code == 200
        assert response.json()["data"]["likes"] == 2

    async def test_like_missing_post(self, authed_client: AsyncClient):
        response = await authed_client.put("/api/community/posts/does-not-exist/like")
        assert response.status_code == 404
        assert response.json()["message"] == "Post not found"


class TestDelete:
    async def test_owner_delete_removes_comments(self, authed_client: AsyncClient, make_user):
        post = await _post(authed_client)
        other = await make_user("karim@example.com")
        await other.post(f"/api/community/posts/{post['id']}/comments", json={"content": "Great work"})
        await authed_client.post(f"/api/community/posts/{post['id']}/comments", json={"content": "Thanks"})

        response = await authed_client.delete(f"/api/community/posts/{post['id']}")
        assert response.status_code == 200
        assert response.json() == {"success": True, "data": {}, "message": None, "count": None}

        comments = await authed_client.get(f"/api/community/posts/{post['id']}/comments")
        assert comments.json()["data"] == []
        assert (await authed_client.get("/api/community/posts")).json()["data"] == []

    async def test_non_owner_cannot_delete(self, authed_client: AsyncClient, make_user):
        post = await _post(authed_client)
        other = await make_user("karim@example.com")

        response = await other.delete(f"/api/community/posts/{post['id']}")
        assert response.status_code == 404
        assert response.json()["message"] == "Post not found or not authorized"
        assert (await authed_client.get("/api/community/posts")).json()["count"] == 1


class TestComments:
    async def test_add_and_list_newest_first(self, authed_client: AsyncClient):
        post = await _post(authed_client)
        for text in ("one", "two"):
            response = await authed_client.post(
                f"/api/community/posts/{post['id']}/comments", json={"content": text}
            )
            assert response.status_code == 201

        response = await authed_client.get(f"/api/community/posts/{post['id']}/comments")
        data = response.json()["data"]
        assert [c["content"] for c in data] == ["two", "one"]
        assert data[0]["post_id"] == post["id"]
        assert data[0]["profiles"]["email"] == "rahim@example.com"

    async def test_comment_on_missing_post(self, authed_client: AsyncClient):
        response = await authed_client.post(
            "/api/community/posts/does-not-exist/comments", json={"content": "hello?"}
        )
        assert response.status_code == 404

    async def test_feed_requires_auth(self, client: AsyncClient):
        assert (await client.get("/api/community/posts")).status_code == 401
