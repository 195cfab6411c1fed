"""Tests for the forgot/reset password flow."""

from datetime import datetime, timedelta, timezone

from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ecotrack.auth.service import create_reset_token, get_user_by_email
from ecotrack.db.models import PasswordResetToken
from tests.conftest import TEST_PASSWORD


async def _issue_token(db: AsyncSession, email: str, ttl_minutes: int = 60) -> str:
    user = await get_user_by_email(db, email)
    assert user is not None
    raw = await create_reset_token(db, user.id, ttl_minutes)
    await db.commit()
    return raw


class TestForgotPassword:
    async def test_known_email_stores_hashed_token(
        self, client: AsyncClient, authed_client: AsyncClient, db_session: AsyncSession
    ):
        response = await client.post("/api/auth/forgot-password", json={"email": "rahim@example.com"})
        assert response.status_code == 200
        assert response.json()["message"] == "If that email exists, a reset link has been sent."

        tokens = (await db_session.execute(select(PasswordResetToken))).scalars().all()
        assert len(tokens) == 1
        assert len(tokens[0].token_hash) == 64

    async def test_unknown_email_same_answer(self, client: AsyncClient, db_session: AsyncSession):
        response = await client.post("/api/auth/forgot-password", json={"email": "ghost@example.com"})
        assert response.status_code == 200
        assert response.json()["message"] == "If that email exists, a reset link has been sent."
        tokens = (await db_session.execute(select(PasswordResetToken))).scalars().all()
        assert tokens == []


class TestResetPassword:
    async def test_reset_then_login_with_new_password(
        self, client: AsyncClient, authed_client: AsyncClient, db_session: AsyncSession
    ):
        raw = await _issue_token(db_session, "rahim@example.com")

        response = await client.post(
            "/api/auth/reset-password",
            json={"token": raw, "newPassword": "brand-new-pass"},
        )
        assert response.status_code == 200
        assert response.json()["message"] == "Password has been reset."

        old = await client.post("/api/auth/login", json={"email": "rahim@example.com", "password": TEST_PASSWORD})
        assert old.status_code == 401
        new = await client.post(
            "/api/auth/login", json={"email": "rahim@example.com", "password": "brand-new-pass"}
        )
        assert new.status_code == 200

    async def test_token_is_single_use(
        self, client: AsyncClient, authed_client: AsyncClient, db_session: AsyncSession
    ):
        raw = await _issue_token(db_session, "rahim@example.com")
        first = await client.post("/api/auth/reset-password", json={"token": raw, "new_password": "another-pass1"})
        assert first.status_code == 200
        second = await client.post("/api/auth/reset-password", json={"token": raw, "new_password": "another-pass2"})
        assert second.status_code == 400

    async def test_unknown_token(self, client: AsyncClient):
        response = await client.post(
            "/api/auth/reset-password",
            json={"token": "made-up-token", "new_password": "another-pass1"},
        )
        assert response.status_code == 400
        assert response.json()["success"] is False

    async def test_expired_token(
        self, client: AsyncClient, authed_client: AsyncClient, db_session: AsyncSession
    ):
        raw = await _issue_token(db_session, "rahim@example.com")
        token = (await db_session.execute(select(PasswordResetToken))).scalar_one()
        token.expires_at = datetime.now(timezone.utc) - timedelta(minutes=1)
        await db_session.commit()

        response = await client.post("/api/auth/reset-password", json={"token": raw, "new_password": "another-pass1"})
        assert response.status_code == 400
        assert response.json()["message"] == "Reset token has expired"

    async def test_weak_new_password(
        self, client: AsyncClient, authed_client: AsyncClient, db_session: AsyncSession
    ):
        raw = await _issue_token(db_session, "rahim@example.com")
        response = await client.post("/api/auth/reset-password", json={"token": raw, "new_password": "abc"})
        assert response.status_code == 400
