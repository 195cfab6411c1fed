"""Shared test fixtures.

Every test gets a fresh SQLite database file. Redis is never initialized, so
the rate limiter lets every request through.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from ecotrack.config import Settings
from ecotrack.database import close_db, get_engine, get_session, init_db
from ecotrack.db import models  # noqa: F401
from ecotrack.db.base import Base
from ecotrack.gamification.seed import seed_badges
from ecotrack.main import create_app

ADMIN_EMAIL = "admin@example.com"
TEST_PASSWORD = "green-planet-42"


def make_settings(database_url: str, **overrides: object) -> Settings:
    values: dict[str, object] = {
        "database_url": database_url,
        "jwt_secret": "test-secret-not-for-production-use-0123456789",
        "admin_emails": [ADMIN_EMAIL],
        "log_format": "console",
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(**values)  # type: ignore[arg-type]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return make_settings(f"sqlite+aiosqlite:///{tmp_path / 'ecotrack.db'}")


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI, None]:
    """App with schema created and badges seeded. ASGITransport skips the lifespan."""
    await init_db(settings.database_url)
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async for session in get_session():
        await seed_badges(session)
        break

    yield create_app(settings)

    await close_db()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def db_session(app: FastAPI) -> AsyncGenerator[AsyncSession, None]:
    """Get a direct database session for test assertions."""
    async for session in get_session():
        yield session
        break


async def signup(client: AsyncClient, email: str, full_name: str | None = "Test User") -> dict:
    """Register through the API and return the ``data`` payload (token + user)."""
    response = await client.post(
        "/api/auth/signup",
        json={"email": email, "password": TEST_PASSWORD, "fullName": full_name},
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest_asyncio.fixture
async def make_user(app: FastAPI) -> AsyncGenerator[Callable[..., Awaitable[AsyncClient]], None]:
    """Factory: sign up a user and return a client authenticated as them."""
    clients: list[AsyncClient] = []

    async def _make(email: str, full_name: str | None = "Test User") -> AsyncClient:
        ac = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(ac)
        payload = await signup(ac, email, full_name)
        ac.headers["Authorization"] = f"Bearer {payload['token']}"
        ac.user = payload["user"]  # type: ignore[attr-defined]
        return ac

    yield _make

    for ac in clients:
        await ac.aclose()


@pytest_asyncio.fixture
async def authed_client(make_user) -> AsyncClient:
    """Client authenticated as a regular user."""
    return await make_user("rahim@example.com", "Rahim Uddin")


@pytest_asyncio.fixture
async def admin_client(make_user) -> AsyncClient:
    """Client authenticated as an admin (email listed in admin_emails)."""
    return await make_user(ADMIN_EMAIL, "Site Admin")
