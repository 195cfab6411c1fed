"""FastAPI application factory.

Run with ``uvicorn ecotrack.main:create_app --factory``.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from ecotrack.admin.router import router as admin_router
from ecotrack.auth.router import router as auth_router
from ecotrack.blog.router import router as blog_router
from ecotrack.carbon.router import router as carbon_router
from ecotrack.challenges.router import router as challenges_router
from ecotrack.community.router import router as community_router
from ecotrack.config import Settings, get_settings
from ecotrack.content_seed import seed_demo_content
from ecotrack.database import close_db, get_session, init_db
from ecotrack.ecomap.event_router import router as eco_events_router
from ecotrack.ecomap.router import router as eco_locations_router
from ecotrack.gamification.router import router as badges_router
from ecotrack.gamification.seed import seed_badges
from ecotrack.health.router import router as health_router
from ecotrack.leaderboard.router import router as leaderboard_router
from ecotrack.middleware import setup_middleware
from ecotrack.planting.router import router as planting_router
from ecotrack.profile.router import router as profile_router
from ecotrack.quiz.router import router as quiz_router
from ecotrack.redis_client import close_redis, init_redis

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup and shutdown lifecycle."""
    settings: Settings = app.state.settings
    await init_db(settings.database_url)
    await init_redis(settings.redis_url)

    # Seed badge definitions (idempotent)
    try:
        async for db in get_session():
            await seed_badges(db)
            if settings.seed_demo_content:
                await seed_demo_content(db)
            break
    except SQLAlchemyError:
        logger.warning("seeding_failed", hint="run alembic upgrade head", exc_info=True)

    logger.info("startup_complete", environment=settings.environment, version=settings.app_version)

    yield

    await close_db()
    await close_redis()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Eco Track Bangladesh API",
        description="Backend API for Eco Track Bangladesh: quizzes, carbon tracking, community and tree planting",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    setup_middleware(app, settings)
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(profile_router)
    app.include_router(carbon_router)
    app.include_router(challenges_router)
    app.include_router(community_router)
    app.include_router(blog_router)
    app.include_router(quiz_router)
    app.include_router(badges_router)
    app.include_router(leaderboard_router)
    app.include_router(eco_locations_router)
    app.include_router(eco_events_router)
    app.include_router(planting_router)
    app.include_router(admin_router)

    return app
