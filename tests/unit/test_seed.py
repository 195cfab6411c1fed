"""Badge and demo-content seeding."""

from __future__ import annotations

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ecotrack.content_seed import BLOG_POSTS, ECO_LOCATIONS, QUIZ_QUESTIONS, seed_demo_content
from ecotrack.db.models import Badge
from ecotrack.gamification.seed import BADGE_SEED_DATA, seed_badges

pytestmark = pytest.mark.asyncio


async def test_badge_seed_is_idempotent(db_session: AsyncSession):
    # the app fixture already seeded once
    assert await seed_badges(db_session) == len(BADGE_SEED_DATA)
    count = await db_session.scalar(select(func.count()).select_from(Badge))
    assert count == 7


async def test_badge_seed_restores_definitions(db_session: AsyncSession):
    badge = (await db_session.execute(select(Badge).where(Badge.name == "Eco Warrior"))).scalar_one()
    badge.requirement = "challenge_count_50"
    await db_session.commit()

    await seed_badges(db_session)
    await db_session.refresh(badge)
    assert badge.requirement == "challenge_count_5"


async def test_demo_content_only_fills_empty_tables(db_session: AsyncSession):
    first = await seed_demo_content(db_session)
    assert first == {
        "blog_posts": len(BLOG_POSTS),
        "eco_locations": len(ECO_LOCATIONS),
        "quiz_questions": len(QUIZ_QUESTIONS),
    }
    second = await seed_demo_content(db_session)
    assert second == {"blog_posts": 0, "eco_locations": 0, "quiz_questions": 0}


async def test_demo_questions_have_one_correct_answer(db_session: AsyncSession, authed_client: AsyncClient):
    await seed_demo_content(db_session)

    questions = (await authed_client.get("/api/quiz/questions", params={"limit": 50})).json()["data"]
    assert len(questions) == len(QUIZ_QUESTIONS)
    for question in questions:
        assert sum(a["is_correct"] for a in question["answers"]) == 1
        assert [a["order_index"] for a in question["answers"]] == list(range(len(question["answers"])))
