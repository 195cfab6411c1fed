"""Badge seed data: the seven badges every deployment starts with."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from sqlalchemy import select

from ecotrack.db.models import Badge

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()

BADGE_SEED_DATA: list[dict[str, str]] = [
    {
        "name": "First Steps",
        "description": "Complete your first quiz",
        "icon": "Award",
        "requirement": "quiz_count_1",
    },
    {
        "name": "Quiz Master",
        "description": "Complete 10 quizzes",
        "icon": "Trophy",
        "requirement": "quiz_count_10",
    },
    {
        "name": "Carbon Aware",
        "description": "Calculate your carbon footprint",
        "icon": "Leaf",
        "requirement": "carbon_calc_1",
    },
    {
        "name": "Eco Warrior",
        "description": "Complete 5 daily challenges",
        "icon": "Target",
        "requirement": "challenge_count_5",
    },
    # No rule evaluates streaks yet, so this one is never awarded
    {
        "name": "Week Streak",
        "description": "Complete challenges for 7 days in a row",
        "icon": "Calendar",
        "requirement": "challenge_streak_7",
    },
    {
        "name": "Community Member",
        "description": "Make your first community post",
        "icon": "Users",
        "requirement": "post_count_1",
    },
    {
        "name": "Carbon Reducer",
        "description": "Reduce your footprint by 10%",
        "icon": "TrendingDown",
        "requirement": "carbon_reduction_10",
    },
]


async def seed_badges(db: AsyncSession) -> int:
    """Upsert the badge definitions by name. Returns number of badges seeded."""
    result = await db.execute(select(Badge))
    existing = {b.name: b for b in result.scalars()}

    for badge_data in BADGE_SEED_DATA:
        badge = existing.get(badge_data["name"])
        if badge is None:
            db.add(Badge(**badge_data))
            continue
        badge.description = badge_data["description"]
        badge.icon = badge_data["icon"]
        badge.requirement = badge_data["requirement"]

    await db.commit()
    logger.info("badges_seeded", count=len(BADGE_SEED_DATA))
    return len(BADGE_SEED_DATA)
