"""Badge evaluation: award every badge whose requirement a user now meets."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

import structlog
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from ecotrack.db.models import (
    Badge,
    CarbonFootprint,
    CommunityPost,
    DailyChallenge,
    QuizAttempt,
    UserBadge,
)
from ecotrack.gamification.requirements import BadgeCounts, parse_requirement, select_new_badges

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()


class BadgeConflictError(Exception):
    """A concurrent evaluation awarded one of the same badges first."""


async def get_badge_counts(db: AsyncSession, user_id: str) -> BadgeCounts:
    """Fetch the four activity counts in a single statement."""

    def _count(model: type, *criteria: object) -> object:
        return (
            select(func.count())
            .select_from(model)
            .where(model.user_id == user_id, *criteria)
            .scalar_subquery()
        )

    stmt = select(
        _count(QuizAttempt).label("quiz_attempts"),
        _count(CarbonFootprint).label("carbon_footprints"),
        _count(DailyChallenge, DailyChallenge.completed.is_(True)).label("completed_challenges"),
        _count(CommunityPost).label("community_posts"),
    )
    row = (await db.execute(stmt)).one()
    return BadgeCounts(
        quiz_attempts=row.quiz_attempts,
        carbon_footprints=row.carbon_footprints,
        completed_challenges=row.completed_challenges,
        community_posts=row.community_posts,
    )


async def get_earned_badge_ids(db: AsyncSession, user_id: str) -> set[str]:
    result = await db.execute(select(UserBadge.badge_id).where(UserBadge.user_id == user_id))
    return set(result.scalars().all())


async def evaluate(db: AsyncSession, user_id: str) -> int:
    """
    Award all newly satisfied badges to a user and return how many were awarded.

    Badges already earned are skipped, and the UNIQUE(user_id, badge_id)
    constraint backs that check. If a concurrent request wins the race the
    whole batch is rolled back and BadgeConflictError is raised.
    """
    counts = await get_badge_counts(db, user_id)
    badges = (await db.execute(select(Badge).order_by(Badge.created_at))).scalars().all()
    earned_ids = await get_earned_badge_ids(db, user_id)

    new_badges = select_new_badges(badges, earned_ids, counts)
    if not new_badges:
        return 0

    now = datetime.now(timezone.utc)
    db.add_all([UserBadge(user_id=user_id, badge_id=b.id, earned_at=now) for b in new_badges])
    try:
        await db.flush()
    except IntegrityError as e:
        await db.rollback()
        logger.warning("badge_award_conflict", user_id=user_id)
        msg = "Badges were awarded concurrently; try again"
        raise BadgeConflictError(msg) from e

    logger.info("badges_awarded", user_id=user_id, badges=[b.name for b in new_badges])
    return len(new_badges)


async def list_user_badges(db: AsyncSession, user_id: str) -> list[UserBadge]:
    result = await db.execute(
        select(UserBadge).where(UserBadge.user_id == user_id).order_by(UserBadge.earned_at)
    )
    return list(result.scalars().all())


async def list_badges(db: AsyncSession) -> list[Badge]:
    result = await db.execute(select(Badge).order_by(Badge.created_at))
    return list(result.scalars().all())


async def create_badge(db: AsyncSession, name: str, description: str, icon: str, requirement: str) -> Badge:
    """
    Create a badge definition.

    Raises:
        ValueError: If a badge with this name already exists.
    """
    existing = await db.execute(select(Badge).where(Badge.name == name))
    if existing.scalar_one_or_none() is not None:
        msg = "Badge already exists"
        raise ValueError(msg)

    if parse_requirement(requirement) is None:
        logger.warning("badge_requirement_unknown", name=name, requirement=requirement)

    badge = Badge(
        name=name,
        description=description,
        icon=icon,
        requirement=requirement,
        created_at=datetime.now(timezone.utc),
    )
    db.add(badge)
    await db.flush()
    return badge
