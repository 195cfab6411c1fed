"""Daily challenge persistence. Every query is scoped to the owning user."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import select

from ecotrack.db.models import DailyChallenge

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


async def list_challenges(db: AsyncSession, user_id: str, limit: int = 30) -> list[DailyChallenge]:
    """The user's challenges, most recent challenge_date first."""
    result = await db.execute(
        select(DailyChallenge)
        .where(DailyChallenge.user_id == user_id)
        .order_by(DailyChallenge.challenge_date.desc(), DailyChallenge.id)
        .limit(limit)
    )
    return list(result.scalars().all())


async def get_owned_challenge(db: AsyncSession, user_id: str, challenge_id: str) -> DailyChallenge | None:
    result = await db.execute(
        select(DailyChallenge).where(
            DailyChallenge.id == challenge_id,
            DailyChallenge.user_id == user_id,
        )
    )
    return result.scalar_one_or_none()


async def create_challenge(
    db: AsyncSession,
    user_id: str,
    challenge_name: str,
    challenge_date: date | None = None,
) -> DailyChallenge:
    """Create an uncompleted challenge; the date defaults to today (UTC)."""
    challenge = DailyChallenge(
        user_id=user_id,
        challenge_name=challenge_name,
        completed=False,
        challenge_date=challenge_date or datetime.now(timezone.utc).date(),
    )
    db.add(challenge)
    await db.flush()
    return challenge


async def set_completed(db: AsyncSession, challenge: DailyChallenge, completed: bool) -> DailyChallenge:
    """Mark a challenge done or undone. Undoing keeps the last ``completed_at``."""
    challenge.completed = completed
    if completed:
        challenge.completed_at = datetime.now(timezone.utc)
    await db.flush()
    return challenge


async def delete_challenge(db: AsyncSession, challenge: DailyChallenge) -> None:
    await db.delete(challenge)
    await db.flush()
