"""Carbon footprint persistence."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import select

from ecotrack.db.models import CarbonFootprint

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from ecotrack.carbon.schemas import CarbonFootprintCreate


async def list_footprints(db: AsyncSession, user_id: str, limit: int = 10) -> list[CarbonFootprint]:
    """The user's footprints, newest first."""
    result = await db.execute(
        select(CarbonFootprint)
        .where(CarbonFootprint.user_id == user_id)
        .order_by(CarbonFootprint.calculated_at.desc())
        .limit(limit)
    )
    return list(result.scalars().all())


async def create_footprint(db: AsyncSession, user_id: str, data: CarbonFootprintCreate) -> CarbonFootprint:
    """Record a footprint for the user."""
    footprint = CarbonFootprint(
        user_id=user_id,
        calculated_at=datetime.now(timezone.utc),
        **data.model_dump(),
    )
    db.add(footprint)
    await db.flush()
    return footprint
