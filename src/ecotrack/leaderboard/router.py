"""Leaderboard router: /api/leaderboard."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ecotrack.auth.dependencies import get_current_user
from ecotrack.database import get_session
from ecotrack.leaderboard.schemas import LeaderboardEntryResponse
from ecotrack.leaderboard.service import rank
from ecotrack.schemas import ApiResponse, ok

router = APIRouter(prefix="/api/leaderboard", tags=["Leaderboard"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=ApiResponse[list[LeaderboardEntryResponse]])
async def get_leaderboard(db: AsyncSession = Depends(get_session)) -> ApiResponse:
    """Top 20 users by composite score. ``count`` is the number of users ranked."""
    entries, total = await rank(db)
    return ok([LeaderboardEntryResponse.model_validate(e) for e in entries], count=total)
