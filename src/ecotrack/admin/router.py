"""Admin dashboard router: /api/admin."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ecotrack.auth.dependencies import require_admin
from ecotrack.database import get_session
from ecotrack.db.models import BlogPost, CommunityPost, DailyChallenge, EcoLocation, QuizAttempt, User
from ecotrack.schemas import ApiResponse, ok

router = APIRouter(prefix="/api/admin", tags=["Admin"], dependencies=[Depends(require_admin)])


class AdminStats(BaseModel):
    total_users: int
    total_quiz_attempts: int
    total_blog_posts: int
    total_eco_locations: int
    total_challenges: int
    active_community_posts: int


def _total(model: type) -> object:
    return select(func.count()).select_from(model).scalar_subquery()


@router.get("/stats", response_model=ApiResponse[AdminStats])
async def get_stats(db: AsyncSession = Depends(get_session)) -> ApiResponse:
    """Site-wide totals for the admin dashboard."""
    row = (
        await db.execute(
            select(
                _total(User).label("total_users"),
                _total(QuizAttempt).label("total_quiz_attempts"),
                _total(BlogPost).label("total_blog_posts"),
                _total(EcoLocation).label("total_eco_locations"),
                _total(DailyChallenge).label("total_challenges"),
                _total(CommunityPost).label("active_community_posts"),
            )
        )
    ).one()
    return ok(AdminStats(**row._mapping))
