"""Badge endpoints: /api/badges."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ecotrack.auth.dependencies import get_current_user, require_admin
from ecotrack.database import get_session
from ecotrack.db.models import User
from ecotrack.gamification import badge_service
from ecotrack.gamification.badge_service import BadgeConflictError
from ecotrack.gamification.schemas import (
    BadgeCheckResult,
    BadgeCreate,
    BadgeResponse,
    EarnedBadgeResponse,
)
from ecotrack.schemas import ApiResponse, ok, ok_list

router = APIRouter(prefix="/api/badges", tags=["Badges"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=ApiResponse[list[BadgeResponse]])
async def list_badges(db: AsyncSession = Depends(get_session)) -> ApiResponse:
    """All badge definitions."""
    badges = await badge_service.list_badges(db)
    return ok_list([BadgeResponse.model_validate(b) for b in badges])


@router.get("/user", response_model=ApiResponse[list[EarnedBadgeResponse]])
async def get_user_badges(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    """Badges the caller has earned."""
    earned = await badge_service.list_user_badges(db, user.id)
    return ok_list(
        [
            EarnedBadgeResponse(
                id=ub.badge.id,
                name=ub.badge.name,
                description=ub.badge.description,
                icon=ub.badge.icon,
                earned_at=ub.earned_at,
            )
            for ub in earned
        ]
    )


@router.post("/check", response_model=ApiResponse[BadgeCheckResult])
async def check_badges(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    """Evaluate the caller's activity and award any newly earned badges."""
    try:
        awarded = await badge_service.evaluate(db, user.id)
    except BadgeConflictError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    await db.commit()
    return ok(BadgeCheckResult(badges_awarded=awarded))


@router.post("", response_model=ApiResponse[BadgeResponse], status_code=201, dependencies=[Depends(require_admin)])
async def create_badge(body: BadgeCreate, db: AsyncSession = Depends(get_session)) -> ApiResponse:
    try:
        badge = await badge_service.create_badge(db, body.name, body.description, body.icon, body.requirement)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    await db.commit()
    return ok(BadgeResponse.model_validate(badge))
