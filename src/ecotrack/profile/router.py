"""Profile router: /api/profile."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ecotrack.auth.dependencies import get_current_user
from ecotrack.auth.schemas import ProfileUpdateRequest, UserResponse
from ecotrack.database import get_session
from ecotrack.db.models import User
from ecotrack.profile.service import update_profile
from ecotrack.schemas import ApiResponse, ok

router = APIRouter(prefix="/api/profile", tags=["Profile"])


@router.get("", response_model=ApiResponse[UserResponse])
async def get_profile(user: User = Depends(get_current_user)) -> ApiResponse:
    """Get own profile."""
    return ok(UserResponse.model_validate(user))


@router.put("", response_model=ApiResponse[UserResponse])
async def update_my_profile(
    body: ProfileUpdateRequest,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    """Update full_name, avatar_url and bio."""
    user = await update_profile(
        db,
        user,
        full_name=body.full_name,
        avatar_url=body.avatar_url,
        bio=body.bio,
    )
    await db.commit()
    return ok(UserResponse.model_validate(user))
