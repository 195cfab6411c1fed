"""Daily challenges router: /api/challenges."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ecotrack.auth.dependencies import get_current_user
from ecotrack.challenges.schemas import ChallengeCreate, ChallengeResponse, ChallengeUpdate
from ecotrack.challenges.service import (
    create_challenge,
    delete_challenge,
    get_owned_challenge,
    list_challenges,
    set_completed,
)
from ecotrack.database import get_session
from ecotrack.db.models import User
from ecotrack.schemas import ApiResponse, ok, ok_list

router = APIRouter(prefix="/api/challenges", tags=["Challenges"])

_NOT_FOUND = "Challenge not found"


@router.get("", response_model=ApiResponse[list[ChallengeResponse]])
async def get_challenges(
    limit: int = Query(30, ge=1, le=100),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    """Own challenges, newest first."""
    challenges = await list_challenges(db, user.id, limit)
    return ok_list([ChallengeResponse.model_validate(c) for c in challenges])


@router.post("", response_model=ApiResponse[ChallengeResponse], status_code=201)
async def add_challenge(
    body: ChallengeCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    challenge = await create_challenge(db, user.id, body.challenge_name, body.challenge_date)
    await db.commit()
    return ok(ChallengeResponse.model_validate(challenge))


@router.put("/{challenge_id}", response_model=ApiResponse[ChallengeResponse])
async def update_challenge(
    challenge_id: str,
    body: ChallengeUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    """Toggle completion of an owned challenge."""
    challenge = await get_owned_challenge(db, user.id, challenge_id)
    if challenge is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    challenge = await set_completed(db, challenge, body.completed)
    await db.commit()
    return ok(ChallengeResponse.model_validate(challenge))


@router.delete("/{challenge_id}", response_model=ApiResponse[None])
async def remove_challenge(
    challenge_id: str,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    challenge = await get_owned_challenge(db, user.id, challenge_id)
    if challenge is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    await delete_challenge(db, challenge)
    await db.commit()
    return ok(message="Challenge deleted")
