"""Carbon footprint router: /api/carbon."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ecotrack.auth.dependencies import get_current_user
from ecotrack.carbon.schemas import CarbonFootprintCreate, CarbonFootprintResponse
from ecotrack.carbon.service import create_footprint, list_footprints
from ecotrack.database import get_session
from ecotrack.db.models import User
from ecotrack.schemas import ApiResponse, ok, ok_list

router = APIRouter(prefix="/api/carbon", tags=["Carbon"])


@router.get("", response_model=ApiResponse[list[CarbonFootprintResponse]])
async def get_carbon_footprints(
    limit: int = Query(10, ge=1, le=100),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    """Own footprints, newest first."""
    footprints = await list_footprints(db, user.id, limit)
    return ok_list([CarbonFootprintResponse.model_validate(f) for f in footprints])


@router.post("", response_model=ApiResponse[CarbonFootprintResponse], status_code=201)
async def create_carbon_footprint(
    body: CarbonFootprintCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    """Log a footprint calculation."""
    footprint = await create_footprint(db, user.id, body)
    await db.commit()
    return ok(CarbonFootprintResponse.model_validate(footprint))
