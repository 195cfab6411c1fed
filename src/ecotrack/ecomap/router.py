"""Eco locations router: /api/eco-locations."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ecotrack.auth.dependencies import get_current_user, require_admin
from ecotrack.database import get_session
from ecotrack.ecomap import service
from ecotrack.ecomap.schemas import EcoLocationCreate, EcoLocationResponse, EcoLocationUpdate
from ecotrack.schemas import ApiResponse, ok, ok_list

router = APIRouter(prefix="/api/eco-locations", tags=["Eco Map"], dependencies=[Depends(get_current_user)])

_NOT_FOUND = "Location not found"


@router.get("", response_model=ApiResponse[list[EcoLocationResponse]])
async def get_locations(
    category: str | None = Query(None),
    city: str | None = Query(None),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    """Map points, filtered by category and/or city."""
    locations = await service.list_locations(db, category, city)
    return ok_list([EcoLocationResponse.model_validate(loc) for loc in locations])


@router.get("/{location_id}", response_model=ApiResponse[EcoLocationResponse])
async def get_location(location_id: str, db: AsyncSession = Depends(get_session)) -> ApiResponse:
    location = await service.get_location(db, location_id)
    if location is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return ok(EcoLocationResponse.model_validate(location))


@router.post(
    "",
    response_model=ApiResponse[EcoLocationResponse],
    status_code=201,
    dependencies=[Depends(require_admin)],
)
async def create_location(body: EcoLocationCreate, db: AsyncSession = Depends(get_session)) -> ApiResponse:
    location = await service.create_location(db, body.model_dump())
    await db.commit()
    return ok(EcoLocationResponse.model_validate(location))


@router.put(
    "/{location_id}",
    response_model=ApiResponse[EcoLocationResponse],
    dependencies=[Depends(require_admin)],
)
async def update_location(
    location_id: str,
    body: EcoLocationUpdate,
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    location = await service.get_location(db, location_id)
    if location is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    location = await service.update_location(db, location, body.changes("description", "city"))
    await db.commit()
    return ok(EcoLocationResponse.model_validate(location))


@router.delete("/{location_id}", response_model=ApiResponse[dict], dependencies=[Depends(require_admin)])
async def delete_location(location_id: str, db: AsyncSession = Depends(get_session)) -> ApiResponse:
    location = await service.get_location(db, location_id)
    if location is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    await service.delete_entity(db, location)
    await db.commit()
    return ok({})
