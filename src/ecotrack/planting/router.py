"""Planting router: /api/planting/areas and /api/planting/trees."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ecotrack.auth.dependencies import get_current_user, require_admin
from ecotrack.database import get_session
from ecotrack.db.models import User
from ecotrack.planting import service
from ecotrack.planting.schemas import (
    PlantedTreeResponse,
    PlantingAreaCreate,
    PlantingAreaResponse,
    PlantingAreaUpdate,
    PlantTreeRequest,
)
from ecotrack.schemas import ApiResponse, ok, ok_list

router = APIRouter(prefix="/api/planting", tags=["Planting"], dependencies=[Depends(get_current_user)])

_AREA_NOT_FOUND = "Planting area not found"


# ── Areas ──


@router.get("/areas", response_model=ApiResponse[list[PlantingAreaResponse]])
async def get_areas(db: AsyncSession = Depends(get_session)) -> ApiResponse:
    areas = await service.list_areas(db)
    return ok_list([PlantingAreaResponse.model_validate(a) for a in areas])


@router.get("/areas/{area_id}", response_model=ApiResponse[PlantingAreaResponse])
async def get_area(area_id: str, db: AsyncSession = Depends(get_session)) -> ApiResponse:
    area = await service.get_area(db, area_id)
    if area is None:
        raise HTTPException(status_code=404, detail=_AREA_NOT_FOUND)
    return ok(PlantingAreaResponse.model_validate(area))


@router.post(
    "/areas",
    response_model=ApiResponse[PlantingAreaResponse],
    status_code=201,
    dependencies=[Depends(require_admin)],
)
async def create_area(body: PlantingAreaCreate, db: AsyncSession = Depends(get_session)) -> ApiResponse:
    area = await service.create_area(db, body.model_dump())
    await db.commit()
    return ok(PlantingAreaResponse.model_validate(area))


@router.put(
    "/areas/{area_id}",
    response_model=ApiResponse[PlantingAreaResponse],
    dependencies=[Depends(require_admin)],
)
async def update_area(
    area_id: str,
    body: PlantingAreaUpdate,
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    area = await service.get_area(db, area_id)
    if area is None:
        raise HTTPException(status_code=404, detail=_AREA_NOT_FOUND)
    area = await service.update_area(db, area, body.changes())
    await db.commit()
    return ok(PlantingAreaResponse.model_validate(area))


@router.delete("/areas/{area_id}", response_model=ApiResponse[dict], dependencies=[Depends(require_admin)])
async def delete_area(area_id: str, db: AsyncSession = Depends(get_session)) -> ApiResponse:
    """Delete an area along with its planted trees."""
    area = await service.get_area(db, area_id)
    if area is None:
        raise HTTPException(status_code=404, detail=_AREA_NOT_FOUND)
    await service.delete_area(db, area)
    await db.commit()
    return ok({})


# ── Trees ──


@router.get("/trees", response_model=ApiResponse[list[PlantedTreeResponse]])
async def get_trees(
    planting_area_id: str | None = Query(None),
    planting_area_id_camel: str | None = Query(None, alias="plantingAreaId", include_in_schema=False),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    trees = await service.list_trees(db, planting_area_id or planting_area_id_camel)
    return ok_list([PlantedTreeResponse.model_validate(t) for t in trees])


@router.get("/trees/user", response_model=ApiResponse[list[PlantedTreeResponse]])
async def get_user_trees(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    """Trees planted by the caller."""
    trees = await service.list_user_trees(db, user.id)
    return ok_list([PlantedTreeResponse.model_validate(t) for t in trees])


@router.post("/trees", response_model=ApiResponse[PlantedTreeResponse], status_code=201)
async def plant_tree(
    body: PlantTreeRequest,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    try:
        tree = await service.plant_tree(db, user, body.planting_area_id, body.tree_type, body.notes)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    await db.commit()
    return ok(PlantedTreeResponse.model_validate(tree))
