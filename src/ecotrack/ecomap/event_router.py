"""Eco events router: /api/eco-events."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ecotrack.auth.dependencies import get_current_user, require_admin
from ecotrack.database import get_session
from ecotrack.db.models import User
from ecotrack.ecomap import service
from ecotrack.ecomap.schemas import EVENT_NULLABLE, EcoEventCreate, EcoEventResponse, EcoEventUpdate
from ecotrack.schemas import ApiResponse, ok, ok_list

router = APIRouter(prefix="/api/eco-events", tags=["Eco Events"], dependencies=[Depends(get_current_user)])

_NOT_FOUND = "Event not found"


@router.get("", response_model=ApiResponse[list[EcoEventResponse]])
async def get_events(
    event_type: str | None = Query(None),
    event_type_camel: str | None = Query(None, alias="eventType", include_in_schema=False),
    district: str | None = Query(None),
    division: str | None = Query(None),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    """Upcoming active events, soonest first."""
    events = await service.list_active_events(db, event_type or event_type_camel, district, division)
    return ok_list([EcoEventResponse.model_validate(e) for e in events])


# Registered before /{event_id} so "all" is not taken for an id
@router.get("/all", response_model=ApiResponse[list[EcoEventResponse]], dependencies=[Depends(require_admin)])
async def get_all_events(db: AsyncSession = Depends(get_session)) -> ApiResponse:
    """Every event, active or not, latest first (admin)."""
    events = await service.list_all_events(db)
    return ok_list([EcoEventResponse.model_validate(e) for e in events])


@router.get("/{event_id}", response_model=ApiResponse[EcoEventResponse])
async def get_event(event_id: str, db: AsyncSession = Depends(get_session)) -> ApiResponse:
    event = await service.get_event(db, event_id)
    if event is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return ok(EcoEventResponse.model_validate(event))


@router.post("", response_model=ApiResponse[EcoEventResponse], status_code=201)
async def create_event(
    body: EcoEventCreate,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    event = await service.create_event(db, admin.id, body.model_dump())
    await db.commit()
    return ok(EcoEventResponse.model_validate(event))


@router.put("/{event_id}", response_model=ApiResponse[EcoEventResponse], dependencies=[Depends(require_admin)])
async def update_event(
    event_id: str,
    body: EcoEventUpdate,
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    event = await service.get_event(db, event_id)
    if event is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    event = await service.update_event(db, event, body.changes(*EVENT_NULLABLE))
    await db.commit()
    return ok(EcoEventResponse.model_validate(event))


@router.delete("/{event_id}", response_model=ApiResponse[dict], dependencies=[Depends(require_admin)])
async def delete_event(event_id: str, db: AsyncSession = Depends(get_session)) -> ApiResponse:
    event = await service.get_event(db, event_id)
    if event is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    await service.delete_entity(db, event)
    await db.commit()
    return ok({})
