"""Eco map persistence: locations and events."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from ecotrack.db.models import EcoEvent, EcoLocation

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from ecotrack.db.base import Base


async def _apply(db: AsyncSession, obj: Base, changes: dict[str, Any]) -> None:
    for field, value in changes.items():
        setattr(obj, field, value)
    await db.flush()


# ── Locations ──


async def list_locations(
    db: AsyncSession,
    category: str | None = None,
    city: str | None = None,
) -> list[EcoLocation]:
    """Locations, optionally narrowed by exact category and city."""
    stmt = select(EcoLocation)
    if category:
        stmt = stmt.where(EcoLocation.category == category)
    if city:
        stmt = stmt.where(EcoLocation.city == city)
    result = await db.execute(stmt.order_by(EcoLocation.created_at))
    return list(result.scalars().all())


async def get_location(db: AsyncSession, location_id: str) -> EcoLocation | None:
    return await db.get(EcoLocation, location_id)


async def create_location(db: AsyncSession, data: dict[str, Any]) -> EcoLocation:
    location = EcoLocation(created_at=datetime.now(timezone.utc), **data)
    db.add(location)
    await db.flush()
    return location


async def update_location(db: AsyncSession, location: EcoLocation, changes: dict[str, Any]) -> EcoLocation:
    await _apply(db, location, changes)
    return location


# ── Events ──


async def list_active_events(
    db: AsyncSession,
    event_type: str | None = None,
    district: str | None = None,
    division: str | None = None,
) -> list[EcoEvent]:
    """Active events, soonest first."""
    stmt = select(EcoEvent).where(EcoEvent.is_active.is_(True))
    if event_type:
        stmt = stmt.where(EcoEvent.event_type == event_type)
    if district:
        stmt = stmt.where(EcoEvent.district == district)
    if division:
        stmt = stmt.where(EcoEvent.division == division)
    result = await db.execute(stmt.order_by(EcoEvent.event_date.asc()))
    return list(result.scalars().all())


async def list_all_events(db: AsyncSession) -> list[EcoEvent]:
    """Every event including inactive ones, latest date first."""
    result = await db.execute(select(EcoEvent).order_by(EcoEvent.event_date.desc()))
    return list(result.scalars().all())


async def get_event(db: AsyncSession, event_id: str) -> EcoEvent | None:
    return await db.get(EcoEvent, event_id)


async def create_event(db: AsyncSession, created_by: str, data: dict[str, Any]) -> EcoEvent:
    now = datetime.now(timezone.utc)
    event = EcoEvent(created_by=created_by, created_at=now, updated_at=now, **data)
    db.add(event)
    await db.flush()
    return event


async def update_event(db: AsyncSession, event: EcoEvent, changes: dict[str, Any]) -> EcoEvent:
    changes["updated_at"] = datetime.now(timezone.utc)
    await _apply(db, event, changes)
    return event


async def delete_entity(db: AsyncSession, obj: Base) -> None:
    await db.delete(obj)
    await db.flush()
