"""Schemas for eco map locations and eco events."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from ecotrack.schemas import ORMModel, RequestModel

# ---------------------------------------------------------------------------
# Locations
# ---------------------------------------------------------------------------


class EcoLocationCreate(RequestModel):
    name: str = Field(..., min_length=1, max_length=256)
    description: str | None = None
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    category: str = Field(..., min_length=1, max_length=64)
    city: str | None = Field(None, max_length=64)


class EcoLocationUpdate(RequestModel):
    name: str | None = Field(None, min_length=1, max_length=256)
    description: str | None = None
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    category: str | None = Field(None, min_length=1, max_length=64)
    city: str | None = Field(None, max_length=64)


class EcoLocationResponse(ORMModel):
    id: str
    name: str
    description: str | None = None
    latitude: float
    longitude: float
    category: str
    city: str | None = None
    created_at: datetime


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


class EcoEventCreate(RequestModel):
    title: str = Field(..., min_length=1, max_length=256)
    description: str = Field(..., min_length=1)
    event_type: str = Field(..., min_length=1, max_length=64)
    event_date: datetime
    event_time: str | None = Field(None, max_length=32)
    location_name: str = Field(..., min_length=1, max_length=256)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    city: str | None = Field(None, max_length=64)
    district: str = Field(..., min_length=1, max_length=64)
    division: str = Field(..., min_length=1, max_length=64)
    organizer: str | None = Field(None, max_length=128)
    contact_info: str | None = Field(None, max_length=256)
    max_participants: int = Field(50, ge=0)
    current_participants: int = Field(0, ge=0)
    is_active: bool = True


class EcoEventUpdate(RequestModel):
    title: str | None = Field(None, min_length=1, max_length=256)
    description: str | None = Field(None, min_length=1)
    event_type: str | None = Field(None, min_length=1, max_length=64)
    event_date: datetime | None = None
    event_time: str | None = Field(None, max_length=32)
    location_name: str | None = Field(None, min_length=1, max_length=256)
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    city: str | None = Field(None, max_length=64)
    district: str | None = Field(None, min_length=1, max_length=64)
    division: str | None = Field(None, min_length=1, max_length=64)
    organizer: str | None = Field(None, max_length=128)
    contact_info: str | None = Field(None, max_length=256)
    max_participants: int | None = Field(None, ge=0)
    current_participants: int | None = Field(None, ge=0)
    is_active: bool | None = None


# Columns an update may explicitly clear
EVENT_NULLABLE = ("event_time", "city", "organizer", "contact_info")


class EcoEventResponse(ORMModel):
    id: str
    title: str
    description: str
    event_type: str
    event_date: datetime
    event_time: str | None = None
    location_name: str
    latitude: float
    longitude: float
    city: str | None = None
    district: str
    division: str
    organizer: str | None = None
    contact_info: str | None = None
    max_participants: int
    current_participants: int
    is_active: bool
    created_by: str | None = None
    created_at: datetime
    updated_at: datetime
