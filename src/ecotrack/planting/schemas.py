"""Schemas for planting areas and planted trees."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from ecotrack.schemas import ORMModel, RequestModel


class PlantingAreaCreate(RequestModel):
    title: str = Field(..., min_length=1, max_length=256)
    description: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    district: str = Field(..., min_length=1, max_length=64)
    division: str = Field(..., min_length=1, max_length=64)
    problem_type: str = Field("Deforestation", min_length=1, max_length=64)
    is_planted: bool = False


class PlantingAreaUpdate(RequestModel):
    title: str | None = Field(None, min_length=1, max_length=256)
    description: str | None = Field(None, min_length=1)
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    district: str | None = Field(None, min_length=1, max_length=64)
    division: str | None = Field(None, min_length=1, max_length=64)
    problem_type: str | None = Field(None, min_length=1, max_length=64)
    is_planted: bool | None = None


class PlantingAreaResponse(ORMModel):
    id: str
    title: str
    description: str
    latitude: float
    longitude: float
    district: str
    division: str
    problem_type: str
    is_planted: bool
    created_at: datetime
    updated_at: datetime


class PlantTreeRequest(RequestModel):
    planting_area_id: str
    tree_type: str = Field(..., min_length=1, max_length=128)
    notes: str | None = None


class PlanterResponse(ORMModel):
    full_name: str | None = None


class PlantedTreeResponse(ORMModel):
    id: str
    planting_area_id: str
    tree_type: str
    planted_by: str | None = None
    planted_at: datetime
    notes: str | None = None
    area: PlantingAreaResponse
    planter: PlanterResponse | None = None
