"""Schemas for carbon footprint endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from ecotrack.schemas import ORMModel, RequestModel

FootprintCategory = Literal["Low", "Medium", "High"]


class CarbonFootprintCreate(RequestModel):
    """A footprint calculated on the client. Totals are stored as sent."""

    electricity_kwh: float = Field(0, ge=0)
    transportation_km: float = Field(0, ge=0)
    transportation_type: str = ""
    waste_kg: float = Field(0, ge=0)
    total_co2_kg: float
    category: FootprintCategory


class CarbonFootprintResponse(ORMModel):
    id: str
    user_id: str
    electricity_kwh: float
    transportation_km: float
    transportation_type: str
    waste_kg: float
    total_co2_kg: float
    category: str
    calculated_at: datetime
