"""Badge request/response schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from ecotrack.schemas import ORMModel, RequestModel


class BadgeCreate(RequestModel):
    name: str = Field(..., min_length=1, max_length=128)
    description: str = Field(..., min_length=1)
    icon: str = Field(..., min_length=1, max_length=64)
    requirement: str = Field(..., min_length=1, max_length=64)


class BadgeResponse(ORMModel):
    id: str
    name: str
    description: str
    icon: str
    requirement: str
    created_at: datetime


class EarnedBadgeResponse(BaseModel):
    """Badge fields plus when the user earned it."""

    id: str
    name: str
    description: str
    icon: str
    earned_at: datetime


class BadgeCheckResult(BaseModel):
    badges_awarded: int
