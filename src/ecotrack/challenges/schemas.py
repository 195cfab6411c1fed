"""Schemas for daily challenge endpoints."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import Field

from ecotrack.schemas import ORMModel, RequestModel


class ChallengeCreate(RequestModel):
    challenge_name: str = Field(..., min_length=1, max_length=256)
    challenge_date: date | None = None


class ChallengeUpdate(RequestModel):
    completed: bool


class ChallengeResponse(ORMModel):
    id: str
    user_id: str
    challenge_name: str
    completed: bool
    completed_at: datetime | None = None
    challenge_date: date
