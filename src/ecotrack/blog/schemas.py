"""Schemas for blog endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from ecotrack.schemas import ORMModel, RequestModel


class BlogPostCreate(RequestModel):
    title: str = Field(..., min_length=1, max_length=256)
    content: str = Field(..., min_length=1)
    image_url: str | None = None
    author: str | None = Field(None, max_length=128)


class BlogPostUpdate(RequestModel):
    """Partial update; only fields present in the body are written."""

    title: str | None = Field(None, min_length=1, max_length=256)
    content: str | None = Field(None, min_length=1)
    image_url: str | None = None
    author: str | None = Field(None, max_length=128)
    published_at: datetime | None = None


class BlogPostResponse(ORMModel):
    id: str
    title: str
    content: str
    image_url: str | None = None
    author: str
    published_at: datetime
    created_at: datetime
