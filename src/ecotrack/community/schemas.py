"""Schemas for community feed endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from ecotrack.db.models import CommunityPost, PostComment
from ecotrack.schemas import ORMModel, RequestModel


class AuthorProfile(ORMModel):
    """Public author fields shown next to posts and comments."""

    full_name: str | None = None
    email: str


class PostCreate(RequestModel):
    content: str = Field(..., min_length=1, max_length=5000)


class CommentCreate(RequestModel):
    content: str = Field(..., min_length=1, max_length=2000)


class PostResponse(ORMModel):
    id: str
    user_id: str
    content: str
    likes: int
    created_at: datetime
    profiles: AuthorProfile

    @classmethod
    def from_post(cls, post: CommunityPost) -> PostResponse:
        return cls(
            id=post.id,
            user_id=post.user_id,
            content=post.content,
            likes=post.likes,
            created_at=post.created_at,
            profiles=AuthorProfile.model_validate(post.author),
        )


class CommentResponse(ORMModel):
    id: str
    post_id: str
    user_id: str
    content: str
    created_at: datetime
    profiles: AuthorProfile

    @classmethod
    def from_comment(cls, comment: PostComment) -> CommentResponse:
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            user_id=comment.user_id,
            content=comment.content,
            created_at=comment.created_at,
            profiles=AuthorProfile.model_validate(comment.author),
        )
