"""Community router: /api/community/posts."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ecotrack.auth.dependencies import get_current_user
from ecotrack.community import service
from ecotrack.community.schemas import CommentCreate, CommentResponse, PostCreate, PostResponse
from ecotrack.database import get_session
from ecotrack.db.models import User
from ecotrack.schemas import ApiResponse, ok, ok_list

router = APIRouter(prefix="/api/community/posts", tags=["Community"])


# ── Posts ──


@router.get("", response_model=ApiResponse[list[PostResponse]])
async def get_posts(
    _user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    """The whole feed, newest first."""
    posts = await service.list_posts(db)
    return ok_list([PostResponse.from_post(p) for p in posts])


@router.post("", response_model=ApiResponse[PostResponse], status_code=201)
async def create_post(
    body: PostCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    post = await service.create_post(db, user, body.content)
    await db.commit()
    return ok(PostResponse.from_post(post))


@router.delete("/{post_id}", response_model=ApiResponse[dict])
async def delete_post(
    post_id: str,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    """Delete an own post and its comments."""
    deleted = await service.delete_post(db, user.id, post_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Post not found or not authorized")
    await db.commit()
    return ok({})


@router.put("/{post_id}/like", response_model=ApiResponse[PostResponse])
async def like_post(
    post_id: str,
    _user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    post = await service.like_post(db, post_id)
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    await db.commit()
    return ok(PostResponse.from_post(post))


# ── Comments ──


@router.get("/{post_id}/comments", response_model=ApiResponse[list[CommentResponse]])
async def get_comments(
    post_id: str,
    _user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    comments = await service.list_comments(db, post_id)
    return ok_list([CommentResponse.from_comment(c) for c in comments])


@router.post("/{post_id}/comments", response_model=ApiResponse[CommentResponse], status_code=201)
async def add_comment(
    post_id: str,
    body: CommentCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    comment = await service.add_comment(db, user, post_id, body.content)
    if comment is None:
        raise HTTPException(status_code=404, detail="Post not found")
    await db.commit()
    return ok(CommentResponse.from_comment(comment))
