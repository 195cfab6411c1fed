"""Blog router: /api/blog. Reading needs a login, writing needs admin."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ecotrack.auth.dependencies import get_current_user, require_admin
from ecotrack.blog import service
from ecotrack.blog.schemas import BlogPostCreate, BlogPostResponse, BlogPostUpdate
from ecotrack.database import get_session
from ecotrack.schemas import ApiResponse, ok, ok_list

router = APIRouter(prefix="/api/blog", tags=["Blog"], dependencies=[Depends(get_current_user)])

_NOT_FOUND = "Blog post not found"


@router.get("", response_model=ApiResponse[list[BlogPostResponse]])
async def get_blog_posts(db: AsyncSession = Depends(get_session)) -> ApiResponse:
    """All posts, newest published first."""
    posts = await service.list_posts(db)
    return ok_list([BlogPostResponse.model_validate(p) for p in posts])


@router.get("/{post_id}", response_model=ApiResponse[BlogPostResponse])
async def get_blog_post(post_id: str, db: AsyncSession = Depends(get_session)) -> ApiResponse:
    post = await service.get_post(db, post_id)
    if post is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return ok(BlogPostResponse.model_validate(post))


@router.post(
    "",
    response_model=ApiResponse[BlogPostResponse],
    status_code=201,
    dependencies=[Depends(require_admin)],
)
async def create_blog_post(body: BlogPostCreate, db: AsyncSession = Depends(get_session)) -> ApiResponse:
    post = await service.create_post(db, body.title, body.content, body.image_url, body.author)
    await db.commit()
    return ok(BlogPostResponse.model_validate(post))


@router.put("/{post_id}", response_model=ApiResponse[BlogPostResponse], dependencies=[Depends(require_admin)])
async def update_blog_post(
    post_id: str,
    body: BlogPostUpdate,
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    post = await service.get_post(db, post_id)
    if post is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    post = await service.update_post(db, post, body.changes("image_url"))
    await db.commit()
    return ok(BlogPostResponse.model_validate(post))


@router.delete("/{post_id}", response_model=ApiResponse[dict], dependencies=[Depends(require_admin)])
async def delete_blog_post(post_id: str, db: AsyncSession = Depends(get_session)) -> ApiResponse:
    post = await service.get_post(db, post_id)
    if post is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    await service.delete_post(db, post)
    await db.commit()
    return ok({})
