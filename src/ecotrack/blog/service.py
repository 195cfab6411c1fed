"""Blog post persistence."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from ecotrack.db.models import BlogPost

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

DEFAULT_AUTHOR = "Eco Track Team"


async def list_posts(db: AsyncSession) -> list[BlogPost]:
    result = await db.execute(select(BlogPost).order_by(BlogPost.published_at.desc()))
    return list(result.scalars().all())


async def get_post(db: AsyncSession, post_id: str) -> BlogPost | None:
    return await db.get(BlogPost, post_id)


async def create_post(
    db: AsyncSession,
    title: str,
    content: str,
    image_url: str | None = None,
    author: str | None = None,
) -> BlogPost:
    now = datetime.now(timezone.utc)
    post = BlogPost(
        title=title,
        content=content,
        image_url=image_url,
        author=author or DEFAULT_AUTHOR,
        published_at=now,
        created_at=now,
    )
    db.add(post)
    await db.flush()
    return post


async def update_post(db: AsyncSession, post: BlogPost, changes: dict[str, Any]) -> BlogPost:
    for field, value in changes.items():
        setattr(post, field, value)
    await db.flush()
    return post


async def delete_post(db: AsyncSession, post: BlogPost) -> None:
    await db.delete(post)
    await db.flush()
