"""Community feed: posts, likes and comments."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

import structlog
from sqlalchemy import delete, select, update

from ecotrack.db.models import CommunityPost, PostComment

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from ecotrack.db.models import User

logger = structlog.get_logger()


# ---------------------------------------------------------------------------
# Posts
# ---------------------------------------------------------------------------


async def list_posts(db: AsyncSession) -> list[CommunityPost]:
    """All posts, newest first, authors loaded."""
    result = await db.execute(select(CommunityPost).order_by(CommunityPost.created_at.desc()))
    return list(result.scalars().all())


async def get_post(db: AsyncSession, post_id: str) -> CommunityPost | None:
    result = await db.execute(select(CommunityPost).where(CommunityPost.id == post_id))
    return result.scalar_one_or_none()


async def create_post(db: AsyncSession, author: User, content: str) -> CommunityPost:
    post = CommunityPost(content=content, likes=0, created_at=datetime.now(timezone.utc))
    post.author = author
    db.add(post)
    await db.flush()
    return post


async def delete_post(db: AsyncSession, user_id: str, post_id: str) -> bool:
    """
    Delete an owned post together with its comments.

    Returns False when the post does not exist or belongs to someone else.
    The caller commits both deletes at once.
    """
    result = await db.execute(
        select(CommunityPost).where(CommunityPost.id == post_id, CommunityPost.user_id == user_id)
    )
    post = result.scalar_one_or_none()
    if post is None:
        return False

    await db.execute(delete(PostComment).where(PostComment.post_id == post_id))
    await db.delete(post)
    await db.flush()
    logger.info("post_deleted", post_id=post_id, user_id=user_id)
    return True


async def like_post(db: AsyncSession, post_id: str) -> CommunityPost | None:
    """Increment the like counter in the database, not in Python."""
    result = await db.execute(
        update(CommunityPost)
        .where(CommunityPost.id == post_id)
        .values(likes=CommunityPost.likes + 1)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        return None

    refreshed = await db.execute(
        select(CommunityPost)
        .where(CommunityPost.id == post_id)
        .execution_options(populate_existing=True)
    )
    return refreshed.scalar_one()


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


async def list_comments(db: AsyncSession, post_id: str) -> list[PostComment]:
    """Comments of a post, newest first. Unknown posts simply have none."""
    result = await db.execute(
        select(PostComment)
        .where(PostComment.post_id == post_id)
        .order_by(PostComment.created_at.desc())
    )
    return list(result.scalars().all())


async def add_comment(db: AsyncSession, author: User, post_id: str, content: str) -> PostComment | None:
    """Comment on an existing post. Returns None when the post is missing."""
    if await get_post(db, post_id) is None:
        return None

    comment = PostComment(post_id=post_id, content=content, created_at=datetime.now(timezone.utc))
    comment.author = author
    db.add(comment)
    await db.flush()
    return comment
