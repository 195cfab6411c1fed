"""
Tree planting service.

Areas are admin-curated; any user can plant a tree in an area. Planting
flags the area as planted in the same transaction as the tree insert.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

import structlog
from sqlalchemy import delete, select

from ecotrack.db.models import PlantedTree, PlantingArea

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from ecotrack.db.models import User

logger = structlog.get_logger()


# ---------------------------------------------------------------------------
# Areas
# ---------------------------------------------------------------------------


async def list_areas(db: AsyncSession) -> list[PlantingArea]:
    result = await db.execute(select(PlantingArea).order_by(PlantingArea.created_at))
    return list(result.scalars().all())


async def get_area(db: AsyncSession, area_id: str) -> PlantingArea | None:
    return await db.get(PlantingArea, area_id)


async def create_area(db: AsyncSession, data: dict[str, Any]) -> PlantingArea:
    now = datetime.now(timezone.utc)
    area = PlantingArea(created_at=now, updated_at=now, **data)
    db.add(area)
    await db.flush()
    return area


async def update_area(db: AsyncSession, area: PlantingArea, changes: dict[str, Any]) -> PlantingArea:
    for field, value in changes.items():
        setattr(area, field, value)
    area.updated_at = datetime.now(timezone.utc)
    await db.flush()
    return area


async def delete_area(db: AsyncSession, area: PlantingArea) -> int:
    """Delete an area and every tree planted in it. Returns the tree count."""
    result = await db.execute(delete(PlantedTree).where(PlantedTree.planting_area_id == area.id))
    await db.delete(area)
    await db.flush()
    logger.info("planting_area_deleted", area_id=area.id, trees_removed=result.rowcount)
    return result.rowcount


# ---------------------------------------------------------------------------
# Trees
# ---------------------------------------------------------------------------


async def list_trees(db: AsyncSession, planting_area_id: str | None = None) -> list[PlantedTree]:
    """Planted trees, newest first, optionally for a single area."""
    stmt = select(PlantedTree)
    if planting_area_id:
        stmt = stmt.where(PlantedTree.planting_area_id == planting_area_id)
    result = await db.execute(stmt.order_by(PlantedTree.planted_at.desc()))
    return list(result.scalars().all())


async def list_user_trees(db: AsyncSession, user_id: str) -> list[PlantedTree]:
    result = await db.execute(
        select(PlantedTree)
        .where(PlantedTree.planted_by == user_id)
        .order_by(PlantedTree.planted_at.desc())
    )
    return list(result.scalars().all())


async def plant_tree(
    db: AsyncSession,
    planter: User,
    planting_area_id: str,
    tree_type: str,
    notes: str | None = None,
) -> PlantedTree:
    """
    Plant a tree in an existing area and mark the area planted.

    Raises:
        LookupError: If the area does not exist.
    """
    area = await get_area(db, planting_area_id)
    if area is None:
        msg = "Planting area not found"
        raise LookupError(msg)

    now = datetime.now(timezone.utc)
    tree = PlantedTree(tree_type=tree_type, notes=notes, planted_at=now)
    tree.area = area
    tree.planter = planter
    db.add(tree)

    area.is_planted = True
    area.updated_at = now
    await db.flush()
    logger.info("tree_planted", tree_id=tree.id, area_id=area.id, user_id=planter.id)
    return tree
