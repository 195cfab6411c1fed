"""Health, readiness, and version endpoints."""

from fastapi import APIRouter, Depends
from redis.exceptions import RedisError
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ecotrack.auth.dependencies import get_app_settings
from ecotrack.config import Settings
from ecotrack.database import get_session
from ecotrack.redis_client import get_redis
from ecotrack.schemas import ApiResponse, ok

router = APIRouter(prefix="/api", tags=["Health"])


@router.get("/health", response_model=ApiResponse[dict])
async def health() -> ApiResponse:
    """Liveness probe: returns 200 if the process is alive."""
    return ok({"status": "healthy"})


@router.get("/ready", response_model=ApiResponse[dict])
async def readiness(db: AsyncSession = Depends(get_session)) -> ApiResponse:
    """Readiness probe: checks DB and Redis connectivity."""
    checks: dict[str, str] = {}

    try:
        result = await db.execute(text("SELECT 1"))
        result.scalar()
        checks["database"] = "ok"
    except SQLAlchemyError as exc:
        checks["database"] = f"error: {exc}"

    try:
        await get_redis().ping()
        checks["redis"] = "ok"
    except (RuntimeError, RedisError) as exc:
        checks["redis"] = f"error: {exc}"

    all_ok = all(v == "ok" for v in checks.values())
    return ApiResponse(success=all_ok, data={"status": "ready" if all_ok else "degraded", "checks": checks})


@router.get("/version", response_model=ApiResponse[dict])
async def version(settings: Settings = Depends(get_app_settings)) -> ApiResponse:
    """Return API version and environment."""
    return ok({"version": settings.app_version, "environment": settings.environment})
