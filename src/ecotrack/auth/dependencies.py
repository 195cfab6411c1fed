"""FastAPI authentication dependencies (the auth gate)."""

from __future__ import annotations

import jwt
from fastapi import Depends, HTTPException, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ecotrack.auth.jwt import verify_token
from ecotrack.auth.service import get_user_by_id
from ecotrack.config import Settings
from ecotrack.database import get_session
from ecotrack.db.models import User

_bearer = HTTPBearer(auto_error=False)

_UNAUTHORIZED = "Not authorized to access this route"


def get_app_settings(request: Request) -> Settings:
    """Settings the app was built with."""
    return request.app.state.settings


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Security(_bearer),
    db: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
) -> User:
    """
    Resolve the bearer token to a User.

    Raises 401 when the header is missing, the token does not verify, or the
    subject no longer exists.
    """
    if credentials is None:
        raise HTTPException(status_code=401, detail=_UNAUTHORIZED, headers={"WWW-Authenticate": "Bearer"})

    try:
        payload = verify_token(credentials.credentials, settings, expected_type="access")
    except jwt.InvalidTokenError as e:
        raise HTTPException(status_code=401, detail=_UNAUTHORIZED, headers={"WWW-Authenticate": "Bearer"}) from e

    user = await get_user_by_id(db, str(payload["sub"]))
    if user is None:
        raise HTTPException(status_code=401, detail="User not found")
    return user


async def require_admin(user: User = Depends(get_current_user)) -> User:
    """Same as get_current_user, but the user must have the admin role."""
    if user.role != "admin":
        raise HTTPException(status_code=403, detail="Not authorized as admin")
    return user
