"""Authentication router: all /api/auth/* endpoints."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ecotrack.auth.dependencies import get_app_settings, get_current_user
from ecotrack.auth.jwt import create_access_token
from ecotrack.auth.schemas import (
    AuthPayload,
    ForgotPasswordRequest,
    LoginRequest,
    ResetPasswordRequest,
    SignupRequest,
    UserResponse,
)
from ecotrack.auth.service import (
    authenticate_user,
    create_reset_token,
    get_user_by_email,
    register_user,
    reset_password,
)
from ecotrack.config import Settings
from ecotrack.database import get_session
from ecotrack.db.models import User
from ecotrack.schemas import ApiResponse, ok

logger = structlog.get_logger()

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


def _auth_payload(user: User, settings: Settings) -> AuthPayload:
    return AuthPayload(
        token=create_access_token(user.id, settings),
        expires_in=settings.jwt_expire_days * 86400,
        user=UserResponse.model_validate(user),
    )


@router.post("/signup", response_model=ApiResponse[AuthPayload], status_code=201)
async def signup(
    body: SignupRequest,
    db: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
) -> ApiResponse:
    """Create an account and return a token for it."""
    try:
        user = await register_user(db, settings, body.email, body.password, body.full_name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    await db.commit()
    return ok(_auth_payload(user, settings))


@router.post("/login", response_model=ApiResponse[AuthPayload])
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
) -> ApiResponse:
    """Exchange email + password for a token."""
    user = await authenticate_user(db, body.email, body.password)
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    await db.commit()
    return ok(_auth_payload(user, settings))


@router.get("/me", response_model=ApiResponse[UserResponse])
async def me(user: User = Depends(get_current_user)) -> ApiResponse:
    """Return the authenticated user."""
    return ok(UserResponse.model_validate(user))


@router.post("/forgot-password", response_model=ApiResponse[None])
async def forgot_password(
    body: ForgotPasswordRequest,
    db: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
) -> ApiResponse:
    """Start a password reset. Always answers 200 so emails cannot be probed."""
    user = await get_user_by_email(db, body.email)
    if user is not None:
        await create_reset_token(db, user.id, settings.password_reset_token_ttl_minutes)
        await db.commit()
        # TODO: deliver the raw token by email once a mail provider is configured
        logger.info("password_reset_requested", user_id=user.id)

    return ok(message="If that email exists, a reset link has been sent.")


@router.post("/reset-password", response_model=ApiResponse[None])
async def reset_password_endpoint(
    body: ResetPasswordRequest,
    db: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
) -> ApiResponse:
    """Set a new password with a valid reset token."""
    try:
        await reset_password(db, settings, body.token, body.new_password)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    await db.commit()
    return ok(message="Password has been reset.")
