"""
Authentication business logic.

Handles user creation, credential checks and the password reset flow.
"""

from __future__ import annotations

import hashlib
import secrets
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

import structlog
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from ecotrack.auth.password import (
    check_needs_rehash,
    hash_password,
    validate_password_strength,
    verify_password,
)
from ecotrack.db.models import PasswordResetToken, User

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from ecotrack.config import Settings

logger = structlog.get_logger()


# ---------------------------------------------------------------------------
# User queries
# ---------------------------------------------------------------------------


async def get_user_by_id(db: AsyncSession, user_id: str) -> User | None:
    """Fetch a user by ID."""
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """Fetch a user by email (case-insensitive)."""
    result = await db.execute(select(User).where(func.lower(User.email) == email.lower()))
    return result.scalar_one_or_none()


# ---------------------------------------------------------------------------
# Registration & login
# ---------------------------------------------------------------------------


async def register_user(
    db: AsyncSession,
    settings: Settings,
    email: str,
    password: str,
    full_name: str | None = None,
) -> User:
    """
    Register a new user with email + password.

    Raises:
        PasswordStrengthError: If the password breaks the length rules.
        ValueError: If the email is already registered.
    """
    validate_password_strength(password, settings.password_min_length, settings.password_max_length)

    existing = await get_user_by_email(db, email)
    if existing is not None:
        msg = "Email already registered"
        raise ValueError(msg)

    normalized = email.lower().strip()
    admin_emails = {e.lower() for e in settings.admin_emails}
    now = datetime.now(timezone.utc)
    user = User(
        email=normalized,
        password_hash=hash_password(password),
        full_name=full_name,
        role="admin" if normalized in admin_emails else "user",
        created_at=now,
        updated_at=now,
    )
    db.add(user)
    try:
        await db.flush()
    except IntegrityError as e:
        # a concurrent signup took the address between the check and the insert
        await db.rollback()
        msg = "Email already registered"
        raise ValueError(msg) from e
    logger.info("user_registered", user_id=user.id, role=user.role)
    return user


async def authenticate_user(db: AsyncSession, email: str, password: str) -> User | None:
    """Return the user when the credentials match, otherwise None."""
    user = await get_user_by_email(db, email)
    if user is None:
        logger.info("login_failed", reason="unknown_email")
        return None

    if not verify_password(password, user.password_hash):
        logger.info("login_failed", reason="bad_password", user_id=user.id)
        return None

    if check_needs_rehash(user.password_hash):
        user.password_hash = hash_password(password)
        await db.flush()

    return user


# ---------------------------------------------------------------------------
# Password reset
# ---------------------------------------------------------------------------


def _hash_token(raw_token: str) -> str:
    return hashlib.sha256(raw_token.encode()).hexdigest()


async def create_reset_token(db: AsyncSession, user_id: str, ttl_minutes: int) -> str:
    """Store a hashed single-use reset token and return the raw value."""
    raw_token = secrets.token_urlsafe(32)
    now = datetime.now(timezone.utc)
    db.add(
        PasswordResetToken(
            user_id=user_id,
            token_hash=_hash_token(raw_token),
            expires_at=now + timedelta(minutes=ttl_minutes),
            created_at=now,
        )
    )
    await db.flush()
    return raw_token


async def reset_password(db: AsyncSession, settings: Settings, raw_token: str, new_password: str) -> User:
    """
    Consume a reset token and set a new password.

    Raises:
        PasswordStrengthError: If the new password breaks the length rules.
        ValueError: If the token is unknown, expired or already used.
    """
    validate_password_strength(new_password, settings.password_min_length, settings.password_max_length)

    result = await db.execute(
        select(PasswordResetToken).where(PasswordResetToken.token_hash == _hash_token(raw_token))
    )
    token = result.scalar_one_or_none()
    now = datetime.now(timezone.utc)
    if token is None or token.used_at is not None:
        msg = "Invalid or already used reset token"
        raise ValueError(msg)

    expires_at = token.expires_at
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=timezone.utc)
    if expires_at < now:
        msg = "Reset token has expired"
        raise ValueError(msg)

    user = await get_user_by_id(db, token.user_id)
    if user is None:
        msg = "Invalid or already used reset token"
        raise ValueError(msg)

    user.password_hash = hash_password(new_password)
    user.updated_at = now
    token.used_at = now
    await db.flush()
    logger.info("password_reset", user_id=user.id)
    return user
