"""Request/response schemas for authentication and profile endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from ecotrack.schemas import ORMModel, RequestModel


def _normalize_email(v: str) -> str:
    return v.lower().strip()


class SignupRequest(RequestModel):
    """Email + password registration."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)
    full_name: str | None = Field(None, max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Normalize email to lowercase."""
        return _normalize_email(v)


class LoginRequest(RequestModel):
    """Login with email + password."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Normalize email to lowercase."""
        return _normalize_email(v)


class ForgotPasswordRequest(RequestModel):
    """Request a password reset."""

    email: EmailStr

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Normalize email to lowercase."""
        return _normalize_email(v)


class ResetPasswordRequest(RequestModel):
    """Reset password with the token from the reset link."""

    token: str
    new_password: str = Field(..., min_length=1, max_length=128)


class UserResponse(ORMModel):
    """Full user profile. Only ever returned to the user themselves."""

    id: str
    email: str
    full_name: str | None = None
    role: str
    avatar_url: str | None = None
    bio: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AuthPayload(ORMModel):
    """Token plus the authenticated user."""

    token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse


class ProfileUpdateRequest(RequestModel):
    """Profile update. Omitted fields are left unchanged."""

    full_name: str | None = Field(None, max_length=128)
    avatar_url: str | None = None
    bio: str | None = Field(None, max_length=500)
