"""Tests for JWT token management."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from ecotrack.auth.jwt import create_access_token, verify_token
from tests.conftest import make_settings

SETTINGS = make_settings("sqlite+aiosqlite:///unused.db")


class TestAccessToken:
    def test_create_and_verify(self):
        token = create_access_token("user-123", SETTINGS)
        payload = verify_token(token, SETTINGS, expected_type="access")
        assert payload["sub"] == "user-123"
        assert payload["type"] == "access"
        assert payload["iss"] == "ecotrack.bd"

    def test_expiry_uses_configured_days(self):
        token = create_access_token("user-123", SETTINGS)
        payload = verify_token(token, SETTINGS)
        assert payload["exp"] - payload["iat"] == 7 * 86400

    def test_wrong_type_rejected(self):
        token = jwt.encode(
            {"sub": "user-123", "exp": datetime.now(timezone.utc) + timedelta(hours=1), "iss": "ecotrack.bd",
             "type": "refresh"},
            SETTINGS.jwt_secret,
            algorithm="HS256",
        )
        with pytest.raises(jwt.InvalidTokenError, match="Expected token type"):
            verify_token(token, SETTINGS, expected_type="access")

    def test_expired_token_rejected(self):
        token = jwt.encode(
            {"sub": "user-123", "exp": datetime.now(timezone.utc) - timedelta(seconds=5), "iss": "ecotrack.bd",
             "type": "access"},
            SETTINGS.jwt_secret,
            algorithm="HS256",
        )
        with pytest.raises(jwt.InvalidTokenError, match="expired"):
            verify_token(token, SETTINGS)

    def test_other_secret_rejected(self):
        other = make_settings("sqlite+aiosqlite:///unused.db", jwt_secret="a-completely-different-secret-value")
        token = create_access_token("user-123", other)
        with pytest.raises(jwt.InvalidTokenError):
            verify_token(token, SETTINGS)

    def test_other_issuer_rejected(self):
        other = make_settings("sqlite+aiosqlite:///unused.db", jwt_issuer="someone.else")
        token = create_access_token("user-123", other)
        with pytest.raises(jwt.InvalidTokenError):
            verify_token(token, SETTINGS)

    def test_missing_subject_rejected(self):
        token = jwt.encode(
            {"exp": datetime.now(timezone.utc) + timedelta(hours=1), "iss": "ecotrack.bd", "type": "access"},
            SETTINGS.jwt_secret,
            algorithm="HS256",
        )
        with pytest.raises(jwt.InvalidTokenError):
            verify_token(token, SETTINGS)
