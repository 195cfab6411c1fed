"""Application settings via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables with ECO_ prefix.

    ``database_url`` and ``jwt_secret`` have no defaults: the process refuses to
    start without them.
    """

    model_config = SettingsConfigDict(
        env_prefix="ECO_",
        env_file=".env",
        case_sensitive=False,
    )

    # --- Core ---
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    database_url: str
    redis_url: str = "redis://localhost:6379/0"
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000", "http://127.0.0.1:5173"]
    cors_allow_credentials: bool = True
    cors_allow_headers: list[str] = ["Content-Type", "Authorization", "X-Request-Id"]
    rate_limit_requests: int = 100
    rate_limit_window_seconds: int = 60
    log_level: str = "INFO"
    log_format: str = "json"

    # --- JWT ---
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    jwt_expire_days: int = 7
    jwt_issuer: str = "ecotrack.bd"

    # --- Accounts ---
    admin_emails: list[str] = []
    password_min_length: int = 6
    password_max_length: int = 128
    password_reset_token_ttl_minutes: int = 60

    # --- Content ---
    seed_demo_content: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()  # type: ignore[call-arg]
