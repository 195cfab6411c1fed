"""CORS for the single-page frontend."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ecotrack.config import Settings

_ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
_EXPOSED_HEADERS = ["X-Request-Id", "X-RateLimit-Remaining", "X-RateLimit-Limit"]


def setup_cors(app: FastAPI, settings: Settings) -> None:
    """Allow the configured origins, with credentials and the frontend's request headers."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=_ALLOWED_METHODS,
        allow_headers=settings.cors_allow_headers,
        expose_headers=_EXPOSED_HEADERS,
    )
