"""Structured logging configuration with structlog."""

import logging

import structlog
from structlog.types import EventDict, WrappedLogger

from ecotrack.config import Settings

# Chatty third-party loggers kept at WARNING unless running with debug on
_NOISY_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncio")


def _app_context(settings: Settings) -> structlog.types.Processor:
    def add_app_context(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", "ecotrack-api")
        event_dict.setdefault("env", settings.environment)
        return event_dict

    return add_app_context


def setup_logging(settings: Settings) -> None:
    """Configure structlog; ``log_format`` selects JSON lines or the dev console renderer."""
    renderer: structlog.types.Processor = (
        structlog.dev.ConsoleRenderer() if settings.log_format == "console" else structlog.processors.JSONRenderer()
    )

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.log_format != "console":
        processors.append(_app_context(settings))
    processors += [
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        renderer,
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
    if not settings.debug:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
