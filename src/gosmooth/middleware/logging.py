"""structlog setup.

Event dicts pass through ``redact_secrets`` before rendering, so a stray
``password=`` or ``token=`` keyword never reaches the log output.
"""

import logging
from typing import Any

import structlog

from gosmooth.config import Settings

SECRET_KEYS = frozenset({"password", "new_password", "current_password", "password_hash", "token", "authorization"})
REDACTED = "[redacted]"

# Loggers that are chatty at INFO and add nothing the request log lacks.
_QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "aiosqlite")


def redact_secrets(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ANN401
    for key in event_dict.keys() & SECRET_KEYS:
        event_dict[key] = REDACTED
    return event_dict


def setup_logging(settings: Settings) -> None:
    """Configure structlog: JSON lines in deployment, console output for local runs."""
    renderer: structlog.types.Processor
    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            redact_secrets,
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
