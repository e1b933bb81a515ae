import logging
import sys

import structlog
from fastapi import Request
from structlog.stdlib import ProcessorFormatter

SERVICE_NAME = "organization-mfe-api"

# Never rendered, whatever a caller passes as a log field
REDACTED_KEYS = frozenset(
    {"authorization", "token", "jwt_secret", "admin_token", "x-admin-token"}
)

# Libraries that log every statement or connection at INFO/DEBUG
NOISY_LOGGERS = ("aiosqlite", "sqlalchemy.engine", "aiohttp.access")


def get_client_ip(request: Request) -> str:
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "127.0.0.1"


def redact_secrets(
    logger: structlog.BoundLogger, method_name: str, event_dict: dict
) -> dict:
    for key in event_dict.keys() & REDACTED_KEYS:
        event_dict[key] = "***"
    return event_dict


def _build_formatter(is_production: bool) -> ProcessorFormatter:
    if is_production:
        renderer = structlog.processors.JSONRenderer(sort_keys=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True, pad_event_to=8)
    return ProcessorFormatter(processor=renderer)


def setup_logging(
    is_production: bool = False, level: str = "INFO", environment: str | None = None
) -> structlog.BoundLogger:
    """Route structlog and stdlib logging through one stdout handler.

    Request-scoped fields (``request_id``, ``tenant_id`` and friends) are bound
    with ``structlog.contextvars`` by the middleware and auth dependency and
    merged into every event.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            redact_secrets,
            structlog.processors.UnicodeDecoder(),
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter(is_production))

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level)

    # uvicorn propagates to the root handler instead of printing its own lines
    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        logging.getLogger(name).handlers = []
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return structlog.get_logger(SERVICE_NAME).bind(
        service=SERVICE_NAME, environment=environment
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger instance with optional name."""
    return structlog.get_logger(name)
