import time
import uuid

import structlog
from fastapi import Request

from src.api.core.constants import HEALTH_PATH_PREFIX, REQUEST_ID_HEADER
from src.utils.logger import get_client_ip, get_logger

logger = get_logger(__name__)


def _request_id(request: Request) -> str:
    incoming = request.headers.get(REQUEST_ID_HEADER, "").strip()
    # Cap client-supplied ids so they cannot bloat every log line
    return incoming[:128] if incoming else uuid.uuid4().hex


async def logging_middleware(request: Request, call_next):
    """Bind per-request log context and emit one access event per request.

    Health checks are passed through untouched. The request id is taken from
    ``X-Request-ID`` when the caller (usually the host shell) sends one and is
    echoed back on the response either way.
    """
    if request.url.path.startswith(HEALTH_PATH_PREFIX):
        return await call_next(request)

    started = time.perf_counter()
    request_id = _request_id(request)

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
        ip_address=get_client_ip(request),
    )

    response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id

    duration_ms = int((time.perf_counter() - started) * 1000)
    if response.status_code >= 500:
        log = logger.error
    elif response.status_code >= 400:
        log = logger.warning
    else:
        log = logger.info
    log("request", status_code=response.status_code, duration_ms=duration_ms)

    return response
