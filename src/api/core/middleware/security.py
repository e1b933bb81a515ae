from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

from src.api.core.constants import API_VERSION_HEADER
from src.api.core.exceptions.base import error_response
from src.api.core.messages import MessageCode, get_default_message
from src.utils.logger import get_logger

logger = get_logger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    def __init__(self, app, api_version: str, is_production: bool = False):
        super().__init__(app)
        self.api_version = api_version
        self.is_production = is_production

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        headers = {
            "X-Content-Type-Options": "nosniff",
            "X-Frame-Options": "DENY",
            "Referrer-Policy": "strict-origin-when-cross-origin",
            API_VERSION_HEADER: self.api_version,
        }

        if self.is_production and request.url.scheme == "https":
            headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"

        for key, value in headers.items():
            if key not in response.headers:
                response.headers[key] = value

        return response


class PayloadSizeMiddleware:
    """Reject request bodies above ``max_request_size`` bytes with 413.

    A declared ``Content-Length`` is checked up front. Bodies sent without one
    (chunked uploads) are read and counted first, then replayed to the app
    only if they stayed within the limit.
    """

    def __init__(self, app, max_request_size: int) -> None:
        self.app = app
        self.max_request_size = max_request_size

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive)
        content_length = request.headers.get("Content-Length")

        if content_length is not None:
            try:
                size = int(content_length)
            except ValueError:
                response = error_response(
                    status.HTTP_400_BAD_REQUEST,
                    get_default_message(MessageCode.BAD_REQUEST),
                )
                await response(scope, receive, send)
                return
            if size > self.max_request_size:
                await self._reject(scope, receive, send, size)
                return
            await self.app(scope, receive, send)
            return

        messages = []
        received = 0
        while True:
            message = await receive()
            messages.append(message)
            if message["type"] != "http.request":
                break
            received += len(message.get("body", b""))
            if received > self.max_request_size:
                await self._reject(scope, receive, send, received)
                return
            if not message.get("more_body", False):
                break

        async def replay():
            if messages:
                return messages.pop(0)
            return await receive()

        await self.app(scope, replay, send)

    async def _reject(self, scope, receive, send, size: int) -> None:
        logger.warning(
            "Request too large",
            received_bytes=size,
            max_request_size=self.max_request_size,
            path=scope["path"],
        )
        # Exception handlers do not see errors raised in middleware
        response = error_response(
            status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            get_default_message(MessageCode.PAYLOAD_TOO_LARGE),
        )
        await response(scope, receive, send)
