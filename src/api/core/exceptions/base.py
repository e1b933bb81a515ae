"""Exception taxonomy and global exception handlers for the FastAPI application."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..messages import MessageCode, get_default_message
from src.utils.logger import get_logger

logger = get_logger(__name__)


class OrganizationApiException(Exception):
    """Base exception for the organization API with unified message codes."""

    def __init__(
        self,
        message_code: MessageCode,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict | None = None,
        headers: dict | None = None,
        message: str | None = None,
    ):
        self.message_code = message_code
        self.status_code = status_code
        self.message: str = message or get_default_message(message_code)
        self.details = details or {}
        self.headers = headers or {}
        super().__init__(self.message)

    def to_response_dict(self) -> dict:
        """Convert exception to API response format."""
        return {"error": self.message}


class UnauthenticatedError(OrganizationApiException):
    """Missing, malformed, expired or wrongly signed bearer token."""

    def __init__(self, message_code: MessageCode = MessageCode.INVALID_TOKEN):
        super().__init__(
            message_code,
            status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
        )


class InvalidInputError(OrganizationApiException):
    def __init__(
        self,
        message_code: MessageCode = MessageCode.INVALID_INPUT,
        details: dict | None = None,
    ):
        super().__init__(message_code, status.HTTP_400_BAD_REQUEST, details)


class NotFoundError(OrganizationApiException):
    """No row for (id, tenant).

    Also raised when the id exists under another tenant, the two cases must
    look identical to the caller.
    """

    def __init__(self, details: dict | None = None):
        super().__init__(
            MessageCode.ORGANIZATION_NOT_FOUND, status.HTTP_404_NOT_FOUND, details
        )


class StoreUnavailableError(OrganizationApiException):
    def __init__(self, details: dict | None = None):
        super().__init__(
            MessageCode.STORE_UNAVAILABLE,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            details,
        )


def error_response(
    status_code: int, message: str, headers: dict | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"error": message}, headers=headers
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""

    @app.exception_handler(OrganizationApiException)
    async def organization_api_exception_handler(
        request: Request, exc: OrganizationApiException
    ) -> JSONResponse:
        """Handle taxonomy exceptions raised by dependencies and services."""
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "API exception",
            message_code=exc.message_code.value,
            status_code=exc.status_code,
            path=request.url.path,
            method=request.method,
            details=exc.details,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_response_dict(),
            headers=exc.headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def starlette_http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle Starlette HTTP exceptions (unknown routes, wrong methods)."""
        logger.warning(
            "HTTP exception",
            status_code=exc.status_code,
            detail=exc.detail,
            path=request.url.path,
            method=request.method,
        )

        return error_response(
            exc.status_code, str(exc.detail), getattr(exc, "headers", None)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request body shape errors."""
        logger.warning(
            "Validation error occurred",
            path=request.url.path,
            method=request.method,
            errors=[
                {"loc": list(error.get("loc", ())), "type": error.get("type")}
                for error in exc.errors()
            ],
        )

        return error_response(
            status.HTTP_400_BAD_REQUEST,
            get_default_message(MessageCode.VALIDATION_ERROR),
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request, exc: SQLAlchemyError
    ) -> JSONResponse:
        """Handle database errors that escaped the store."""
        logger.error(
            "Database error",
            path=request.url.path,
            method=request.method,
            exception_type=type(exc).__name__,
        )

        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            get_default_message(MessageCode.STORE_UNAVAILABLE),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle all other unhandled exceptions."""
        if isinstance(exc, OrganizationApiException):
            return await organization_api_exception_handler(request, exc)

        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            exception_type=type(exc).__name__,
            exc_info=exc,
        )

        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            get_default_message(MessageCode.INTERNAL_ERROR),
        )
