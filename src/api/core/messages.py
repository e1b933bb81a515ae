"""Message codes and the human-readable text sent in ``{"error": ...}`` bodies.

The host UI shows these strings as-is, so changing one is a client-visible
change.
"""

from enum import Enum


class MessageCode(str, Enum):
    """Stable identifiers for every error the API can return."""

    # 401
    AUTH_REQUIRED = "AUTH_REQUIRED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # 400 / 404 on organization routes
    ORGANIZATION_NOT_FOUND = "ORGANIZATION_NOT_FOUND"
    ORGANIZATION_NAME_REQUIRED = "ORGANIZATION_NAME_REQUIRED"
    INVALID_INPUT = "INVALID_INPUT"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Transport
    BAD_REQUEST = "BAD_REQUEST"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"

    # 500
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


DEFAULT_MESSAGES = {
    MessageCode.AUTH_REQUIRED: "No token provided",
    MessageCode.INVALID_TOKEN: "Invalid token",
    MessageCode.ORGANIZATION_NOT_FOUND: "Not found",
    # The host UI is Swedish and shows this text verbatim
    MessageCode.ORGANIZATION_NAME_REQUIRED: "Namn krävs",
    MessageCode.INVALID_INPUT: "Invalid input",
    MessageCode.VALIDATION_ERROR: "Invalid request body",
    MessageCode.BAD_REQUEST: "Bad request",
    MessageCode.PAYLOAD_TOO_LARGE: "Request body too large",
    # Storage failures are not described to the caller
    MessageCode.STORE_UNAVAILABLE: "Internal server error",
    MessageCode.INTERNAL_ERROR: "Internal server error",
}


def get_default_message(message_code: MessageCode) -> str:
    return DEFAULT_MESSAGES[message_code]
