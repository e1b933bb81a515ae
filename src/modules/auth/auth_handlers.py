"""Bearer token verification."""

from jose import JWTError, jwt

from src.api.core.exceptions.base import UnauthenticatedError
from src.api.core.messages import MessageCode
from src.core.context import TenantIdentity
from src.modules.auth.jwt_claims import (
    extract_subject_from_jwt,
    extract_tenant_id_from_jwt,
)
from src.utils.logger import get_logger

logger = get_logger(__name__)


def parse_authorization_header(authorization: str | None) -> str:
    """Return the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization or not authorization.strip():
        raise UnauthenticatedError(MessageCode.AUTH_REQUIRED)

    auth_parts = authorization.split()
    if len(auth_parts) != 2 or auth_parts[0].lower() != "bearer":
        logger.debug(
            "Invalid authorization header format", auth_parts_count=len(auth_parts)
        )
        raise UnauthenticatedError(MessageCode.INVALID_TOKEN)
    return auth_parts[1]


def verify_bearer_token(
    token: str, secret: str, algorithms: list[str]
) -> TenantIdentity:
    """Verify signature and expiry of ``token`` and return the caller's tenant.

    Stateless: nothing is looked up in the database.
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=algorithms,
            options={"verify_aud": False},
        )
    except JWTError as e:
        logger.info("JWT decoding failed", error_type=type(e).__name__)
        raise UnauthenticatedError(MessageCode.INVALID_TOKEN)

    tenant_id = extract_tenant_id_from_jwt(payload)
    if tenant_id is None:
        logger.info("JWT has no tenant claim")
        raise UnauthenticatedError(MessageCode.INVALID_TOKEN)

    return TenantIdentity(
        tenant_id=tenant_id, subject=extract_subject_from_jwt(payload)
    )


def handle_jwt_auth(
    authorization: str | None, secret: str, algorithms: list[str]
) -> TenantIdentity:
    token = parse_authorization_header(authorization)
    return verify_bearer_token(token, secret, algorithms)
