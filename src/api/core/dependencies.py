from typing import Annotated, AsyncGenerator

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from src.core.context import TenantIdentity
from src.database.store import OrganizationStore
from src.modules.auth.auth_handlers import handle_jwt_auth
from src.modules.organization.use_cases import OrganizationService
from src.utils.settings.auth import AuthSettings


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session from app state."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


def get_auth_settings(request: Request) -> AuthSettings:
    return request.app.state.auth_settings


async def get_current_tenant(
    auth_settings: Annotated[AuthSettings, Depends(get_auth_settings)],
    authorization: Annotated[str | None, Header()] = None,
) -> TenantIdentity:
    """Authenticate the bearer token and return the caller's tenant.

    Runs before the route body, so a rejected request never reaches the
    service or the database.
    """
    tenant = handle_jwt_auth(
        authorization,
        auth_settings.JWT_SECRET.get_secret_value(),
        [auth_settings.JWT_ALGORITHM],
    )
    structlog.contextvars.bind_contextvars(
        tenant_id=tenant.tenant_id, subject=tenant.subject
    )
    return tenant


async def get_organization_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> OrganizationService:
    """Get organization service with a request-scoped store."""
    return OrganizationService(OrganizationStore(db))


AsyncSessionDep = Annotated[AsyncSession, Depends(get_db_session)]
OrganizationServiceDep = Annotated[
    OrganizationService, Depends(get_organization_service)
]
CurrentTenantDep = Annotated[TenantIdentity, Depends(get_current_tenant)]
