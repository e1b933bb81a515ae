"""Global test configuration and fixtures for the Organization MFE API."""

import time
from collections.abc import AsyncGenerator
from typing import Callable

import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from src.database.connection import (
    create_engine_from_settings,
    create_session_factory,
    init_schema,
)
from src.database.models import Organization
from src.database.store import OrganizationStore
from src.utils.settings.database import DatabaseSettings
from tests.factories import OrganizationFactory

TEST_JWT_SECRET = "test-jwt-secret-key-for-testing-only"
TEST_JWT_ALGORITHM = "HS256"
TEST_BASE_URL = "http://test-organization-api"


@pytest.fixture(autouse=True)
def test_environment(monkeypatch, tmp_path):
    """Point every settings class at test values and a fresh database file."""
    monkeypatch.setenv("ENVIRONMENT", "TEST")
    monkeypatch.setenv("DB_PATH", str(tmp_path / "data" / "organizations.db"))
    monkeypatch.setenv("JWT_SECRET", TEST_JWT_SECRET)
    monkeypatch.setenv("JWT_ALGORITHM", TEST_JWT_ALGORITHM)
    monkeypatch.setenv("MFE_ADMIN_TOKEN", "")
    monkeypatch.setenv("API_BASE_PATH", "")
    return tmp_path


@pytest.fixture
def organization_factory():
    return OrganizationFactory


@pytest_asyncio.fixture
async def async_engine(test_environment) -> AsyncGenerator[AsyncEngine, None]:
    """Create async engine for the test database."""
    engine = create_engine_from_settings(DatabaseSettings())
    await init_schema(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    async with create_session_factory(async_engine)() as session:
        yield session


@pytest.fixture
def organization_store(db_session: AsyncSession) -> OrganizationStore:
    return OrganizationStore(db_session)


@pytest_asyncio.fixture
async def app(test_environment) -> AsyncGenerator[FastAPI, None]:
    """Create FastAPI application with lifespan manager for testing."""
    from src.main import create_app

    application = create_app()
    async with LifespanManager(application):
        yield application


# Test Data Fixtures
@pytest_asyncio.fixture
async def test_organization(
    db_session: AsyncSession, organization_factory
) -> Organization:
    """Create an organization owned by tenant ``t1``."""
    return await organization_factory.create_async(
        db_session, tenant_id="t1", name="Test Organization"
    )


# JWT Token Fixtures
@pytest.fixture()
def jwt_token_factory() -> Callable[..., str]:
    """Factory for creating JWT tokens carrying a tenant claim."""

    def create_token(
        tenant_id: str | None = "t1",
        expires_in: int | None = 3600,
        secret: str = TEST_JWT_SECRET,
        claim: str = "tenant_id",
        **extra_claims,
    ) -> str:
        payload = {"sub": "user-1", **extra_claims}
        if tenant_id is not None:
            payload[claim] = tenant_id
        if expires_in is not None:
            payload["exp"] = int(time.time()) + expires_in
        return jwt.encode(payload, secret, algorithm=TEST_JWT_ALGORITHM)

    return create_token


# HTTP Client Fixtures
@pytest_asyncio.fixture
async def public_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client without credentials."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=TEST_BASE_URL,
    ) as ac:
        yield ac


@pytest.fixture
def client_factory(app: FastAPI, jwt_token_factory):
    """Factory for creating HTTP clients authenticated as a given tenant."""

    def create_client_for_tenant(tenant_id: str) -> AsyncClient:
        token = jwt_token_factory(tenant_id)
        return AsyncClient(
            transport=ASGITransport(app=app),
            base_url=TEST_BASE_URL,
            headers={"Authorization": f"Bearer {token}"},
        )

    return create_client_for_tenant


@pytest_asyncio.fixture
async def authorized_client(client_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for tenant ``t1``."""
    async with client_factory("t1") as ac:
        yield ac


@pytest_asyncio.fixture
async def other_tenant_client(client_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for tenant ``t2``."""
    async with client_factory("t2") as ac:
        yield ac
