import asyncio
from contextlib import asynccontextmanager, suppress

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.core.exceptions.base import register_exception_handlers
from src.api.core.middleware.logging import logging_middleware
from src.api.core.middleware.security import (
    PayloadSizeMiddleware,
    SecurityHeadersMiddleware,
)
from src.api.router import build_api_router
from src.database.connection import (
    create_engine_from_settings,
    create_session_factory,
    init_schema,
)
from src.modules.registration.announcer import (
    RegistrationAnnouncer,
    launch_announcement,
)
from src.utils.logger import setup_logging
from src.utils.settings.app import AppSettings
from src.utils.settings.auth import AuthSettings
from src.utils.settings.database import DatabaseSettings
from src.utils.settings.registry import RegistrySettings


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    app_settings: AppSettings = app.state.app_settings
    logger = setup_logging(
        app_settings.is_production, app_settings.LOG_LEVEL, app_settings.ENVIRONMENT
    )
    logger.info("Starting Organization MFE API...")

    # Read at startup rather than import time
    auth_settings = AuthSettings()
    app_settings.validate_prod(auth_settings.JWT_SECRET.get_secret_value())
    app.state.auth_settings = auth_settings

    database_settings = DatabaseSettings()
    engine = create_engine_from_settings(database_settings)
    await init_schema(engine)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    logger.info("Database ready", path=str(database_settings.database_file))

    app.state.registration_task = launch_announcement(
        RegistrationAnnouncer(RegistrySettings())
    )

    yield

    # Shutdown
    logger.info("Shutting down Organization MFE API...")
    registration_task: asyncio.Task = app.state.registration_task
    if not registration_task.done():
        registration_task.cancel()
        with suppress(asyncio.CancelledError):
            await registration_task
    await engine.dispose()


def create_app(app_settings: AppSettings | None = None) -> FastAPI:
    app_settings = app_settings or AppSettings()
    is_production = app_settings.is_production

    app = FastAPI(
        title="Organization MFE API",
        description="Tenant-scoped organization profiles for the micro-frontend host",
        version=app_settings.API_VERSION,
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
        openapi_url=None if is_production else "/openapi.json",
    )
    app.state.app_settings = app_settings

    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials="*" not in app_settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SecurityHeadersMiddleware,
        api_version=app_settings.API_VERSION,
        is_production=is_production,
    )
    app.add_middleware(
        PayloadSizeMiddleware, max_request_size=app_settings.MAX_REQUEST_SIZE
    )
    app.middleware("http")(logging_middleware)

    app.include_router(build_api_router(app_settings.API_BASE_PATH))
    return app


app = create_app()


def run_dev_server():
    """Run development server with auto-reload."""
    settings = AppSettings()
    uvicorn.run(
        "src.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True,
        access_log=False,
    )


def run_prod_server():
    """Run production server."""
    settings = AppSettings()
    uvicorn.run(
        "src.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
        access_log=False,
    )


if __name__ == "__main__":
    run_dev_server()
