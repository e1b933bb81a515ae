"""Health check endpoints for monitoring."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from src.api.core.dependencies import AsyncSessionDep
from src.modules.health.service import HealthService
from src.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(db: AsyncSessionDep) -> JSONResponse:
    """Report whether the database answers."""
    database = await HealthService(db).check_database_health()
    healthy = database.status == "healthy"
    if not healthy:
        logger.error(
            "Health check failed", service=database.service, error=database.error
        )
    return JSONResponse(
        status_code=status.HTTP_200_OK
        if healthy
        else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "healthy" if healthy else "unhealthy",
            "database": database.status,
        },
    )


@router.get("/liveness")
async def liveness_check() -> dict:
    """Simple liveness check - indicates if service is running."""
    return {"status": "alive"}
