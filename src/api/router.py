from fastapi import APIRouter

from src.api.health.router import router as health_router
from src.api.organization.router import router as organization_router


def build_api_router(base_path: str = "") -> APIRouter:
    """Assemble the organization routes under ``base_path`` plus health checks."""
    api_router = APIRouter()
    api_router.include_router(health_router)
    api_router.include_router(organization_router, prefix=base_path.rstrip("/"))
    return api_router
