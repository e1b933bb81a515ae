from dataclasses import dataclass
from typing import Literal

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.database.models import Organization
from src.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class HealthCheckResult:
    """Result of a health check."""

    service: str
    status: Literal["healthy", "unhealthy"]
    error: str | None = None


class HealthService:
    """Checks the SQLite store behind the organization routes."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def check_database_health(self) -> HealthCheckResult:
        """Database is healthy when it answers and the organizations table exists."""
        try:
            table_count = (
                await self.db.execute(
                    text(
                        "SELECT count(*) FROM sqlite_master "
                        "WHERE type = 'table' AND name = :name"
                    ),
                    {"name": Organization.__tablename__},
                )
            ).scalar()
        except SQLAlchemyError as e:
            return HealthCheckResult(
                service="database", status="unhealthy", error=type(e).__name__
            )

        if not table_count:
            return HealthCheckResult(
                service="database", status="unhealthy", error="schema_missing"
            )
        return HealthCheckResult(service="database", status="healthy")
