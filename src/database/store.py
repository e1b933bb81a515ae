"""Tenant-scoped persistence for organization rows."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.exceptions.base import StoreUnavailableError
from src.database.models import Organization
from src.utils.logger import get_logger


class OrganizationStore:
    """Row-level access to the ``organizations`` table.

    Every scoped statement filters on ``id`` and ``tenant_id`` together, so a
    row owned by another tenant is reported exactly like a missing row.
    Mutations commit before returning.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.logger = get_logger(self.__class__.__name__)

    async def insert(self, organization: Organization) -> Organization:
        try:
            self.db.add(organization)
            await self.db.commit()
            await self.db.refresh(organization)
        except SQLAlchemyError as e:
            await self._fail("insert", e)
        return organization

    async def get(
        self, organization_id: str, tenant_id: str, *, reload: bool = False
    ) -> Organization | None:
        stmt = select(Organization).where(
            Organization.id == organization_id,
            Organization.tenant_id == tenant_id,
        )
        if reload:
            stmt = stmt.execution_options(populate_existing=True)
        try:
            result = await self.db.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            await self._fail("get", e)

    async def list_for_tenant(self, tenant_id: str) -> list[Organization]:
        stmt = (
            select(Organization)
            .where(Organization.tenant_id == tenant_id)
            .order_by(Organization.name.asc(), Organization.id.asc())
        )
        try:
            result = await self.db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            await self._fail("list", e)

    async def update(
        self, organization_id: str, tenant_id: str, values: Mapping[str, Any]
    ) -> Organization | None:
        stmt = (
            update(Organization)
            .where(
                Organization.id == organization_id,
                Organization.tenant_id == tenant_id,
            )
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.db.execute(stmt)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._fail("update", e)
        if result.rowcount == 0:
            return None
        # A bulk UPDATE leaves an already loaded instance stale
        return await self.get(organization_id, tenant_id, reload=True)

    async def delete(self, organization_id: str, tenant_id: str) -> bool:
        stmt = delete(Organization).where(
            Organization.id == organization_id,
            Organization.tenant_id == tenant_id,
        )
        try:
            result = await self.db.execute(stmt)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._fail("delete", e)
        return result.rowcount > 0

    async def _fail(self, operation: str, error: SQLAlchemyError):
        await self.db.rollback()
        self.logger.error(
            "Store operation failed",
            operation=operation,
            error_type=type(error).__name__,
        )
        raise StoreUnavailableError({"operation": operation}) from error
