from src.api.core.exceptions.base import InvalidInputError, NotFoundError
from src.api.core.messages import MessageCode
from src.core.context import TenantIdentity
from src.database.models import Organization
from src.database.models.base import utc_now
from src.database.store import OrganizationStore
from src.modules.organization.models import OrganizationFields
from src.utils.logger import get_logger


class OrganizationService:
    """Tenant-scoped organization records.

    All reads and writes go through ``OrganizationStore`` with the caller's
    tenant, there is no cache in between.
    """

    def __init__(self, store: OrganizationStore):
        self.store = store
        self.logger = get_logger(self.__class__.__name__)

    async def list_organizations(self, tenant: TenantIdentity) -> list[Organization]:
        return await self.store.list_for_tenant(tenant.tenant_id)

    async def get_organization(
        self, tenant: TenantIdentity, organization_id: str
    ) -> Organization:
        organization = await self.store.get(organization_id, tenant.tenant_id)
        if organization is None:
            raise NotFoundError({"organization_id": organization_id})
        return organization

    async def create_organization(
        self, tenant: TenantIdentity, fields: OrganizationFields
    ) -> Organization:
        self._require_name(fields)

        organization = Organization(
            tenant_id=tenant.tenant_id,
            created_at=utc_now(),
            updated_at=None,
            **fields.column_values(),
        )
        organization = await self.store.insert(organization)
        self.logger.info(
            "Organization created",
            tenant_id=tenant.tenant_id,
            organization_id=organization.id,
        )
        return organization

    async def update_organization(
        self,
        tenant: TenantIdentity,
        organization_id: str,
        fields: OrganizationFields,
    ) -> Organization:
        # Existence is checked before the payload, a foreign id is a 404 even
        # with a bad body
        await self.get_organization(tenant, organization_id)
        self._require_name(fields)

        organization = await self.store.update(
            organization_id,
            tenant.tenant_id,
            {**fields.column_values(), "updated_at": utc_now()},
        )
        if organization is None:
            # Deleted between the check and the write
            raise NotFoundError({"organization_id": organization_id})

        self.logger.info(
            "Organization updated",
            tenant_id=tenant.tenant_id,
            organization_id=organization_id,
        )
        return organization

    async def delete_organization(
        self, tenant: TenantIdentity, organization_id: str
    ) -> None:
        deleted = await self.store.delete(organization_id, tenant.tenant_id)
        if not deleted:
            raise NotFoundError({"organization_id": organization_id})
        self.logger.info(
            "Organization deleted",
            tenant_id=tenant.tenant_id,
            organization_id=organization_id,
        )

    @staticmethod
    def _require_name(fields: OrganizationFields) -> None:
        if not fields.clean_name:
            raise InvalidInputError(
                MessageCode.ORGANIZATION_NAME_REQUIRED, {"field": "name"}
            )
