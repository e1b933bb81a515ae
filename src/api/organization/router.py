"""Organization domain router."""

from fastapi import APIRouter, status

from src.api.core.dependencies import CurrentTenantDep, OrganizationServiceDep
from src.api.organization.schemas import (
    OrganizationDeleteResponse,
    OrganizationFieldsRequest,
    OrganizationListResponse,
    OrganizationModel,
)
from src.modules.organization.models import OrganizationFields

router = APIRouter(
    prefix="/organizations",
    tags=["organizations"],
)


def _fields(body: OrganizationFieldsRequest | None) -> OrganizationFields:
    # An empty request body counts as an empty object
    return (body or OrganizationFieldsRequest()).to_fields()


@router.get("", response_model=OrganizationListResponse)
async def list_organizations(
    current_tenant: CurrentTenantDep,
    org_service: OrganizationServiceDep,
) -> OrganizationListResponse:
    """List the caller's organizations ordered by name."""
    organizations = await org_service.list_organizations(current_tenant)
    return OrganizationListResponse(
        organizations=[OrganizationModel.model_validate(o) for o in organizations]
    )


@router.get("/{organization_id}", response_model=OrganizationModel)
async def get_organization(
    organization_id: str,
    current_tenant: CurrentTenantDep,
    org_service: OrganizationServiceDep,
) -> OrganizationModel:
    organization = await org_service.get_organization(current_tenant, organization_id)
    return OrganizationModel.model_validate(organization)


@router.post(
    "", response_model=OrganizationModel, status_code=status.HTTP_201_CREATED
)
async def create_organization(
    current_tenant: CurrentTenantDep,
    org_service: OrganizationServiceDep,
    organization_data: OrganizationFieldsRequest | None = None,
) -> OrganizationModel:
    organization = await org_service.create_organization(
        current_tenant, _fields(organization_data)
    )
    return OrganizationModel.model_validate(organization)


@router.put("/{organization_id}", response_model=OrganizationModel)
async def update_organization(
    organization_id: str,
    current_tenant: CurrentTenantDep,
    org_service: OrganizationServiceDep,
    organization_data: OrganizationFieldsRequest | None = None,
) -> OrganizationModel:
    """Replace all mutable fields; omitted optional fields become empty."""
    organization = await org_service.update_organization(
        current_tenant, organization_id, _fields(organization_data)
    )
    return OrganizationModel.model_validate(organization)


@router.delete("/{organization_id}", response_model=OrganizationDeleteResponse)
async def delete_organization(
    organization_id: str,
    current_tenant: CurrentTenantDep,
    org_service: OrganizationServiceDep,
) -> OrganizationDeleteResponse:
    await org_service.delete_organization(current_tenant, organization_id)
    return OrganizationDeleteResponse(ok=True)
