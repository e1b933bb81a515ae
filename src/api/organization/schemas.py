"""Organization API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from src.modules.organization.models import OrganizationFields


class OrganizationModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    tenant_id: str
    name: str
    org_number: str
    address: str
    city: str
    zip: str
    phone: str
    email: str
    website: str
    description: str
    created_at: datetime
    updated_at: datetime | None = None


class OrganizationFieldsRequest(BaseModel):
    """Body of POST and PUT.

    Every key is optional here; ``id``, ``tenant_id`` and the timestamps are
    not fields of this model and are dropped if sent.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    org_number: str | None = None
    address: str | None = None
    city: str | None = None
    zip: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    description: str | None = None

    def to_fields(self) -> OrganizationFields:
        return OrganizationFields(**self.model_dump())


class OrganizationListResponse(BaseModel):
    organizations: list[OrganizationModel]


class OrganizationDeleteResponse(BaseModel):
    ok: bool = True
