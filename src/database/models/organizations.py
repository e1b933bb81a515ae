"""Organization model."""

import uuid
from datetime import datetime

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, UTCDateTime, utc_now


def generate_organization_id() -> str:
    return str(uuid.uuid4())


# Free-form descriptive columns, all default to an empty string
OPTIONAL_FIELDS = (
    "org_number",
    "address",
    "city",
    "zip",
    "phone",
    "email",
    "website",
    "description",
)


class Organization(Base):
    __tablename__ = "organizations"
    __table_args__ = (Index("ix_organizations_tenant_name", "tenant_id", "name"),)

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=generate_organization_id
    )
    tenant_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    org_number: Mapped[str] = mapped_column(String, nullable=False, default="")
    address: Mapped[str] = mapped_column(String, nullable=False, default="")
    city: Mapped[str] = mapped_column(String, nullable=False, default="")
    zip: Mapped[str] = mapped_column(String, nullable=False, default="")
    phone: Mapped[str] = mapped_column(String, nullable=False, default="")
    email: Mapped[str] = mapped_column(String, nullable=False, default="")
    website: Mapped[str] = mapped_column(String, nullable=False, default="")
    description: Mapped[str] = mapped_column(String, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=utc_now
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        UTCDateTime, nullable=True, default=None
    )

    def __repr__(self) -> str:
        return f"<Organization id={self.id} tenant_id={self.tenant_id} name={self.name!r}>"
