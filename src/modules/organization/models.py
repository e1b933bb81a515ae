"""Typed input for organization create and update."""

from pydantic import BaseModel, field_validator

from src.database.models import OPTIONAL_FIELDS


class OrganizationFields(BaseModel):
    """Mutable organization fields with defaults applied.

    ``name`` is kept as given (possibly missing or blank) and checked by the
    service; every other field falls back to an empty string.
    """

    model_config = {"frozen": True}

    name: str | None = None
    org_number: str = ""
    address: str = ""
    city: str = ""
    zip: str = ""
    phone: str = ""
    email: str = ""
    website: str = ""
    description: str = ""

    @field_validator(*OPTIONAL_FIELDS, mode="before")
    @classmethod
    def none_to_empty(cls, value):
        return "" if value is None else value

    @property
    def clean_name(self) -> str:
        return (self.name or "").strip()

    def column_values(self) -> dict[str, str]:
        """Values for every mutable column, ``name`` trimmed."""
        values = {field: getattr(self, field) for field in OPTIONAL_FIELDS}
        values["name"] = self.clean_name
        return values
