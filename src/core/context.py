"""Authentication context model for typed tenant identity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TenantIdentity:
    """Identity of the caller as proven by a verified bearer token."""

    tenant_id: str
    subject: str | None = None

    def __post_init__(self):
        """Ensure the tenant claim is present and usable."""
        if not isinstance(self.tenant_id, str) or not self.tenant_id.strip():
            raise ValueError("tenant_id is required in authentication context")
