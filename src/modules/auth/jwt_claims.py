def extract_tenant_id_from_jwt(payload: dict) -> str | None:
    """Extract the tenant claim from verified JWT claims.

    The host platform issues ``tenantId``; ``tenant_id`` takes precedence when
    both are present.
    """
    for claim in ("tenant_id", "tenantId"):
        value = payload.get(claim)
        if isinstance(value, str) and value.strip():
            return value
    return None


def extract_subject_from_jwt(payload: dict) -> str | None:
    subject = payload.get("sub") or payload.get("userId")
    return str(subject) if subject is not None else None
