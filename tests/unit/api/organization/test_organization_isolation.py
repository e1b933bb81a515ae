"""Cross-tenant isolation of organization records."""

import pytest
import pytest_asyncio
from fastapi import status
from httpx import AsyncClient

from tests.utils.assertions import assert_error_response


@pytest_asyncio.fixture
async def foreign_organization(authorized_client: AsyncClient) -> dict:
    """An organization owned by tenant ``t1``."""
    response = await authorized_client.post(
        "/organizations", json={"name": "Acme AB", "city": "Stockholm"}
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


@pytest.mark.asyncio
async def test_list_does_not_show_other_tenants(
    foreign_organization, other_tenant_client: AsyncClient
):
    response = await other_tenant_client.get("/organizations")
    assert response.json() == {"organizations": []}


@pytest.mark.asyncio
async def test_foreign_get_looks_like_missing(
    foreign_organization, other_tenant_client: AsyncClient
):
    foreign = await other_tenant_client.get(
        f"/organizations/{foreign_organization['id']}"
    )
    missing = await other_tenant_client.get("/organizations/no-such-id")

    assert_error_response(foreign, status.HTTP_404_NOT_FOUND)
    assert foreign.status_code == missing.status_code
    assert foreign.json() == missing.json()


@pytest.mark.asyncio
async def test_foreign_update_looks_like_missing(
    foreign_organization,
    authorized_client: AsyncClient,
    other_tenant_client: AsyncClient,
):
    foreign = await other_tenant_client.put(
        f"/organizations/{foreign_organization['id']}", json={"name": "Hijacked"}
    )
    missing = await other_tenant_client.put(
        "/organizations/no-such-id", json={"name": "Hijacked"}
    )

    assert_error_response(foreign, status.HTTP_404_NOT_FOUND)
    assert foreign.json() == missing.json()

    owner_view = await authorized_client.get(
        f"/organizations/{foreign_organization['id']}"
    )
    assert owner_view.json() == foreign_organization


@pytest.mark.asyncio
async def test_foreign_update_with_invalid_body_is_still_not_found(
    foreign_organization, other_tenant_client: AsyncClient
):
    response = await other_tenant_client.put(
        f"/organizations/{foreign_organization['id']}", json={"name": ""}
    )
    assert_error_response(response, status.HTTP_404_NOT_FOUND)


@pytest.mark.asyncio
async def test_foreign_delete_looks_like_missing(
    foreign_organization,
    authorized_client: AsyncClient,
    other_tenant_client: AsyncClient,
):
    foreign = await other_tenant_client.delete(
        f"/organizations/{foreign_organization['id']}"
    )
    missing = await other_tenant_client.delete("/organizations/no-such-id")

    assert_error_response(foreign, status.HTTP_404_NOT_FOUND)
    assert foreign.json() == missing.json()

    owner_view = await authorized_client.get(
        f"/organizations/{foreign_organization['id']}"
    )
    assert owner_view.status_code == status.HTTP_200_OK


@pytest.mark.asyncio
async def test_same_name_in_two_tenants(
    authorized_client: AsyncClient, other_tenant_client: AsyncClient
):
    first = await authorized_client.post("/organizations", json={"name": "Acme AB"})
    second = await other_tenant_client.post("/organizations", json={"name": "Acme AB"})

    assert first.json()["id"] != second.json()["id"]
    assert len((await authorized_client.get("/organizations")).json()["organizations"]) == 1
    assert len((await other_tenant_client.get("/organizations")).json()["organizations"]) == 1
