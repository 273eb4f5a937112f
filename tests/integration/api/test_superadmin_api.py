import pytest
from httpx import AsyncClient

from src.api.utils.superadmin_auth import SUPERADMIN_COOKIE_NAME
from src.domain.entities import SuperAdminStatus, UserRole
from tests.integration.helpers import PASSWORD, login


async def _superadmin_headers(client: AsyncClient, seed):
    admin = await seed.superadmin()
    response = await client.post(
        "/api/superadmin/login", json={"email": admin.email, "password": PASSWORD}
    )
    assert response.status_code == 200, response.text
    assert SUPERADMIN_COOKIE_NAME in response.cookies
    client.cookies.clear()
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.mark.asyncio
async def test_blocked_superadmin_cannot_login(client: AsyncClient, seed):
    admin = await seed.superadmin(status=SuperAdminStatus.blocked)

    response = await client.post(
        "/api/superadmin/login", json={"email": admin.email, "password": PASSWORD}
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "ACCOUNT_BLOCKED"


@pytest.mark.asyncio
async def test_tenant_session_is_not_a_superadmin_token(client: AsyncClient, seed):
    org = await seed.organization()
    admin = await seed.user(org, role=UserRole.admin)
    headers = await login(client, admin)
    client.cookies.clear()

    response = await client.get("/api/superadmin/tenants", headers=headers)

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_superadmin_token_is_not_a_tenant_session(client: AsyncClient, seed):
    headers = await _superadmin_headers(client, seed)

    response = await client.get("/api/cases", headers=headers)

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_create_tenant_and_log_in_as_its_admin(client: AsyncClient, seed):
    headers = await _superadmin_headers(client, seed)

    created = await client.post(
        "/api/superadmin/tenants",
        json={
            "name": "Despacho Ruiz",
            "email": "ruiz.admin@example.com",
            "password": "Secreto#2025",
            "admin_name": "Elena Ruiz",
            "palette": "slate",
        },
        headers=headers,
    )
    assert created.status_code == 201, created.text
    body = created.json()
    assert body["organization"]["slug"] == "despacho-ruiz"
    assert body["preset"] == "slate"

    duplicate = await client.post(
        "/api/superadmin/tenants",
        json={"name": "Despacho Ruiz", "email": "ruiz.admin@example.com", "password": "Secreto#2025"},
        headers=headers,
    )
    assert duplicate.status_code == 409

    tenant_login = await client.post(
        "/api/auth/login", json={"email": "ruiz.admin@example.com", "password": "Secreto#2025"}
    )
    assert tenant_login.status_code == 200
    assert tenant_login.json()["user"]["role"] == "admin"


@pytest.mark.asyncio
async def test_deactivate_tenant(client: AsyncClient, seed):
    headers = await _superadmin_headers(client, seed)
    org = await seed.organization()
    member = await seed.user(org)

    response = await client.patch(
        f"/api/superadmin/tenants/{org.id}", json={"is_active": False}, headers=headers
    )
    assert response.status_code == 200
    assert response.json()["is_active"] is False

    member_login = await client.post(
        "/api/auth/login", json={"email": member.email, "password": PASSWORD}
    )
    assert member_login.status_code == 403

    inactive = await client.get(
        "/api/superadmin/organizations", params={"status": "inactive"}, headers=headers
    )
    assert [o["id"] for o in inactive.json()["organizations"]] == [str(org.id)]


@pytest.mark.asyncio
async def test_organization_filters_are_validated(client: AsyncClient, seed):
    headers = await _superadmin_headers(client, seed)

    bad_status = await client.get(
        "/api/superadmin/organizations", params={"status": "zombie"}, headers=headers
    )
    bad_sort = await client.get(
        "/api/superadmin/organizations", params={"sort": "random"}, headers=headers
    )

    assert bad_status.status_code == 400
    assert bad_sort.status_code == 400


@pytest.mark.asyncio
async def test_organization_detail_and_dashboard(client: AsyncClient, seed):
    headers = await _superadmin_headers(client, seed)
    org = await seed.organization()
    staff = await seed.user(org, role=UserRole.staff)
    owner = await seed.user(org)
    await seed.case(org, owner, staff)

    detail = await client.get(f"/api/superadmin/organizations/{org.id}", headers=headers)
    assert detail.status_code == 200
    assert detail.json()["case_count"] == 1
    assert detail.json()["open_cases"] == 1

    missing = await client.get(
        "/api/superadmin/organizations/00000000-0000-0000-0000-000000000000", headers=headers
    )
    assert missing.status_code == 404

    dashboard = await client.get("/api/superadmin/dashboard", headers=headers)
    assert dashboard.status_code == 200
    assert dashboard.json()["cases"] == 1
