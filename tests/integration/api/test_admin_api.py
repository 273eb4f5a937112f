import pytest
from httpx import AsyncClient

from src.domain.entities import UserRole
from tests.integration.helpers import PASSWORD, login


@pytest.mark.asyncio
async def test_admin_manages_users(client: AsyncClient, seed):
    """Admins create users inside their organization and edit them"""
    org = await seed.organization()
    admin = await seed.user(org, role=UserRole.admin)
    headers = await login(client, admin)

    created = await client.post(
        "/api/admin/users",
        json={"email": "nuevo@example.com", "name": "Nuevo Cliente", "role": "client"},
        headers=headers,
    )
    assert created.status_code == 201, created.text
    body = created.json()
    assert body["user"]["organization_id"] == str(org.id)
    assert body["temporary_password"]

    duplicate = await client.post(
        "/api/admin/users",
        json={"email": "NUEVO@example.com", "name": "Otro", "role": "client"},
        headers=headers,
    )
    assert duplicate.status_code == 409

    updated = await client.patch(
        f"/api/admin/users/{body['user']['id']}", json={"role": "staff"}, headers=headers
    )
    assert updated.status_code == 200
    assert updated.json()["role"] == "staff"

    listed = await client.get("/api/admin/users", params={"role": "staff"}, headers=headers)
    assert [u["email"] for u in listed.json()["users"]] == ["nuevo@example.com"]


@pytest.mark.asyncio
async def test_admin_cannot_change_own_role(client: AsyncClient, seed):
    org = await seed.organization()
    admin = await seed.user(org, role=UserRole.admin)

    response = await client.patch(
        f"/api/admin/users/{admin.id}", json={"role": "client"}, headers=await login(client, admin)
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "CANNOT_CHANGE_OWN_ROLE"


@pytest.mark.asyncio
async def test_user_of_other_tenant_is_not_found(client: AsyncClient, seed):
    org = await seed.organization("Org Uno")
    other = await seed.organization("Org Dos")
    admin = await seed.user(org, role=UserRole.admin)
    foreign = await seed.user(other)

    response = await client.patch(
        f"/api/admin/users/{foreign.id}", json={"name": "X"}, headers=await login(client, admin)
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_staff_cannot_manage_users(client: AsyncClient, seed):
    org = await seed.organization()
    staff = await seed.user(org, role=UserRole.staff)

    response = await client.get("/api/admin/users", headers=await login(client, staff))

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_stats_and_reports(client: AsyncClient, seed):
    org = await seed.organization()
    staff = await seed.user(org, role=UserRole.staff)
    owner = await seed.user(org)
    await seed.case(org, owner, staff)
    headers = await login(client, staff)

    stats = await client.get("/api/stats", headers=headers)
    assert stats.status_code == 200
    assert stats.json()["total_cases"] == 1
    assert stats.json()["active_cases"] == 1
    assert stats.json()["total_clients"] == 1

    dashboard = await client.get("/api/analytics/dashboard", headers=headers)
    assert dashboard.status_code == 200
    assert dashboard.json()["cases_by_status"]

    report = await client.get(
        "/api/analytics/reports", params={"type": "performance"}, headers=headers
    )
    assert report.status_code == 200
    assert report.json()["report"][0]["total_cases"] == 1

    missing = await client.get("/api/analytics/reports", headers=headers)
    assert missing.status_code == 400
    assert missing.json()["error"]["code"] == "REPORT_TYPE_REQUIRED"


@pytest.mark.asyncio
async def test_clients_cannot_read_analytics(client: AsyncClient, seed):
    org = await seed.organization()
    client_user = await seed.user(org)

    response = await client.get("/api/stats", headers=await login(client, client_user))

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_demoted_user_loses_access_with_existing_session(client: AsyncClient, seed):
    org = await seed.organization()
    admin = await seed.user(org, role=UserRole.admin)
    staff = await seed.user(org, role=UserRole.staff)
    staff_headers = await login(client, staff)
    admin_headers = await login(client, admin)

    before = await client.get("/api/stats", headers=staff_headers)
    assert before.status_code == 200

    demoted = await client.patch(
        f"/api/admin/users/{staff.id}", json={"role": "client"}, headers=admin_headers
    )
    assert demoted.status_code == 200

    after = await client.get("/api/stats", headers=staff_headers)
    assert after.status_code == 403


@pytest.mark.asyncio
async def test_deactivated_user_is_signed_out_and_cannot_log_in(client: AsyncClient, seed):
    org = await seed.organization()
    admin = await seed.user(org, role=UserRole.admin)
    member = await seed.user(org)
    member_headers = await login(client, member)
    admin_headers = await login(client, admin)

    deactivated = await client.patch(
        f"/api/admin/users/{member.id}", json={"is_active": False}, headers=admin_headers
    )
    assert deactivated.status_code == 200
    assert deactivated.json()["is_active"] is False
    client.cookies.clear()

    me = await client.get("/api/auth/me", headers=member_headers)
    assert me.status_code == 401

    relogin = await client.post(
        "/api/auth/login", json={"email": member.email, "password": PASSWORD}
    )
    assert relogin.status_code == 403
    assert relogin.json()["error"]["code"] == "USER_INACTIVE"


@pytest.mark.asyncio
async def test_admin_cannot_deactivate_self(client: AsyncClient, seed):
    org = await seed.organization()
    admin = await seed.user(org, role=UserRole.admin)

    response = await client.patch(
        f"/api/admin/users/{admin.id}", json={"is_active": False}, headers=await login(client, admin)
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "CANNOT_DEACTIVATE_SELF"
