import pytest
from httpx import AsyncClient

from src.app.use_cases.superadmin.branding import PALETTE_PRESETS
from src.domain.entities import UserRole
from tests.integration.helpers import login


@pytest.mark.asyncio
async def test_every_member_reads_organization_settings(client: AsyncClient, seed):
    org = await seed.organization(
        "Despacho Norte",
        support_email="ayuda@example.com",
        org_metadata={"branding": {"logo_url": "https://cdn.example.com/norte.png"}},
    )
    owner = await seed.user(org)

    response = await client.get("/api/settings/organization", headers=await login(client, owner))

    assert response.status_code == 200, response.text
    body = response.json()
    assert body["name"] == "Despacho Norte"
    assert body["support_email"] == "ayuda@example.com"
    assert body["branding"]["logo_url"] == "https://cdn.example.com/norte.png"


@pytest.mark.asyncio
async def test_admin_updates_name_slug_and_branding(client: AsyncClient, seed):
    org = await seed.organization("Despacho Norte", org_metadata={"is_demo": False})
    admin = await seed.user(org, role=UserRole.admin)
    headers = await login(client, admin)

    response = await client.patch(
        "/api/settings/organization",
        json={
            "name": "Despacho Norte y Asociados",
            "slug": "Norte Asociados",
            "logo_url": "https://cdn.example.com/logo.png",
            "preset": "plum",
        },
        headers=headers,
    )

    assert response.status_code == 200, response.text
    body = response.json()
    assert body["slug"] == "norte-asociados"
    assert body["logo_url"] == "https://cdn.example.com/logo.png"
    assert body["branding"]["logo_url"] == "https://cdn.example.com/logo.png"
    assert body["branding"]["palette"] == PALETTE_PRESETS["plum"]["palette"]

    reread = await client.get("/api/settings/organization", headers=headers)
    assert reread.json()["name"] == "Despacho Norte y Asociados"
    assert reread.json()["branding"]["darkPalette"] == PALETTE_PRESETS["plum"]["dark"]

    activity = await client.get("/api/activity", headers=headers)
    assert "branding_updated" in [a["action"] for a in activity.json()["activities"]]


@pytest.mark.asyncio
async def test_slug_rules(client: AsyncClient, seed):
    org = await seed.organization("Despacho Norte")
    await seed.organization("Despacho Sur", slug="despacho-sur")
    admin = await seed.user(org, role=UserRole.admin)
    headers = await login(client, admin)

    reserved = await client.patch(
        "/api/settings/organization", json={"slug": "Admin"}, headers=headers
    )
    assert reserved.status_code == 400
    assert reserved.json()["error"]["code"] == "INVALID_SLUG"

    taken = await client.patch(
        "/api/settings/organization", json={"slug": "despacho-sur"}, headers=headers
    )
    assert taken.status_code == 409
    assert taken.json()["error"]["code"] == "SLUG_ALREADY_EXISTS"

    empty = await client.patch("/api/settings/organization", json={}, headers=headers)
    assert empty.status_code == 400
    assert empty.json()["error"]["code"] == "NO_FIELDS"


@pytest.mark.asyncio
async def test_only_admins_change_settings(client: AsyncClient, seed):
    org = await seed.organization("Despacho Norte")
    staff = await seed.user(org, role=UserRole.staff)

    response = await client.patch(
        "/api/settings/organization",
        json={"name": "Tomado"},
        headers=await login(client, staff),
    )

    assert response.status_code == 403
    unchanged = await client.get(
        "/api/settings/organization", headers=await login(client, staff)
    )
    assert unchanged.json()["name"] == "Despacho Norte"
