import pytest
from httpx import AsyncClient

from src.domain.entities import Notification, UserRole
from tests.factories import make_document
from tests.integration.helpers import login


@pytest.mark.asyncio
async def test_client_directory_counts_cases_and_unread(client: AsyncClient, seed):
    org = await seed.organization("Despacho Sol")
    staff = await seed.user(org, role=UserRole.staff)
    rosa = await seed.user(org, name="Rosa Díaz", email="rosa@example.com")
    await seed.user(org, name="Pedro Gil", email="pedro@example.com")
    await seed.case(org, rosa, staff)
    await seed.case(org, rosa, staff, title="Asilo")
    await seed.add(
        Notification(organization_id=org.id, user_id=rosa.id, title="Aviso", message="Nuevo")
    )
    await seed.add(
        Notification(
            organization_id=org.id, user_id=rosa.id, title="Leído", message="Ya", is_read=True
        )
    )
    outsider_org = await seed.organization("Otro")
    await seed.user(outsider_org, name="Rosa Externa", email="rosa.ext@example.com")

    headers = await login(client, staff)
    response = await client.get("/api/clients", params={"search": "ROSA"}, headers=headers)

    assert response.status_code == 200, response.text
    clients = response.json()["clients"]
    assert [c["email"] for c in clients] == ["rosa@example.com"]
    assert clients[0]["case_count"] == 2
    assert clients[0]["unread_notifications"] == 1

    everyone = await client.get("/api/clients", headers=headers)
    assert {c["name"] for c in everyone.json()["clients"]} == {"Rosa Díaz", "Pedro Gil"}


@pytest.mark.asyncio
async def test_staff_registers_a_client(client: AsyncClient, seed):
    org = await seed.organization()
    staff = await seed.user(org, role=UserRole.staff)
    headers = await login(client, staff)

    created = await client.post(
        "/api/clients",
        json={"name": "Lía Mora", "email": "Lia.Mora@example.com", "country_of_origin": "CR"},
        headers=headers,
    )

    assert created.status_code == 201, created.text
    body = created.json()
    assert body["client"]["role"] == "client"
    assert body["client"]["email"] == "lia.mora@example.com"
    assert len(body["temporary_password"]) == 12

    signed_in = await client.post(
        "/api/auth/login",
        json={"email": "lia.mora@example.com", "password": body["temporary_password"]},
    )
    assert signed_in.status_code == 200

    duplicate = await client.post(
        "/api/clients", json={"name": "Otra", "email": "lia.mora@example.com"}, headers=headers
    )
    assert duplicate.status_code == 409

    activity = await client.get("/api/activity", headers=headers)
    assert "client_created" in [a["action"] for a in activity.json()["activities"]]


@pytest.mark.asyncio
async def test_client_detail_lists_cases_with_documents(client: AsyncClient, seed):
    org = await seed.organization()
    staff = await seed.user(org, role=UserRole.staff)
    owner = await seed.user(org, name="Iván")
    case = await seed.case(org, owner, staff)
    await seed.add(make_document(org.id, case.id, name="Acta de nacimiento"))
    headers = await login(client, staff)

    response = await client.get(f"/api/clients/{owner.id}", headers=headers)

    assert response.status_code == 200, response.text
    body = response.json()
    assert body["client"]["name"] == "Iván"
    assert [c["case"]["id"] for c in body["cases"]] == [str(case.id)]
    assert [d["name"] for d in body["cases"][0]["documents"]] == ["Acta de nacimiento"]

    not_a_client = await client.get(f"/api/clients/{staff.id}", headers=headers)
    assert not_a_client.status_code == 404


@pytest.mark.asyncio
async def test_client_directory_is_closed_to_clients_and_other_tenants(
    client: AsyncClient, seed
):
    org = await seed.organization("Org Uno")
    other = await seed.organization("Org Dos")
    owner = await seed.user(org)
    foreign_admin = await seed.user(other, role=UserRole.admin)

    as_client = await client.get("/api/clients", headers=await login(client, owner))
    assert as_client.status_code == 403

    foreign = await client.get(
        f"/api/clients/{owner.id}", headers=await login(client, foreign_admin)
    )
    assert foreign.status_code == 404
    assert foreign.json()["error"]["code"] == "CLIENT_NOT_FOUND"
