from datetime import datetime

import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.adapter.repositories.case_repository import CaseRepository
from src.domain.entities import ActivityLog, Document, DocumentStatus, UserRole
from tests.factories import make_document
from tests.integration.helpers import login


@pytest.mark.asyncio
async def test_list_cases_requires_session(client: AsyncClient):
    response = await client.get("/api/cases")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_clients_only_see_their_own_cases(client: AsyncClient, seed):
    """
    Admin A of org-1 opens a case for client C; C sees exactly that case,
    while client C2 of another organization sees nothing.
    """
    org_1 = await seed.organization("Org Uno")
    org_2 = await seed.organization("Org Dos")
    admin = await seed.user(org_1, role=UserRole.admin, name="A")
    client_c = await seed.user(org_1, name="C")
    client_c2 = await seed.user(org_2, name="C2")

    admin_headers = await login(client, admin)
    created = await client.post(
        "/api/cases",
        json={"client_id": str(client_c.id), "case_type": "family", "title": "CS-1"},
        headers=admin_headers,
    )
    assert created.status_code == 201, created.text
    case_id = created.json()["id"]

    c_cases = await client.get("/api/cases", headers=await login(client, client_c))
    assert [c["id"] for c in c_cases.json()["cases"]] == [case_id]

    c2_cases = await client.get("/api/cases", headers=await login(client, client_c2))
    assert c2_cases.json()["cases"] == []


@pytest.mark.asyncio
async def test_case_of_another_tenant_is_not_found(client: AsyncClient, seed):
    org_1 = await seed.organization("Org Uno")
    org_2 = await seed.organization("Org Dos")
    owner = await seed.user(org_1)
    case = await seed.case(org_1, owner)
    outsider = await seed.user(org_2, role=UserRole.admin)

    response = await client.get(f"/api/cases/{case.id}", headers=await login(client, outsider))

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "CASE_NOT_FOUND"


@pytest.mark.asyncio
async def test_case_of_another_client_is_not_found(client: AsyncClient, seed):
    org = await seed.organization()
    owner = await seed.user(org, name="Dueña")
    other_client = await seed.user(org, name="Otro")
    case = await seed.case(org, owner)

    response = await client.get(f"/api/cases/{case.id}", headers=await login(client, other_client))

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_clients_cannot_create_cases(client: AsyncClient, seed):
    org = await seed.organization()
    client_user = await seed.user(org)

    response = await client.post(
        "/api/cases",
        json={"client_id": str(client_user.id), "title": "Mi caso"},
        headers=await login(client, client_user),
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FORBIDDEN"


@pytest.mark.asyncio
async def test_update_case_status(client: AsyncClient, seed):
    org = await seed.organization()
    staff = await seed.user(org, role=UserRole.staff)
    owner = await seed.user(org)
    case = await seed.case(org, owner, staff)
    headers = await login(client, staff)

    response = await client.patch(
        f"/api/cases/{case.id}", json={"status": "completed"}, headers=headers
    )

    assert response.status_code == 200
    assert response.json()["status"] == "completed"
    assert response.json()["completion_date"] is not None

    invalid = await client.patch(f"/api/cases/{case.id}", json={"status": "lost"}, headers=headers)
    assert invalid.status_code == 400
    assert invalid.json()["error"]["code"] == "INVALID_STATUS"


@pytest.mark.asyncio
async def test_stages_and_key_dates(client: AsyncClient, seed):
    org = await seed.organization()
    admin = await seed.user(org, role=UserRole.admin)
    owner = await seed.user(org)
    case = await seed.case(org, owner, admin)
    headers = await login(client, admin)

    stage = await client.post(
        f"/api/cases/{case.id}/stages", json={"title": "Biométricos"}, headers=headers
    )
    assert stage.status_code == 201, stage.text

    updated = await client.patch(
        f"/api/cases/{case.id}/stages/{stage.json()['id']}",
        json={"status": "completed"},
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()["completed"] is True

    key_date = await client.post(
        f"/api/cases/{case.id}/key-dates",
        json={
            "title": "Entrevista",
            "occurs_at": "2030-01-15T15:00:00Z",
            "notify_by_email": True,
            "notify_emails": [{"email": "ana@example.com"}],
            "remind_minutes_before": 60,
        },
        headers=headers,
    )
    assert key_date.status_code == 201, key_date.text
    assert key_date.json()["reminder"]["status"] == "scheduled"

    listed = await client.get(f"/api/cases/{case.id}/key-dates", headers=headers)
    assert [k["title"] for k in listed.json()["key_dates"]] == ["Entrevista"]


@pytest.mark.asyncio
async def test_rejected_session_leaves_data_untouched(client: AsyncClient, seed, db_session):
    """Writes without a valid session fail with 401 before anything is stored"""
    org = await seed.organization()
    admin = await seed.user(org, role=UserRole.admin)
    owner = await seed.user(org)
    case = await seed.case(org, owner, admin)
    document = await seed.add(make_document(org.id, case.id))

    created = await client.post(
        "/api/cases",
        json={"client_id": str(owner.id), "case_type": "family", "title": "Intruso"},
    )
    forged = await client.patch(
        f"/api/documents/{document.id}",
        json={"status": "approved"},
        headers={"Authorization": "Bearer not-a-token"},
    )

    assert created.status_code == 401
    assert forged.status_code == 401

    listed = await client.get("/api/cases", headers=await login(client, admin))
    assert [c["id"] for c in listed.json()["cases"]] == [str(case.id)]
    stored = await db_session.get(Document, document.id)
    assert stored.status == DocumentStatus.submitted
    activity = await db_session.exec(
        select(ActivityLog).where(ActivityLog.organization_id == org.id)
    )
    assert activity.all() == []


@pytest.mark.asyncio
async def test_case_number_taken_at_insert_is_replaced(client: AsyncClient, seed, monkeypatch):
    """The unique index, not only the pre-check, guards case numbers"""
    org = await seed.organization()
    admin = await seed.user(org, role=UserRole.admin)
    owner = await seed.user(org)
    year = datetime.utcnow().year
    await seed.case(org, owner, admin, case_number=f"FAM-{year}-0007")

    async def never_taken(self, organization_id, case_number):
        return False

    numbers = iter([7, 8])
    monkeypatch.setattr(CaseRepository, "case_number_exists", never_taken)
    monkeypatch.setattr(
        "src.app.use_cases.cases.create_case_use_case.random.randint",
        lambda a, b: next(numbers),
    )

    response = await client.post(
        "/api/cases",
        json={"client_id": str(owner.id), "case_type": "family", "title": "Segundo"},
        headers=await login(client, admin),
    )

    assert response.status_code == 201, response.text
    assert response.json()["case_number"] == f"FAM-{year}-0008"
