import pytest
import pytest_asyncio
from httpx import AsyncClient

from config import ApplicationConfig
from src.adapter.repositories.activity_log_repository import ActivityLogRepository
from src.domain.entities import UserRole
from tests.integration.helpers import login

PDF = b"%PDF-1.4\n%test\n"


@pytest_asyncio.fixture
async def firm(seed):
    org = await seed.organization()
    staff = await seed.user(org, role=UserRole.staff, name="Sofía Staff")
    client_user = await seed.user(org, role=UserRole.client, name="Pedro Cliente")
    case = await seed.case(org, client_user, staff)
    return {"org": org, "staff": staff, "client": client_user, "case": case}


async def _upload(client, headers, case_id, name="Pasaporte", content=PDF, content_type="application/pdf", **form):
    return await client.post(
        "/api/documents",
        data={"case_id": str(case_id), "name": name, **form},
        files={"file": (f"{name}.pdf", content, content_type)},
        headers=headers,
    )


@pytest.mark.asyncio
async def test_client_upload_then_staff_review_and_ai(client: AsyncClient, firm, storage, review_service):
    """Client uploads, staff gets notified, approves, and asks the AI agent"""
    client_headers = await login(client, firm["client"])
    staff_headers = await login(client, firm["staff"])

    uploaded = await _upload(client, client_headers, firm["case"].id)
    assert uploaded.status_code == 201, uploaded.text
    document = uploaded.json()
    assert document["status"] == "submitted"
    assert document["storage_path"] in storage.objects

    staff_inbox = (await client.get("/api/notifications", headers=staff_headers)).json()
    assert staff_inbox["unread_count"] == 1
    assert "Pedro Cliente" in staff_inbox["notifications"][0]["message"]

    listed = await client.get(
        "/api/documents", params={"case_id": str(firm["case"].id)}, headers=client_headers
    )
    assert listed.json()["documents"][0]["file_url"].endswith("?signed=1")

    reviewed = await client.patch(
        f"/api/documents/{document['id']}", json={"status": "approved"}, headers=staff_headers
    )
    assert reviewed.status_code == 200
    client_inbox = (await client.get("/api/notifications", headers=client_headers)).json()
    assert [n["title"] for n in client_inbox["notifications"]] == ["Estado de documento actualizado"]

    ai = await client.post(
        "/api/ai/document-review",
        json={"prompt": "¿Está vigente?", "document_id": document["id"]},
        headers=staff_headers,
    )
    assert ai.status_code == 200, ai.text
    assert ai.json()["result"] == "Revisado: Pasaporte.pdf"
    assert review_service.payloads[0]["case_id"] == str(firm["case"].id)

    activity = await client.get("/api/activity", headers=staff_headers)
    actions = {a["action"] for a in activity.json()["activities"]}
    assert {"document_uploaded", "document_status_updated"} <= actions


@pytest.mark.asyncio
async def test_upload_rejections(client: AsyncClient, firm):
    headers = await login(client, firm["client"])

    too_large = await _upload(
        client, headers, firm["case"].id, content=b"x" * (ApplicationConfig.MAX_UPLOAD_BYTES + 1)
    )
    assert too_large.status_code == 413

    wrong_type = await _upload(client, headers, firm["case"].id, content_type="text/html")
    assert wrong_type.status_code == 415


@pytest.mark.asyncio
async def test_client_cannot_upload_to_foreign_case(client: AsyncClient, seed, firm):
    stranger = await seed.user(firm["org"], name="Extraño")

    response = await _upload(client, await login(client, stranger), firm["case"].id)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_client_cannot_review_documents(client: AsyncClient, firm):
    headers = await login(client, firm["client"])
    document = (await _upload(client, headers, firm["case"].id)).json()

    response = await client.patch(
        f"/api/documents/{document['id']}", json={"status": "approved"}, headers=headers
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_messages_between_client_and_staff(client: AsyncClient, firm):
    client_headers = await login(client, firm["client"])
    staff_headers = await login(client, firm["staff"])

    sent = await client.post(
        "/api/messages",
        json={
            "case_id": str(firm["case"].id),
            "receiver_id": str(firm["staff"].id),
            "content": "¿Cuándo es mi cita?",
        },
        headers=client_headers,
    )
    assert sent.status_code == 201, sent.text
    message_id = sent.json()["id"]

    # Only the receiver may mark it read
    by_sender = await client.patch(f"/api/messages/{message_id}", headers=client_headers)
    assert by_sender.status_code == 404

    by_receiver = await client.patch(f"/api/messages/{message_id}", headers=staff_headers)
    assert by_receiver.status_code == 200
    assert by_receiver.json()["status"] == "read"

    staff_messages = await client.get(
        "/api/messages", params={"case_id": str(firm["case"].id)}, headers=staff_headers
    )
    assert [m["id"] for m in staff_messages.json()["messages"]] == [message_id]


@pytest.mark.asyncio
async def test_notifications_mark_read(client: AsyncClient, firm):
    staff_headers = await login(client, firm["staff"])
    client_headers = await login(client, firm["client"])

    created = await client.post(
        "/api/notifications",
        json={"user_id": str(firm["client"].id), "title": "Aviso", "message": "Revisa tu caso"},
        headers=staff_headers,
    )
    assert created.status_code == 201, created.text

    marked = await client.post(
        f"/api/notifications/{created.json()['id']}/read", headers=client_headers
    )
    assert marked.status_code == 200

    inbox = (await client.get("/api/notifications", headers=client_headers)).json()
    assert inbox["unread_count"] == 0

    read_all = await client.post("/api/notifications/read-all", headers=client_headers)
    assert read_all.json()["updated"] == 0


@pytest.mark.asyncio
async def test_review_survives_activity_log_failure(client: AsyncClient, firm, monkeypatch):
    """A failing activity insert is dropped; the status change still goes through"""
    client_headers = await login(client, firm["client"])
    staff_headers = await login(client, firm["staff"])
    document = (await _upload(client, client_headers, firm["case"].id)).json()

    async def broken_create(self, activity):
        raise RuntimeError("activity table unavailable")

    monkeypatch.setattr(ActivityLogRepository, "create", broken_create)

    reviewed = await client.patch(
        f"/api/documents/{document['id']}", json={"status": "approved"}, headers=staff_headers
    )

    assert reviewed.status_code == 200, reviewed.text
    assert reviewed.json()["status"] == "approved"
    client_inbox = (await client.get("/api/notifications", headers=client_headers)).json()
    assert [n["title"] for n in client_inbox["notifications"]] == ["Estado de documento actualizado"]
