"""Fakes for outbound services and database seeding for API tests"""

from typing import Any, Dict, List, Optional
from uuid import UUID

from httpx import AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.services.document_review_service import IDocumentReviewService
from src.app.services.email_service import EmailRecipient, IEmailService
from src.app.services.storage_service import IStorageService, StoredObject
from src.domain.entities import SuperAdmin, UserRole
from tests.factories import hash_password, make_case, make_organization, make_user

PASSWORD = "Secreto#2025"


class InMemoryStorage(IStorageService):
    def __init__(self):
        self.objects: Dict[str, bytes] = {}

    async def upload_case_document(
        self,
        organization_id: UUID,
        case_id: UUID,
        file_name: str,
        content: bytes,
        content_type: str,
        uploader_id: Optional[UUID] = None,
    ) -> StoredObject:
        path = f"{organization_id}/{case_id}/{file_name}"
        self.objects[path] = content
        return StoredObject(path=path, signed_url=f"https://storage.test/{path}")

    async def delete(self, path: str) -> None:
        self.objects.pop(path, None)

    async def download(self, path: str) -> bytes:
        return self.objects[path]

    async def signed_url(self, path: str) -> Optional[str]:
        return f"https://storage.test/{path}?signed=1"


class RecordingEmailService(IEmailService):
    def __init__(self):
        self.sent: List[Dict[str, Any]] = []

    @property
    def is_configured(self) -> bool:
        return True

    async def send(self, to: List[EmailRecipient], subject: str, text, html: str):
        self.sent.append({"to": [r.email for r in to], "subject": subject})
        return f"msg_{len(self.sent)}"


class StubReviewService(IDocumentReviewService):
    def __init__(self):
        self.payloads: List[Dict[str, Any]] = []

    @property
    def is_configured(self) -> bool:
        return True

    async def review(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        self.payloads.append(payload)
        return {"result": f"Revisado: {payload['file_name']}"}


class Seeder:
    """Writes fixtures straight to the test database"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def add(self, entity):
        self.session.add(entity)
        await self.session.commit()
        # Detached copies are not expired by rollbacks inside requests
        self.session.expunge(entity)
        return entity

    async def update(self, model, entity_id, **values):
        """Change a stored row through the session so loaded instances see it"""
        stored = await self.session.get(model, entity_id)
        for key, value in values.items():
            setattr(stored, key, value)
        await self.session.commit()
        return stored

    async def organization(self, name="Acme Legal", **overrides):
        return await self.add(make_organization(name, **overrides))

    async def user(self, organization, role=UserRole.client, name="Ana Pérez", **overrides):
        return await self.add(
            make_user(organization.id, role=role, name=name, password=PASSWORD, **overrides)
        )

    async def case(self, organization, client_user, staff_user=None, **overrides):
        staff_id = staff_user.id if staff_user else None
        return await self.add(make_case(organization.id, client_user.id, staff_id, **overrides))

    async def superadmin(self, email="root@example.com", **overrides):
        return await self.add(
            SuperAdmin(email=email, password_hash=hash_password(PASSWORD), **overrides)
        )


async def login(client: AsyncClient, user) -> Dict[str, str]:
    """Authorization header of a fresh session for ``user``"""
    response = await client.post(
        "/api/auth/login", json={"email": user.email, "password": PASSWORD}
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
