from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select

from src.app.repositories.document_repository import IDocumentRepository
from src.app.services.tenant_scope import TenantScope
from src.domain.entities import Document, DocumentStatus
from .scoping import TenantScopedRepository, owned_case_ids


class DocumentRepository(TenantScopedRepository, IDocumentRepository):
    """Document repository implementation using SQLModel"""

    model = Document

    def owner_clause(self, scope: TenantScope):
        return Document.case_id.in_(owned_case_ids(scope))

    async def list(
        self,
        scope: TenantScope,
        case_id: Optional[UUID] = None,
        status: Optional[DocumentStatus] = None,
    ) -> List[Document]:
        stmt = self._select(scope)
        if case_id is not None:
            stmt = stmt.where(Document.case_id == case_id)
        if status is not None:
            stmt = stmt.where(Document.status == status)
        stmt = stmt.order_by(Document.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get(self, scope: TenantScope, document_id: UUID) -> Optional[Document]:
        stmt = self._select(scope).where(Document.id == document_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def count_uploaded_since(self, scope: TenantScope, since: datetime) -> int:
        stmt = select(func.count(Document.id)).where(
            Document.organization_id == scope.organization_id,
            Document.uploaded_by == scope.user_id,
            Document.created_at >= since,
        )
        result = await self.session.exec(stmt)
        return int(result.one() or 0)

    async def create(self, document: Document) -> Document:
        return await self._save(document)

    async def update(self, document: Document) -> Document:
        return await self._save(document)

    async def delete(self, document: Document) -> None:
        await self.session.delete(document)
        await self.session.flush()

    async def find_created_before(
        self, organization_id: UUID, cutoff: datetime, limit: int
    ) -> List[Document]:
        return await self._created_before(organization_id, cutoff, limit)

    async def delete_by_ids(self, organization_id: UUID, ids: List[UUID]) -> int:
        return await self._delete_by_ids(organization_id, ids)
