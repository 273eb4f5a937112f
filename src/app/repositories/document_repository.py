from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.app.services.tenant_scope import TenantScope
from src.domain.entities import Document, DocumentStatus


class IDocumentRepository(ABC):
    """Document repository interface - every read is tenant scoped"""

    @abstractmethod
    async def list(
        self,
        scope: TenantScope,
        case_id: Optional[UUID] = None,
        status: Optional[DocumentStatus] = None,
    ) -> List[Document]:
        """Documents visible to the scope, newest first"""
        pass

    @abstractmethod
    async def get(self, scope: TenantScope, document_id: UUID) -> Optional[Document]:
        """Get a document visible to the scope"""
        pass

    @abstractmethod
    async def count_uploaded_since(self, scope: TenantScope, since: datetime) -> int:
        """Uploads made by the scope's user since a moment"""
        pass

    @abstractmethod
    async def create(self, document: Document) -> Document:
        pass

    @abstractmethod
    async def update(self, document: Document) -> Document:
        pass

    @abstractmethod
    async def delete(self, document: Document) -> None:
        pass

    @abstractmethod
    async def find_created_before(
        self, organization_id: UUID, cutoff: datetime, limit: int
    ) -> List[Document]:
        """Documents of an organization with created_at < cutoff (sweeper path)"""
        pass

    @abstractmethod
    async def delete_by_ids(self, organization_id: UUID, ids: List[UUID]) -> int:
        """Bulk delete within an organization. Returns count deleted."""
        pass
