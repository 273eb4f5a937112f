from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.app.services.tenant_scope import TenantScope
from src.domain.entities import Message


class IMessageRepository(ABC):
    """Message repository interface - every read is tenant scoped"""

    @abstractmethod
    async def list(
        self,
        scope: TenantScope,
        case_id: Optional[UUID] = None,
        own_conversations_only: bool = False,
    ) -> List[Message]:
        """
        Messages visible to the scope, newest first.

        Clients always only see messages they sent or received; other roles
        are narrowed the same way when own_conversations_only is set.
        """
        pass

    @abstractmethod
    async def get_received(self, scope: TenantScope, message_id: UUID) -> Optional[Message]:
        """Get a message whose receiver is the scope's user"""
        pass

    @abstractmethod
    async def create(self, message: Message) -> Message:
        pass

    @abstractmethod
    async def update(self, message: Message) -> Message:
        pass

    @abstractmethod
    async def find_created_before(
        self, organization_id: UUID, cutoff: datetime, limit: int
    ) -> List[Message]:
        """Messages of an organization with created_at < cutoff (sweeper path)"""
        pass

    @abstractmethod
    async def delete_by_ids(self, organization_id: UUID, ids: List[UUID]) -> int:
        pass
