from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.app.services.tenant_scope import TenantScope
from src.domain.entities import Notification


class INotificationRepository(ABC):
    """Notification repository interface - reads are per recipient"""

    @abstractmethod
    async def list_for_recipient(
        self, scope: TenantScope, unread_only: bool = False, limit: int = 50
    ) -> List[Notification]:
        """Notifications addressed to the scope's user, newest first"""
        pass

    @abstractmethod
    async def get_for_recipient(
        self, scope: TenantScope, notification_id: UUID
    ) -> Optional[Notification]:
        pass

    @abstractmethod
    async def mark_all_read(self, scope: TenantScope) -> int:
        """Flip every unread notification of the scope's user. Returns count."""
        pass

    @abstractmethod
    async def create(self, notification: Notification) -> Notification:
        pass

    @abstractmethod
    async def update(self, notification: Notification) -> Notification:
        pass

    @abstractmethod
    async def find_created_before(
        self, organization_id: UUID, cutoff: datetime, limit: int
    ) -> List[Notification]:
        """Notifications of an organization with created_at < cutoff (sweeper path)"""
        pass

    @abstractmethod
    async def delete_by_ids(self, organization_id: UUID, ids: List[UUID]) -> int:
        pass
