from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.app.services.tenant_scope import TenantScope
from src.domain.entities import Reminder


class IReminderRepository(ABC):
    """Reminder repository interface"""

    @abstractmethod
    async def list_for_case(self, scope: TenantScope, case_id: UUID) -> List[Reminder]:
        """Reminders of a case (tenant scoped)"""
        pass

    @abstractmethod
    async def get_due(
        self, now: datetime, limit: int, organization_id: Optional[UUID] = None
    ) -> List[Reminder]:
        """
        Scheduled reminders with send_at <= now, oldest due first.

        Scheduler path: spans organizations unless organization_id is given.
        """
        pass

    @abstractmethod
    async def create(self, reminder: Reminder) -> Reminder:
        pass

    @abstractmethod
    async def update(self, reminder: Reminder) -> Reminder:
        pass

    @abstractmethod
    async def get_for_key_date(
        self, organization_id: UUID, key_date_id: UUID
    ) -> Optional[Reminder]:
        pass

    @abstractmethod
    async def delete_for_key_date(self, organization_id: UUID, key_date_id: UUID) -> int:
        """Returns count deleted"""
        pass
