from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.app.services.tenant_scope import TenantScope
from src.domain.entities import ActivityLog


class IActivityLogRepository(ABC):
    """ActivityLog repository interface - append only"""

    @abstractmethod
    async def create(self, activity: ActivityLog) -> ActivityLog:
        """Append a new activity row (immutable)"""
        pass

    @abstractmethod
    async def list(
        self, scope: TenantScope, case_id: Optional[UUID] = None, limit: int = 20
    ) -> List[ActivityLog]:
        """
        Activity visible to the scope, newest first.

        Clients only see activity attached to their own cases.
        """
        pass
