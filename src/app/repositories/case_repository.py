from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.app.services.tenant_scope import TenantScope
from src.domain.entities import Case, CaseStatus


class CaseNumberConflict(Exception):
    """Raised by create when the organization already uses the case number"""


class ICaseRepository(ABC):
    """Case repository interface - every read is tenant scoped"""

    @abstractmethod
    async def list(
        self,
        scope: TenantScope,
        status: Optional[CaseStatus] = None,
        client_id: Optional[UUID] = None,
    ) -> List[Case]:
        """Cases visible to the scope, newest first"""
        pass

    @abstractmethod
    async def get(self, scope: TenantScope, case_id: UUID) -> Optional[Case]:
        """Get a case visible to the scope"""
        pass

    @abstractmethod
    async def case_number_exists(self, organization_id: UUID, case_number: str) -> bool:
        """Check whether a case number is already taken in an organization"""
        pass

    @abstractmethod
    async def create(self, case: Case) -> Case:
        """Create a new case; raises CaseNumberConflict on a duplicate number"""
        pass

    @abstractmethod
    async def update(self, case: Case) -> Case:
        """Update existing case"""
        pass

    @abstractmethod
    async def get_for_scheduler(self, organization_id: UUID, case_id: UUID) -> Optional[Case]:
        """Unscoped lookup inside one organization (cron path only)"""
        pass
