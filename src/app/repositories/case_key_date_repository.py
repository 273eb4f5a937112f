from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.app.services.tenant_scope import TenantScope
from src.domain.entities import CaseKeyDate


class ICaseKeyDateRepository(ABC):
    """CaseKeyDate repository interface - every read is tenant scoped"""

    @abstractmethod
    async def list_for_case(self, scope: TenantScope, case_id: UUID) -> List[CaseKeyDate]:
        """Key dates of a case, soonest first"""
        pass

    @abstractmethod
    async def create(self, key_date: CaseKeyDate) -> CaseKeyDate:
        pass

    @abstractmethod
    async def get_for_scheduler(
        self, organization_id: UUID, key_date_id: UUID
    ) -> Optional[CaseKeyDate]:
        """Unscoped lookup inside one organization (cron path only)"""
        pass

    @abstractmethod
    async def get(
        self, scope: TenantScope, case_id: UUID, key_date_id: UUID
    ) -> Optional[CaseKeyDate]:
        pass

    @abstractmethod
    async def update(self, key_date: CaseKeyDate) -> CaseKeyDate:
        pass

    @abstractmethod
    async def delete(self, key_date: CaseKeyDate) -> None:
        pass
