from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.app.services.tenant_scope import TenantScope
from src.domain.entities import CaseStage


class ICaseStageRepository(ABC):
    """CaseStage repository interface - every read is tenant scoped"""

    @abstractmethod
    async def list_for_case(self, scope: TenantScope, case_id: UUID) -> List[CaseStage]:
        """Stages of a case ordered by order_index"""
        pass

    @abstractmethod
    async def get(
        self, scope: TenantScope, case_id: UUID, stage_id: UUID
    ) -> Optional[CaseStage]:
        """Get one stage of a case"""
        pass

    @abstractmethod
    async def create(self, stage: CaseStage) -> CaseStage:
        pass

    @abstractmethod
    async def update(self, stage: CaseStage) -> CaseStage:
        pass
