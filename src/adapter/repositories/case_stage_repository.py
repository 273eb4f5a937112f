from typing import List, Optional
from uuid import UUID

from src.app.repositories.case_stage_repository import ICaseStageRepository
from src.app.services.tenant_scope import TenantScope
from src.domain.entities import CaseStage
from .scoping import TenantScopedRepository, owned_case_ids


class CaseStageRepository(TenantScopedRepository, ICaseStageRepository):
    """CaseStage repository implementation using SQLModel"""

    model = CaseStage

    def owner_clause(self, scope: TenantScope):
        return CaseStage.case_id.in_(owned_case_ids(scope))

    async def list_for_case(self, scope: TenantScope, case_id: UUID) -> List[CaseStage]:
        stmt = (
            self._select(scope)
            .where(CaseStage.case_id == case_id)
            .order_by(CaseStage.order_index.asc(), CaseStage.created_at.asc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get(
        self, scope: TenantScope, case_id: UUID, stage_id: UUID
    ) -> Optional[CaseStage]:
        stmt = self._select(scope).where(
            CaseStage.id == stage_id, CaseStage.case_id == case_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, stage: CaseStage) -> CaseStage:
        return await self._save(stage)

    async def update(self, stage: CaseStage) -> CaseStage:
        return await self._save(stage)
