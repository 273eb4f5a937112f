from typing import List, Optional
from uuid import UUID

from sqlmodel import select

from src.app.repositories.case_key_date_repository import ICaseKeyDateRepository
from src.app.services.tenant_scope import TenantScope
from src.domain.entities import CaseKeyDate
from .scoping import TenantScopedRepository, owned_case_ids


class CaseKeyDateRepository(TenantScopedRepository, ICaseKeyDateRepository):
    """CaseKeyDate repository implementation using SQLModel"""

    model = CaseKeyDate

    def owner_clause(self, scope: TenantScope):
        return CaseKeyDate.case_id.in_(owned_case_ids(scope))

    async def list_for_case(self, scope: TenantScope, case_id: UUID) -> List[CaseKeyDate]:
        stmt = (
            self._select(scope)
            .where(CaseKeyDate.case_id == case_id)
            .order_by(CaseKeyDate.occurs_at.asc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, key_date: CaseKeyDate) -> CaseKeyDate:
        return await self._save(key_date)

    async def get_for_scheduler(
        self, organization_id: UUID, key_date_id: UUID
    ) -> Optional[CaseKeyDate]:
        stmt = select(CaseKeyDate).where(
            CaseKeyDate.organization_id == organization_id, CaseKeyDate.id == key_date_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get(
        self, scope: TenantScope, case_id: UUID, key_date_id: UUID
    ) -> Optional[CaseKeyDate]:
        stmt = self._select(scope).where(
            CaseKeyDate.case_id == case_id, CaseKeyDate.id == key_date_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update(self, key_date: CaseKeyDate) -> CaseKeyDate:
        return await self._save(key_date)

    async def delete(self, key_date: CaseKeyDate) -> None:
        await self.session.delete(key_date)
        await self.session.flush()
