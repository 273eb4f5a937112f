from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.case_repository import CaseNumberConflict, ICaseRepository
from src.app.services.tenant_scope import TenantScope
from src.domain.entities import Case, CaseStatus
from .scoping import TenantScopedRepository


class CaseRepository(TenantScopedRepository, ICaseRepository):
    """Case repository implementation using SQLModel"""

    model = Case

    def __init__(self, session: AsyncSession):
        super().__init__(session)

    def owner_clause(self, scope: TenantScope):
        return Case.client_id == scope.user_id

    async def list(
        self,
        scope: TenantScope,
        status: Optional[CaseStatus] = None,
        client_id: Optional[UUID] = None,
    ) -> List[Case]:
        stmt = self._select(scope)
        if status is not None:
            stmt = stmt.where(Case.status == status)
        if client_id is not None:
            stmt = stmt.where(Case.client_id == client_id)
        stmt = stmt.order_by(Case.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get(self, scope: TenantScope, case_id: UUID) -> Optional[Case]:
        stmt = self._select(scope).where(Case.id == case_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def case_number_exists(self, organization_id: UUID, case_number: str) -> bool:
        stmt = select(Case.id).where(
            Case.organization_id == organization_id, Case.case_number == case_number
        )
        result = await self.session.exec(stmt)
        return result.first() is not None

    async def create(self, case: Case) -> Case:
        try:
            # The savepoint keeps the outer transaction usable after a conflict
            async with self.session.begin_nested():
                self.session.add(case)
                await self.session.flush()
        except IntegrityError as exc:
            if "case_number" in str(exc.orig) or "idx_case_org_number" in str(exc.orig):
                raise CaseNumberConflict(case.case_number) from exc
            raise
        await self.session.refresh(case)
        return case

    async def update(self, case: Case) -> Case:
        return await self._save(case)

    async def get_for_scheduler(self, organization_id: UUID, case_id: UUID) -> Optional[Case]:
        stmt = select(Case).where(Case.organization_id == organization_id, Case.id == case_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()
