"""
Tenant scoping for SQLModel queries.

Every tenant-scoped repository builds its statements through
``TenantScopedRepository._select`` so the organization predicate (and, for
clients, the ownership predicate) cannot be left out by a call site.
"""

from typing import Any, ClassVar, List, Type
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.services.tenant_scope import TenantScope
from src.domain.entities import Case


def owned_case_ids(scope: TenantScope):
    """Subquery of case ids whose client is the scope's user"""
    return select(Case.id).where(
        Case.organization_id == scope.organization_id,
        Case.client_id == scope.user_id,
    )


class TenantScopedRepository:
    """Base class for repositories of tenant-scoped entities"""

    model: ClassVar[Type[SQLModel]]

    def __init__(self, session: AsyncSession):
        self.session = session

    def owner_clause(self, scope: TenantScope) -> Any:
        """Ownership predicate applied when the scope is a client"""
        raise NotImplementedError

    def _select(self, scope: TenantScope):
        stmt = select(self.model).where(
            self.model.organization_id == scope.organization_id
        )
        if scope.restricted_to_owner:
            stmt = stmt.where(self.owner_clause(scope))
        return stmt

    async def _save(self, entity):
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def _created_before(self, organization_id: UUID, cutoff, limit: int) -> List:
        stmt = (
            select(self.model)
            .where(
                self.model.organization_id == organization_id,
                self.model.created_at < cutoff,
            )
            .order_by(self.model.created_at.asc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def _delete_by_ids(self, organization_id: UUID, ids: List[UUID]) -> int:
        if not ids:
            return 0
        stmt = delete(self.model).where(
            self.model.organization_id == organization_id,
            self.model.id.in_(ids),
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
