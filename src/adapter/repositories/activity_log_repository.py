from typing import List, Optional
from uuid import UUID

from src.app.repositories.activity_log_repository import IActivityLogRepository
from src.app.services.tenant_scope import TenantScope
from src.domain.entities import ActivityLog
from .scoping import TenantScopedRepository, owned_case_ids


class ActivityLogRepository(TenantScopedRepository, IActivityLogRepository):
    """ActivityLog repository implementation using SQLModel"""

    model = ActivityLog

    def owner_clause(self, scope: TenantScope):
        return ActivityLog.case_id.in_(owned_case_ids(scope))

    async def create(self, activity: ActivityLog) -> ActivityLog:
        """Append activity row (immutable)"""
        self.session.add(activity)
        await self.session.flush()
        return activity

    async def list(
        self, scope: TenantScope, case_id: Optional[UUID] = None, limit: int = 20
    ) -> List[ActivityLog]:
        stmt = self._select(scope)
        if case_id is not None:
            stmt = stmt.where(ActivityLog.case_id == case_id)
        stmt = stmt.order_by(ActivityLog.created_at.desc()).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())
