from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import update

from src.app.repositories.notification_repository import INotificationRepository
from src.app.services.tenant_scope import TenantScope
from src.domain.entities import Notification
from .scoping import TenantScopedRepository


class NotificationRepository(TenantScopedRepository, INotificationRepository):
    """Notification repository implementation using SQLModel"""

    model = Notification

    def owner_clause(self, scope: TenantScope):
        return Notification.user_id == scope.user_id

    def _select_for_recipient(self, scope: TenantScope):
        # Notifications are personal for every role, not only clients
        return self._select(scope).where(self.owner_clause(scope))

    async def list_for_recipient(
        self, scope: TenantScope, unread_only: bool = False, limit: int = 50
    ) -> List[Notification]:
        stmt = self._select_for_recipient(scope)
        if unread_only:
            stmt = stmt.where(Notification.is_read == False)  # noqa: E712
        stmt = stmt.order_by(Notification.created_at.desc()).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_for_recipient(
        self, scope: TenantScope, notification_id: UUID
    ) -> Optional[Notification]:
        stmt = self._select_for_recipient(scope).where(Notification.id == notification_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def mark_all_read(self, scope: TenantScope) -> int:
        stmt = (
            update(Notification)
            .where(
                Notification.organization_id == scope.organization_id,
                Notification.user_id == scope.user_id,
                Notification.is_read == False,  # noqa: E712
            )
            .values(is_read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def create(self, notification: Notification) -> Notification:
        return await self._save(notification)

    async def update(self, notification: Notification) -> Notification:
        return await self._save(notification)

    async def find_created_before(
        self, organization_id: UUID, cutoff: datetime, limit: int
    ) -> List[Notification]:
        return await self._created_before(organization_id, cutoff, limit)

    async def delete_by_ids(self, organization_id: UUID, ids: List[UUID]) -> int:
        return await self._delete_by_ids(organization_id, ids)
