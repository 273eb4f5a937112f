from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select

from src.app.repositories.reminder_repository import IReminderRepository
from src.app.services.tenant_scope import TenantScope
from src.domain.entities import Reminder, ReminderStatus
from .scoping import TenantScopedRepository, owned_case_ids


class ReminderRepository(TenantScopedRepository, IReminderRepository):
    """Reminder repository implementation using SQLModel"""

    model = Reminder

    def owner_clause(self, scope: TenantScope):
        return Reminder.case_id.in_(owned_case_ids(scope))

    async def list_for_case(self, scope: TenantScope, case_id: UUID) -> List[Reminder]:
        stmt = self._select(scope).where(Reminder.case_id == case_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_due(
        self, now: datetime, limit: int, organization_id: Optional[UUID] = None
    ) -> List[Reminder]:
        stmt = select(Reminder).where(
            Reminder.status == ReminderStatus.scheduled, Reminder.send_at <= now
        )
        if organization_id is not None:
            stmt = stmt.where(Reminder.organization_id == organization_id)
        stmt = stmt.order_by(Reminder.send_at.asc()).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, reminder: Reminder) -> Reminder:
        return await self._save(reminder)

    async def update(self, reminder: Reminder) -> Reminder:
        return await self._save(reminder)

    async def get_for_key_date(
        self, organization_id: UUID, key_date_id: UUID
    ) -> Optional[Reminder]:
        stmt = (
            select(Reminder)
            .where(
                Reminder.organization_id == organization_id,
                Reminder.key_date_id == key_date_id,
            )
            .order_by(Reminder.created_at.asc())
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def delete_for_key_date(self, organization_id: UUID, key_date_id: UUID) -> int:
        stmt = delete(Reminder).where(
            Reminder.organization_id == organization_id,
            Reminder.key_date_id == key_date_id,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
