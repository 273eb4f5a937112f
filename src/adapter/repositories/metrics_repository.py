"""
Aggregate queries for dashboards.

All per-organization queries filter on organization_id; the *_per_organization
and platform_totals helpers are only reachable from the superadmin console.
"""

from datetime import datetime
from typing import Dict, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.metrics_repository import IMetricsRepository
from src.domain.entities import (
    ActivityLog,
    Case,
    Document,
    Message,
    Notification,
    Organization,
    User,
)


def _enum_key(value) -> str:
    return value.value if hasattr(value, "value") else str(value)


class MetricsRepository(IMetricsRepository):
    """Metrics repository implementation using SQLAlchemy aggregates"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _grouped(self, column, organization_column, organization_id: UUID) -> Dict[str, int]:
        stmt = (
            select(column, func.count())
            .where(organization_column == organization_id)
            .group_by(column)
        )
        result = await self.session.exec(stmt)
        return {_enum_key(key): int(count) for key, count in result.all()}

    async def cases_by_status(self, organization_id: UUID) -> Dict[str, int]:
        return await self._grouped(Case.status, Case.organization_id, organization_id)

    async def cases_by_type(self, organization_id: UUID) -> Dict[str, int]:
        return await self._grouped(Case.case_type, Case.organization_id, organization_id)

    async def documents_by_status(self, organization_id: UUID) -> Dict[str, int]:
        return await self._grouped(
            Document.status, Document.organization_id, organization_id
        )

    async def users_by_role(self, organization_id: UUID) -> Dict[str, int]:
        return await self._grouped(User.role, User.organization_id, organization_id)

    async def messages_since(self, organization_id: UUID, since: datetime) -> int:
        stmt = select(func.count(Message.id)).where(
            Message.organization_id == organization_id, Message.created_at >= since
        )
        result = await self.session.exec(stmt)
        return int(result.one() or 0)

    async def last_activity_at(self, organization_id: UUID) -> Optional[datetime]:
        stmt = select(func.max(ActivityLog.created_at)).where(
            ActivityLog.organization_id == organization_id
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def users_by_role_per_organization(self) -> Dict[UUID, Dict[str, int]]:
        stmt = select(User.organization_id, User.role, func.count()).group_by(
            User.organization_id, User.role
        )
        result = await self.session.exec(stmt)
        grouped: Dict[UUID, Dict[str, int]] = {}
        for organization_id, role, count in result.all():
            grouped.setdefault(organization_id, {})[_enum_key(role)] = int(count)
        return grouped

    async def cases_per_organization(self) -> Dict[UUID, int]:
        stmt = select(Case.organization_id, func.count()).group_by(Case.organization_id)
        result = await self.session.exec(stmt)
        return {organization_id: int(count) for organization_id, count in result.all()}

    async def cases_per_client(self, organization_id: UUID) -> Dict[UUID, int]:
        stmt = (
            select(Case.client_id, func.count())
            .where(Case.organization_id == organization_id)
            .group_by(Case.client_id)
        )
        result = await self.session.exec(stmt)
        return {client_id: int(count) for client_id, count in result.all()}

    async def unread_notifications_per_user(self, organization_id: UUID) -> Dict[UUID, int]:
        stmt = (
            select(Notification.user_id, func.count())
            .where(
                Notification.organization_id == organization_id,
                Notification.is_read == False,  # noqa: E712
            )
            .group_by(Notification.user_id)
        )
        result = await self.session.exec(stmt)
        return {user_id: int(count) for user_id, count in result.all()}

    async def last_activity_per_organization(self) -> Dict[UUID, datetime]:
        stmt = select(ActivityLog.organization_id, func.max(ActivityLog.created_at)).group_by(
            ActivityLog.organization_id
        )
        result = await self.session.exec(stmt)
        return {organization_id: last for organization_id, last in result.all()}

    async def platform_totals(self) -> Dict[str, int]:
        totals = {}
        for key, column in (
            ("organizations", Organization.id),
            ("users", User.id),
            ("cases", Case.id),
            ("documents", Document.id),
            ("messages", Message.id),
        ):
            result = await self.session.exec(select(func.count(column)))
            totals[key] = int(result.one() or 0)
        active = await self.session.exec(
            select(func.count(Organization.id)).where(Organization.is_active == True)  # noqa: E712
        )
        totals["active_organizations"] = int(active.one() or 0)
        return totals
