from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, Optional
from uuid import UUID


class IMetricsRepository(ABC):
    """
    Aggregate queries for dashboards.

    Tenant methods take an organization_id that callers derive from the
    principal; the *_per_organization methods are superadmin-only.
    """

    @abstractmethod
    async def cases_by_status(self, organization_id: UUID) -> Dict[str, int]:
        pass

    @abstractmethod
    async def cases_by_type(self, organization_id: UUID) -> Dict[str, int]:
        pass

    @abstractmethod
    async def documents_by_status(self, organization_id: UUID) -> Dict[str, int]:
        pass

    @abstractmethod
    async def users_by_role(self, organization_id: UUID) -> Dict[str, int]:
        pass

    @abstractmethod
    async def messages_since(self, organization_id: UUID, since: datetime) -> int:
        pass

    @abstractmethod
    async def last_activity_at(self, organization_id: UUID) -> Optional[datetime]:
        pass

    @abstractmethod
    async def users_by_role_per_organization(self) -> Dict[UUID, Dict[str, int]]:
        pass

    @abstractmethod
    async def cases_per_organization(self) -> Dict[UUID, int]:
        pass

    @abstractmethod
    async def cases_per_client(self, organization_id: UUID) -> Dict[UUID, int]:
        pass

    @abstractmethod
    async def unread_notifications_per_user(self, organization_id: UUID) -> Dict[UUID, int]:
        pass

    @abstractmethod
    async def last_activity_per_organization(self) -> Dict[UUID, datetime]:
        pass

    @abstractmethod
    async def platform_totals(self) -> Dict[str, int]:
        """organizations, active_organizations, users, cases, documents"""
        pass
