from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import or_

from src.app.repositories.message_repository import IMessageRepository
from src.app.services.tenant_scope import TenantScope
from src.domain.entities import Message
from .scoping import TenantScopedRepository


class MessageRepository(TenantScopedRepository, IMessageRepository):
    """Message repository implementation using SQLModel"""

    model = Message

    def owner_clause(self, scope: TenantScope):
        return or_(Message.sender_id == scope.user_id, Message.receiver_id == scope.user_id)

    async def list(
        self,
        scope: TenantScope,
        case_id: Optional[UUID] = None,
        own_conversations_only: bool = False,
    ) -> List[Message]:
        stmt = self._select(scope)
        if own_conversations_only and not scope.restricted_to_owner:
            stmt = stmt.where(self.owner_clause(scope))
        if case_id is not None:
            stmt = stmt.where(Message.case_id == case_id)
        stmt = stmt.order_by(Message.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_received(self, scope: TenantScope, message_id: UUID) -> Optional[Message]:
        stmt = self._select(scope).where(
            Message.id == message_id, Message.receiver_id == scope.user_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, message: Message) -> Message:
        return await self._save(message)

    async def update(self, message: Message) -> Message:
        return await self._save(message)

    async def find_created_before(
        self, organization_id: UUID, cutoff: datetime, limit: int
    ) -> List[Message]:
        return await self._created_before(organization_id, cutoff, limit)

    async def delete_by_ids(self, organization_id: UUID, ids: List[UUID]) -> int:
        return await self._delete_by_ids(organization_id, ids)
