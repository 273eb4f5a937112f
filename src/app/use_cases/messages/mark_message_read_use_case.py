from datetime import datetime

from libs.result import Error, Result, Return
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lookups import parse_uuid
from src.domain.entities import MessageStatus
from .dtos import MessageResponse


class MarkMessageReadUseCase:
    """Only the receiver can mark a message as read"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal, message_id: str) -> Result[MessageResponse]:
        parsed = parse_uuid(message_id)
        if parsed is None:
            return Return.err(Error("MESSAGE_NOT_FOUND", "Mensaje no encontrado"))

        async with self.uow:
            message = await self.uow.messages.get_received(TenantScope.of(principal), parsed)
            if message is None:
                return Return.err(Error("MESSAGE_NOT_FOUND", "Mensaje no encontrado"))

            if message.status != MessageStatus.read:
                message.status = MessageStatus.read
                message.read_at = datetime.utcnow()
                message = await self.uow.messages.update(message)
                await self.uow.commit()

        return Return.ok(MessageResponse.from_entity(message))
