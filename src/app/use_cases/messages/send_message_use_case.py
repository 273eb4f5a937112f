"""
Send Message Use Case
"""

from libs.result import Error, Result, Return
from src.app.services.activity_recorder import create_notification, log_activity
from src.app.services.authorization import Principal
from src.app.services.rate_limiter import IRateLimiter, enforce_rate_limit
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lookups import parse_uuid
from src.domain.entities import Message
from .dtos import MessageResponse, SendMessageCommand


class SendMessageUseCase:
    """
    Use case for sending a message about a case.

    Business Rules:
    - The case must be visible to the sender (clients: their own cases)
    - The receiver must belong to the sender's organization
    - Rate limited per tenant and sender
    - Logs message_sent and notifies the receiver
    """

    def __init__(self, uow: UnitOfWork, rate_limiter: IRateLimiter):
        self.uow = uow
        self.rate_limiter = rate_limiter

    async def execute(
        self, principal: Principal, command: SendMessageCommand
    ) -> Result[MessageResponse]:
        content = command.content.strip()
        if not content:
            return Return.err(Error("MISSING_FIELDS", "El mensaje no puede estar vacío"))

        case_id = parse_uuid(command.case_id)
        receiver_id = parse_uuid(command.receiver_id)
        if case_id is None:
            return Return.err(Error("CASE_NOT_FOUND", "Caso no encontrado"))
        if receiver_id is None:
            return Return.err(Error("RECEIVER_NOT_FOUND", "Destinatario no encontrado"))

        scope = TenantScope.of(principal)
        async with self.uow:
            case = await self.uow.cases.get(scope, case_id)
            if case is None:
                return Return.err(Error("CASE_NOT_FOUND", "Caso no encontrado"))

            receiver = await self.uow.users.get_in_scope(scope, receiver_id)
            if receiver is None:
                return Return.err(Error("RECEIVER_NOT_FOUND", "Destinatario no encontrado"))

            organization = await self.uow.organizations.get_by_id(principal.organization_id)
            limited = enforce_rate_limit(
                self.rate_limiter,
                "message_send",
                principal.organization_id,
                str(principal.id),
                organization,
            )
            if limited.is_err():
                return Return.err(limited.error)

            message = await self.uow.messages.create(
                Message(
                    organization_id=principal.organization_id,
                    case_id=case.id,
                    sender_id=principal.id,
                    receiver_id=receiver.id,
                    subject=command.subject,
                    content=content,
                )
            )
            await self.uow.commit()

            sender = await self.uow.users.get_in_scope(scope, principal.id)
            sender_name = sender.name if sender else "un usuario"
            await log_activity(
                self.uow,
                principal.organization_id,
                principal.id,
                "message_sent",
                f"Envió un mensaje a {receiver.name}",
                case_id=case.id,
                metadata={"message_id": str(message.id)},
            )
            suffix = f": {command.subject}" if command.subject else ""
            await create_notification(
                self.uow,
                principal.organization_id,
                receiver.id,
                "Nuevo mensaje",
                f"Tienes un nuevo mensaje de {sender_name}{suffix}",
                category="message",
                case_id=case.id,
            )
            await self.uow.commit()

            people = {receiver.id: receiver}
            if sender is not None:
                people[sender.id] = sender

        return Return.ok(MessageResponse.from_entity(message, people))
