from libs.result import Error, Result, Return
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lookups import parse_uuid
from src.domain.entities import Notification
from .dtos import CreateNotificationCommand, NotificationResponse


class CreateNotificationUseCase:
    """
    Staff-authored notification for a user of the same organization.

    The related case, when given, must belong to the organization as well.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, command: CreateNotificationCommand
    ) -> Result[NotificationResponse]:
        user_id = parse_uuid(command.user_id)
        if user_id is None:
            return Return.err(Error("USER_NOT_FOUND", "Usuario no encontrado"))

        scope = TenantScope.of(principal)
        async with self.uow:
            recipient = await self.uow.users.get_in_scope(scope, user_id)
            if recipient is None:
                return Return.err(Error("USER_NOT_FOUND", "Usuario no encontrado"))

            case_id = None
            if command.related_case_id:
                parsed_case = parse_uuid(command.related_case_id)
                case = await self.uow.cases.get(scope, parsed_case) if parsed_case else None
                if case is None:
                    return Return.err(Error("CASE_NOT_FOUND", "Caso no encontrado"))
                case_id = case.id

            notification = await self.uow.notifications.create(
                Notification(
                    organization_id=principal.organization_id,
                    user_id=recipient.id,
                    title=command.title,
                    message=command.message,
                    type=command.type,
                    related_case_id=case_id,
                )
            )
            await self.uow.commit()

        return Return.ok(NotificationResponse.from_entity(notification))
