from libs.result import Error, Result, Return
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lookups import parse_uuid
from .dtos import MarkAllReadResponse, NotificationResponse


class MarkNotificationReadUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, notification_id: str
    ) -> Result[NotificationResponse]:
        parsed = parse_uuid(notification_id)
        if parsed is None:
            return Return.err(Error("NOTIFICATION_NOT_FOUND", "Notificación no encontrada"))

        async with self.uow:
            notification = await self.uow.notifications.get_for_recipient(
                TenantScope.of(principal), parsed
            )
            if notification is None:
                return Return.err(Error("NOTIFICATION_NOT_FOUND", "Notificación no encontrada"))

            if not notification.is_read:
                notification.is_read = True
                notification = await self.uow.notifications.update(notification)
                await self.uow.commit()

        return Return.ok(NotificationResponse.from_entity(notification))


class MarkAllNotificationsReadUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal) -> Result[MarkAllReadResponse]:
        async with self.uow:
            updated = await self.uow.notifications.mark_all_read(TenantScope.of(principal))
            await self.uow.commit()

        return Return.ok(MarkAllReadResponse(updated=updated))
