from libs.result import Result, Return
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from .dtos import NotificationListResponse, NotificationResponse

NOTIFICATION_PAGE_SIZE = 50


class ListNotificationsUseCase:
    """The caller's own notifications, newest first, at most 50"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, unread_only: bool = False
    ) -> Result[NotificationListResponse]:
        async with self.uow:
            notifications = await self.uow.notifications.list_for_recipient(
                TenantScope.of(principal), unread_only=unread_only, limit=NOTIFICATION_PAGE_SIZE
            )

        return Return.ok(
            NotificationListResponse(
                notifications=[NotificationResponse.from_entity(n) for n in notifications],
                unread_count=sum(1 for n in notifications if not n.is_read),
            )
        )
