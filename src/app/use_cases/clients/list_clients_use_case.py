from typing import Optional

from libs.result import Result, Return
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserInfo
from src.domain.entities import UserRole
from .dtos import ClientListResponse, ClientSummary


class ListClientsUseCase:
    """Clients of the organization, newest first, with case and unread counts"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, search: Optional[str] = None
    ) -> Result[ClientListResponse]:
        search = search.strip() if search else None
        async with self.uow:
            clients = await self.uow.users.list_in_scope(
                TenantScope.of(principal), role=UserRole.client, search=search or None
            )
            case_counts = await self.uow.metrics.cases_per_client(principal.organization_id)
            unread = await self.uow.metrics.unread_notifications_per_user(
                principal.organization_id
            )

        return Return.ok(
            ClientListResponse(
                clients=[
                    ClientSummary(
                        **UserInfo.from_entity(client).model_dump(),
                        case_count=case_counts.get(client.id, 0),
                        unread_notifications=unread.get(client.id, 0),
                    )
                    for client in clients
                ]
            )
        )
