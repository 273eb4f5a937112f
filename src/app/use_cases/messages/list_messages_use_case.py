from typing import Optional

from libs.result import Result, Return
from src.app.services.authorization import Principal
from src.app.services.rate_limiter import is_demo_organization
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lookups import parse_uuid, people_by_id
from .dtos import MessageListResponse, MessageResponse


class ListMessagesUseCase:
    """
    Messages visible to the caller, newest first.

    Business Rules:
    - Clients only see conversations they are party to
    - Staff without a case filter, and everyone in a demo organization,
      are narrowed the same way
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, case_id: Optional[str] = None
    ) -> Result[MessageListResponse]:
        case_filter = None
        if case_id:
            case_filter = parse_uuid(case_id)
            if case_filter is None:
                return Return.ok(MessageListResponse(messages=[]))

        scope = TenantScope.of(principal)
        async with self.uow:
            organization = await self.uow.organizations.get_by_id(principal.organization_id)
            is_demo = is_demo_organization(organization)
            messages = await self.uow.messages.list(
                scope,
                case_id=case_filter,
                own_conversations_only=is_demo or case_filter is None,
            )
            people = await people_by_id(self.uow, scope)

        return Return.ok(
            MessageListResponse(
                messages=[MessageResponse.from_entity(m, people) for m in messages]
            )
        )
