from typing import Optional

from libs.result import Result, Return
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lookups import parse_uuid, people_by_id
from .dtos import ActivityListResponse, ActivityResponse

DEFAULT_LIMIT = 20
MAX_LIMIT = 100


class ListActivityUseCase:
    """
    Activity feed of the organization, newest first.

    Clients only see activity attached to their own cases.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        case_id: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
    ) -> Result[ActivityListResponse]:
        case_filter = None
        if case_id:
            case_filter = parse_uuid(case_id)
            if case_filter is None:
                return Return.ok(ActivityListResponse(activities=[]))

        limit = max(1, min(limit or DEFAULT_LIMIT, MAX_LIMIT))
        scope = TenantScope.of(principal)
        async with self.uow:
            activities = await self.uow.activity_logs.list(scope, case_id=case_filter, limit=limit)
            people = await people_by_id(self.uow, scope)

        return Return.ok(
            ActivityListResponse(
                activities=[ActivityResponse.from_entity(a, people) for a in activities]
            )
        )
