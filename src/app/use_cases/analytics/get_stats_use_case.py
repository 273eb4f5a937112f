from libs.result import Result, Return
from src.app.services.authorization import Principal
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ACTIVE_CASE_STATUSES, DocumentStatus, UserRole
from .dtos import StatsResponse


class GetStatsUseCase:
    """Headline counters of the caller's organization"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal) -> Result[StatsResponse]:
        organization_id = principal.organization_id
        async with self.uow:
            by_status = await self.uow.metrics.cases_by_status(organization_id)
            by_role = await self.uow.metrics.users_by_role(organization_id)
            documents = await self.uow.metrics.documents_by_status(organization_id)

        return Return.ok(
            StatsResponse(
                total_cases=sum(by_status.values()),
                active_cases=sum(by_status.get(s.value, 0) for s in ACTIVE_CASE_STATUSES),
                total_clients=by_role.get(UserRole.client.value, 0),
                pending_documents=documents.get(DocumentStatus.pending.value, 0),
            )
        )
