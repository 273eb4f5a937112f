from datetime import datetime, timedelta
from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lookups import parse_uuid
from src.domain.entities import CaseStatus
from .dtos import OrganizationDetailResponse, TenantInfo

OPEN_EXCLUDED = (CaseStatus.completed.value, CaseStatus.rejected.value)


class GetOrganizationUseCase:
    """Detail metrics of one organization for the superadmin console"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, organization_id, now: Optional[datetime] = None
    ) -> Result[OrganizationDetailResponse]:
        parsed = parse_uuid(organization_id)
        if parsed is None:
            return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organización no encontrada"))

        now = now or datetime.utcnow()
        async with self.uow:
            organization = await self.uow.organizations.get_by_id(parsed)
            if organization is None:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organización no encontrada"))

            users_by_role = await self.uow.metrics.users_by_role(parsed)
            cases_by_status = await self.uow.metrics.cases_by_status(parsed)
            cases_by_type = await self.uow.metrics.cases_by_type(parsed)
            documents_by_status = await self.uow.metrics.documents_by_status(parsed)
            messages = await self.uow.metrics.messages_since(parsed, now - timedelta(days=30))
            last_activity = await self.uow.metrics.last_activity_at(parsed)

        return Return.ok(
            OrganizationDetailResponse(
                organization=TenantInfo.from_entity(
                    organization, sum(users_by_role.values())
                ),
                last_activity_at=last_activity,
                users_by_role=users_by_role,
                case_count=sum(cases_by_status.values()),
                open_cases=sum(
                    count
                    for status, count in cases_by_status.items()
                    if status not in OPEN_EXCLUDED
                ),
                cases_by_status=cases_by_status,
                cases_by_type=cases_by_type,
                document_count=sum(documents_by_status.values()),
                documents_by_status=documents_by_status,
                messages_last_30_days=messages,
            )
        )
