"""
Analytics Dashboard Use Case
"""

from datetime import datetime
from typing import Optional

from libs.result import Result, Return
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import CaseStatus, DocumentStatus
from .dtos import (
    CountBucket,
    DashboardResponse,
    MonthlyCount,
    PendingSummary,
    RecentActivity,
)
from .performance import average, completion_days, is_overdue, staff_performance

MONTHS_BACK = 6
TOP_STAFF = 10
RECENT_ACTIVITY = 10


def _months_back(now: datetime, months: int):
    """First day of the month `months - 1` months before now's month"""
    year, month = now.year, now.month - (months - 1)
    while month <= 0:
        month += 12
        year -= 1
    return datetime(year, month, 1)


class GetDashboardUseCase:
    """
    Organization dashboard.

    Business Rules:
    - Admin/staff only (Role Gate)
    - Monthly creation counts cover the current month and the five before it
    - Average completion days uses cases with both filing and completion dates
    - Staff performance lists the top 10 by assigned cases
    - Recent activity shows the last 10 entries
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, now: Optional[datetime] = None
    ) -> Result[DashboardResponse]:
        now = now or datetime.utcnow()
        scope = TenantScope.of(principal)
        organization_id = principal.organization_id

        async with self.uow:
            by_status = await self.uow.metrics.cases_by_status(organization_id)
            by_type = await self.uow.metrics.cases_by_type(organization_id)
            documents = await self.uow.metrics.documents_by_status(organization_id)
            cases = await self.uow.cases.list(scope)
            users = await self.uow.users.list_in_scope(scope)
            activity = await self.uow.activity_logs.list(scope, limit=RECENT_ACTIVITY)

        since = _months_back(now, MONTHS_BACK)
        monthly = {}
        for case in cases:
            if case.created_at >= since:
                key = case.created_at.strftime("%Y-%m")
                monthly[key] = monthly.get(key, 0) + 1

        people = {user.id: user for user in users}
        case_numbers = {case.id: case.case_number for case in cases}

        return Return.ok(
            DashboardResponse(
                cases_by_status=[CountBucket(key=k, count=v) for k, v in by_status.items()],
                cases_by_type=sorted(
                    (CountBucket(key=k, count=v) for k, v in by_type.items()),
                    key=lambda bucket: bucket.count,
                    reverse=True,
                ),
                monthly_cases=[
                    MonthlyCount(month=k, count=monthly[k]) for k in sorted(monthly)
                ],
                avg_completion_days=average(
                    d for d in (completion_days(c) for c in cases) if d is not None
                )
                or 0.0,
                staff_performance=staff_performance(users, cases, now)[:TOP_STAFF],
                pending_summary=PendingSummary(
                    pending_documents=documents.get(DocumentStatus.pending.value, 0),
                    pending_cases=by_status.get(CaseStatus.pending.value, 0),
                    overdue_cases=sum(1 for c in cases if is_overdue(c, now)),
                ),
                recent_activity=[
                    RecentActivity(
                        id=str(a.id),
                        action=a.action,
                        description=a.description,
                        user_name=people[a.user_id].name if a.user_id in people else None,
                        case_number=case_numbers.get(a.case_id),
                        created_at=a.created_at,
                    )
                    for a in activity
                ],
            )
        )
