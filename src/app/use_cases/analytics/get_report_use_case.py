"""
Analytics Report Use Case

Tabular exports of the organization's data.
"""

from datetime import datetime, timedelta
from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import CaseStatus, UserRole
from src.app.use_cases.lookups import naive_utc
from .dtos import ReportResponse
from .performance import staff_performance

REPORT_TYPES = ("case_summary", "client_summary", "document_summary", "performance")


def _within(value: datetime, start: Optional[datetime], end: Optional[datetime]) -> bool:
    if start is not None and value < start:
        return False
    if end is not None and value >= end:
        return False
    return True


class GetReportUseCase:
    """
    Business Rules:
    - Admin/staff only (Role Gate)
    - type is one of case_summary, client_summary, document_summary, performance
    - start_date/end_date filter on created_at; end_date includes its whole day
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        report_type: Optional[str],
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        now: Optional[datetime] = None,
    ) -> Result[ReportResponse]:
        if not report_type:
            return Return.err(Error("REPORT_TYPE_REQUIRED", "El tipo de reporte es obligatorio"))
        if report_type not in REPORT_TYPES:
            return Return.err(Error("INVALID_REPORT_TYPE", "Tipo de reporte inválido"))

        now = now or datetime.utcnow()
        start = naive_utc(start_date)
        end = naive_utc(end_date) + timedelta(days=1) if end_date else None
        scope = TenantScope.of(principal)

        async with self.uow:
            users = await self.uow.users.list_in_scope(scope)
            cases = await self.uow.cases.list(scope)
            documents = (
                await self.uow.documents.list(scope) if report_type == "document_summary" else []
            )

        people = {user.id: user for user in users}
        cases_by_id = {case.id: case for case in cases}

        def name_of(user_id):
            user = people.get(user_id)
            return user.name if user else None

        if report_type == "case_summary":
            rows = [
                {
                    "id": str(c.id),
                    "case_number": c.case_number,
                    "title": c.title,
                    "case_type": c.case_type.value,
                    "status": c.status.value,
                    "priority": c.priority.value,
                    "client_name": name_of(c.client_id),
                    "client_email": people[c.client_id].email if c.client_id in people else None,
                    "staff_name": name_of(c.assigned_staff_id),
                    "created_at": c.created_at.isoformat(),
                    "deadline_date": c.deadline_date.isoformat() if c.deadline_date else None,
                }
                for c in cases
                if _within(c.created_at, start, end)
            ]
        elif report_type == "client_summary":
            rows = []
            for user in users:
                if user.role != UserRole.client:
                    continue
                own = [c for c in cases if c.client_id == user.id]
                rows.append(
                    {
                        "id": str(user.id),
                        "name": user.name,
                        "email": user.email,
                        "phone": user.phone,
                        "country_of_origin": user.country_of_origin,
                        "total_cases": len(own),
                        "completed_cases": sum(
                            1 for c in own if c.status == CaseStatus.completed
                        ),
                        "created_at": user.created_at.isoformat(),
                    }
                )
        elif report_type == "document_summary":
            rows = []
            for d in documents:
                if not _within(d.created_at, start, end):
                    continue
                case = cases_by_id.get(d.case_id)
                rows.append(
                    {
                        "id": str(d.id),
                        "name": d.name,
                        "status": d.status.value,
                        "category": d.category,
                        "is_required": d.is_required,
                        "case_number": case.case_number if case else None,
                        "client_name": name_of(case.client_id) if case else None,
                        "uploader_name": name_of(d.uploaded_by),
                        "created_at": d.created_at.isoformat(),
                    }
                )
        else:
            rows = [row.model_dump() for row in staff_performance(users, cases, now)]

        return Return.ok(
            ReportResponse(type=report_type, start_date=start, end_date=naive_utc(end_date), report=rows)
        )
