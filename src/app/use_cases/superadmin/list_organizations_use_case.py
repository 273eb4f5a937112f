"""
List Organizations Use Case

Superadmin overview of every organization with usage counters.
"""

from datetime import datetime, timedelta
from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import OrganizationListResponse, OrganizationSummary

STATUS_FILTERS = ("active", "inactive")
STALE_AFTER = timedelta(days=30)


def _sort_key(sort: str):
    """(key function, reverse) for a sort option; missing activity sorts last"""
    if sort.startswith("name_"):
        return (lambda o: o.name.lower()), sort == "name_desc"
    if sort.startswith("cases_"):
        return (lambda o: o.case_count), sort == "cases_desc"
    if sort.startswith("activity_"):
        descending = sort == "activity_desc"
        floor = datetime.min if descending else datetime.max
        return (lambda o: o.last_activity_at or floor), descending
    return (lambda o: o.created_at), sort != "created_asc"


SORT_OPTIONS = (
    "created_desc",
    "created_asc",
    "name_asc",
    "name_desc",
    "activity_desc",
    "activity_asc",
    "cases_desc",
    "cases_asc",
)


class ListOrganizationsUseCase:
    """
    Business Rules:
    - status filters on is_active (active | inactive)
    - activity=stale30 keeps organizations without activity in the last 30 days
    - sort defaults to created_desc
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        status: Optional[str] = None,
        sort: Optional[str] = None,
        activity: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Result[OrganizationListResponse]:
        if status and status not in STATUS_FILTERS:
            return Return.err(Error("INVALID_STATUS", "Estado inválido"))
        sort = sort or "created_desc"
        if sort not in SORT_OPTIONS:
            return Return.err(Error("INVALID_SORT", "Orden inválido"))

        now = now or datetime.utcnow()
        async with self.uow:
            organizations = await self.uow.organizations.list_all()
            roles = await self.uow.metrics.users_by_role_per_organization()
            cases = await self.uow.metrics.cases_per_organization()
            activity_at = await self.uow.metrics.last_activity_per_organization()

        rows = []
        for org in organizations:
            if status == "active" and not org.is_active:
                continue
            if status == "inactive" and org.is_active:
                continue
            last = activity_at.get(org.id)
            if activity == "stale30" and last is not None and last >= now - STALE_AFTER:
                continue
            counts = roles.get(org.id, {})
            rows.append(
                OrganizationSummary(
                    id=str(org.id),
                    name=org.name,
                    slug=org.slug,
                    domain=org.domain,
                    is_active=org.is_active,
                    created_at=org.created_at,
                    last_activity_at=last or org.created_at,
                    admin_count=counts.get("admin", 0),
                    staff_count=counts.get("staff", 0),
                    client_count=counts.get("client", 0),
                    case_count=cases.get(org.id, 0),
                )
            )

        key, reverse = _sort_key(sort)
        rows.sort(key=key, reverse=reverse)
        return Return.ok(OrganizationListResponse(organizations=rows))
