"""Aggregations over case lists shared by the dashboard and reports"""

from datetime import datetime
from typing import Dict, Iterable, List, Optional

from src.app.services.authorization import STAFF_ROLES
from src.domain.entities import CLOSED_CASE_STATUSES, Case, CaseStatus, User
from .dtos import StaffPerformance


def completion_days(case: Case) -> Optional[float]:
    if case.completion_date is None or case.filing_date is None:
        return None
    return (case.completion_date - case.filing_date).total_seconds() / 86400


def average(values: Iterable[float]) -> Optional[float]:
    values = list(values)
    if not values:
        return None
    return round(sum(values) / len(values), 1)


def is_overdue(case: Case, now: datetime) -> bool:
    return (
        case.deadline_date is not None
        and case.deadline_date < now
        and case.status not in CLOSED_CASE_STATUSES
    )


def staff_performance(
    users: Iterable[User], cases: List[Case], now: datetime
) -> List[StaffPerformance]:
    """Per admin/staff user counters, busiest first"""
    assigned: Dict = {}
    for case in cases:
        if case.assigned_staff_id:
            assigned.setdefault(case.assigned_staff_id, []).append(case)

    rows = []
    for user in users:
        if user.role not in STAFF_ROLES:
            continue
        own = assigned.get(user.id, [])
        rows.append(
            StaffPerformance(
                id=str(user.id),
                name=user.name,
                email=user.email,
                total_cases=len(own),
                completed_cases=sum(1 for c in own if c.status == CaseStatus.completed),
                approved_cases=sum(1 for c in own if c.status == CaseStatus.approved),
                overdue_cases=sum(1 for c in own if is_overdue(c, now)),
                avg_completion_days=average(
                    d for d in (completion_days(c) for c in own) if d is not None
                ),
            )
        )
    rows.sort(key=lambda row: row.total_cases, reverse=True)
    return rows
