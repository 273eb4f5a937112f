from datetime import date, datetime, time
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.api.error import raise_for_error
from src.app.services.authorization import Principal
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.analytics import (
    DashboardResponse,
    GetDashboardUseCase,
    GetReportUseCase,
    GetStatsUseCase,
    ReportResponse,
    StatsResponse,
)
from src.depends import get_unit_of_work, require_staff

router = APIRouter(tags=["Analytics"])


def _start_of(day: Optional[date]) -> Optional[datetime]:
    return datetime.combine(day, time.min) if day else None


@router.get("/stats", status_code=status.HTTP_200_OK, response_model=StatsResponse)
async def get_stats(
    principal: Principal = Depends(require_staff),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Headline counters of the organization (admin/staff)"""
    result = await GetStatsUseCase(uow).execute(principal)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/analytics/dashboard", status_code=status.HTTP_200_OK, response_model=DashboardResponse
)
async def get_dashboard(
    principal: Principal = Depends(require_staff),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetDashboardUseCase(uow).execute(principal)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/analytics/reports", status_code=status.HTTP_200_OK, response_model=ReportResponse)
async def get_report(
    report_type: Optional[str] = Query(None, alias="type"),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    principal: Principal = Depends(require_staff),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Tabular report

    Raises:
        - 400 Bad Request: Missing or unknown report type
    """
    result = await GetReportUseCase(uow).execute(
        principal, report_type, _start_of(start_date), _start_of(end_date)
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
