"""
Analytics DTOs
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class StatsResponse(BaseModel):
    total_cases: int
    active_cases: int
    total_clients: int
    pending_documents: int


class CountBucket(BaseModel):
    key: str
    count: int


class MonthlyCount(BaseModel):
    month: str  # YYYY-MM
    count: int


class StaffPerformance(BaseModel):
    id: str
    name: str
    email: Optional[str] = None
    total_cases: int
    completed_cases: int
    approved_cases: int
    overdue_cases: int = 0
    avg_completion_days: Optional[float] = None


class PendingSummary(BaseModel):
    pending_documents: int
    pending_cases: int
    overdue_cases: int


class RecentActivity(BaseModel):
    id: str
    action: str
    description: Optional[str] = None
    user_name: Optional[str] = None
    case_number: Optional[str] = None
    created_at: datetime


class DashboardResponse(BaseModel):
    cases_by_status: List[CountBucket]
    cases_by_type: List[CountBucket]
    monthly_cases: List[MonthlyCount]
    avg_completion_days: float
    staff_performance: List[StaffPerformance]
    pending_summary: PendingSummary
    recent_activity: List[RecentActivity]


class ReportResponse(BaseModel):
    type: str
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    report: List[Dict[str, Any]]
