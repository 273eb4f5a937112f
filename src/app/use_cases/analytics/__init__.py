"""
Stats & Analytics Use Cases
"""

from .dtos import DashboardResponse, ReportResponse, StatsResponse
from .get_stats_use_case import GetStatsUseCase
from .get_dashboard_use_case import GetDashboardUseCase
from .get_report_use_case import GetReportUseCase, REPORT_TYPES

__all__ = [
    "GetStatsUseCase",
    "GetDashboardUseCase",
    "GetReportUseCase",
    "REPORT_TYPES",
    "DashboardResponse",
    "ReportResponse",
    "StatsResponse",
]
