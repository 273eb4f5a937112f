"""
Scheduled Job Use Cases
"""

from .sweep_demo_tenant_use_case import SweepDemoTenantUseCase
from .dispatch_reminders_use_case import (
    DispatchRemindersUseCase,
    build_html_body,
    normalize_recipients,
)

__all__ = [
    "SweepDemoTenantUseCase",
    "DispatchRemindersUseCase",
    "build_html_body",
    "normalize_recipients",
]
