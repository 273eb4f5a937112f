"""
Case Portal Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    UserRole,
    CaseStatus,
    CaseType,
    PriorityLevel,
    StageStatus,
    DocumentStatus,
    MessageStatus,
    ReminderStatus,
    SuperAdminStatus,
    ACTIVE_CASE_STATUSES,
    CLOSED_CASE_STATUSES,
)

# Export all entities
from .organization import Organization
from .user import User
from .case import Case
from .case_stage import CaseStage
from .case_key_date import CaseKeyDate
from .reminder import Reminder
from .document import Document
from .message import Message
from .notification import Notification
from .activity_log import ActivityLog
from .super_admin import SuperAdmin

__all__ = [
    # Enums
    "UserRole",
    "CaseStatus",
    "CaseType",
    "PriorityLevel",
    "StageStatus",
    "DocumentStatus",
    "MessageStatus",
    "ReminderStatus",
    "SuperAdminStatus",
    "ACTIVE_CASE_STATUSES",
    "CLOSED_CASE_STATUSES",
    # Entities
    "Organization",
    "User",
    "Case",
    "CaseStage",
    "CaseKeyDate",
    "Reminder",
    "Document",
    "Message",
    "Notification",
    "ActivityLog",
    "SuperAdmin",
]
