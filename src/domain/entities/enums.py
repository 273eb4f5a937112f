"""
Case Portal Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Role of a user inside their organization"""

    admin = "admin"
    staff = "staff"
    client = "client"


class CaseStatus(str, Enum):
    """Case lifecycle status"""

    pending = "pending"
    in_progress = "in_progress"
    under_review = "under_review"
    approved = "approved"
    rejected = "rejected"
    completed = "completed"


class CaseType(str, Enum):
    family = "family"
    employment = "employment"
    asylum = "asylum"
    citizenship = "citizenship"
    visa = "visa"
    green_card = "green_card"
    other = "other"


class PriorityLevel(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


class StageStatus(str, Enum):
    """Status of a single stage (milestone) inside a case"""

    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"
    blocked = "blocked"


class DocumentStatus(str, Enum):
    """Document review status"""

    pending = "pending"
    submitted = "submitted"
    approved = "approved"
    rejected = "rejected"
    requires_action = "requires_action"
    not_required = "not_required"


class MessageStatus(str, Enum):
    sent = "sent"
    delivered = "delivered"
    read = "read"


class ReminderStatus(str, Enum):
    """Reminder delivery state: scheduled -> sent | failed (terminal)"""

    scheduled = "scheduled"
    sent = "sent"
    failed = "failed"


class SuperAdminStatus(str, Enum):
    active = "active"
    blocked = "blocked"


ACTIVE_CASE_STATUSES = (
    CaseStatus.pending,
    CaseStatus.in_progress,
    CaseStatus.under_review,
)

CLOSED_CASE_STATUSES = (
    CaseStatus.completed,
    CaseStatus.approved,
)
