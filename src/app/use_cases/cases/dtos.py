"""
Case Use Case DTOs

Commands and responses for cases, stages and key dates.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from src.domain.entities import Case, CaseKeyDate, CaseStage, Reminder, User


# ============================================================================
# Command DTOs
# ============================================================================


class CreateCaseCommand(BaseModel):
    client_id: str
    case_type: str = "other"
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    priority: str = "medium"
    assigned_staff_id: Optional[str] = None
    filing_date: Optional[datetime] = None
    deadline_date: Optional[datetime] = None
    required_documents: List[str] = Field(default_factory=list)


class CreateStageCommand(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    notes: Optional[str] = None
    order_index: Optional[int] = None
    due_date: Optional[datetime] = None
    assigned_staff_id: Optional[str] = None
    required_documents: List[Any] = Field(default_factory=list)
    subtasks: List[Any] = Field(default_factory=list)


class KeyDateRecipient(BaseModel):
    email: str
    name: Optional[str] = None


class CreateKeyDateCommand(BaseModel):
    title: str
    occurs_at: datetime
    description: Optional[str] = None
    type: Optional[str] = None
    location: Optional[str] = None
    timezone: Optional[str] = None
    duration_minutes: Optional[int] = None
    notify_by_email: bool = False
    notify_emails: List[KeyDateRecipient] = Field(default_factory=list)
    remind_minutes_before: Optional[int] = None
    email_subject: Optional[str] = None
    email_body: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class CaseResponse(BaseModel):
    id: str
    organization_id: str
    case_number: str
    client_id: str
    client_name: Optional[str] = None
    client_email: Optional[str] = None
    assigned_staff_id: Optional[str] = None
    staff_name: Optional[str] = None
    case_type: str
    status: str
    priority: str
    title: str
    description: Optional[str] = None
    progress_percentage: int
    drive_folder_id: Optional[str] = None
    filing_date: Optional[datetime] = None
    deadline_date: Optional[datetime] = None
    completion_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(
        cls, case: Case, people: Optional[Dict[Any, User]] = None
    ) -> "CaseResponse":
        people = people or {}
        client = people.get(case.client_id)
        staff = people.get(case.assigned_staff_id) if case.assigned_staff_id else None
        return cls(
            id=str(case.id),
            organization_id=str(case.organization_id),
            case_number=case.case_number,
            client_id=str(case.client_id),
            client_name=client.name if client else None,
            client_email=client.email if client else None,
            assigned_staff_id=str(case.assigned_staff_id) if case.assigned_staff_id else None,
            staff_name=staff.name if staff else None,
            case_type=case.case_type.value,
            status=case.status.value,
            priority=case.priority.value,
            title=case.title,
            description=case.description,
            progress_percentage=case.progress_percentage,
            drive_folder_id=case.drive_folder_id,
            filing_date=case.filing_date,
            deadline_date=case.deadline_date,
            completion_date=case.completion_date,
            created_at=case.created_at,
            updated_at=case.updated_at,
        )


class StageResponse(BaseModel):
    id: str
    case_id: str
    title: str
    description: Optional[str] = None
    notes: Optional[str] = None
    order_index: int
    status: str
    assigned_staff_id: Optional[str] = None
    required_documents: List[Any] = Field(default_factory=list)
    subtasks: List[Any] = Field(default_factory=list)
    completed: bool
    completed_at: Optional[datetime] = None
    due_date: Optional[datetime] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, stage: CaseStage) -> "StageResponse":
        return cls(
            id=str(stage.id),
            case_id=str(stage.case_id),
            title=stage.title,
            description=stage.description,
            notes=stage.notes,
            order_index=stage.order_index,
            status=stage.status.value,
            assigned_staff_id=str(stage.assigned_staff_id) if stage.assigned_staff_id else None,
            required_documents=stage.required_documents or [],
            subtasks=stage.subtasks or [],
            completed=stage.completed,
            completed_at=stage.completed_at,
            due_date=stage.due_date,
            created_at=stage.created_at,
        )


class CaseDetailResponse(BaseModel):
    case: CaseResponse
    stages: List[StageResponse]
    client_phone: Optional[str] = None
    country_of_origin: Optional[str] = None
    staff_email: Optional[str] = None


class CaseListResponse(BaseModel):
    cases: List[CaseResponse]


class ReminderInfo(BaseModel):
    id: str
    send_at: datetime
    status: str
    send_to: List[Any] = Field(default_factory=list)
    subject: str
    sent_at: Optional[datetime] = None
    last_error: Optional[str] = None

    @classmethod
    def from_entity(cls, reminder: Reminder) -> "ReminderInfo":
        return cls(
            id=str(reminder.id),
            send_at=reminder.send_at,
            status=reminder.status.value,
            send_to=reminder.send_to or [],
            subject=reminder.subject,
            sent_at=reminder.sent_at,
            last_error=reminder.last_error,
        )


class KeyDateResponse(BaseModel):
    id: str
    case_id: str
    title: str
    description: Optional[str] = None
    type: str
    location: Optional[str] = None
    timezone: Optional[str] = None
    duration_minutes: int
    occurs_at: datetime
    notify_by_email: bool
    notify_emails: List[Any] = Field(default_factory=list)
    remind_minutes_before: Optional[int] = None
    email_subject: Optional[str] = None
    email_body: Optional[str] = None
    reminder: Optional[ReminderInfo] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(
        cls, key_date: CaseKeyDate, reminder: Optional[Reminder] = None
    ) -> "KeyDateResponse":
        return cls(
            id=str(key_date.id),
            case_id=str(key_date.case_id),
            title=key_date.title,
            description=key_date.description,
            type=key_date.type,
            location=key_date.location,
            timezone=key_date.timezone,
            duration_minutes=key_date.duration_minutes,
            occurs_at=key_date.occurs_at,
            notify_by_email=key_date.notify_by_email,
            notify_emails=key_date.notify_emails or [],
            remind_minutes_before=key_date.remind_minutes_before,
            email_subject=key_date.email_subject,
            email_body=key_date.email_body,
            reminder=ReminderInfo.from_entity(reminder) if reminder else None,
            created_at=key_date.created_at,
            updated_at=key_date.updated_at,
        )


class KeyDateListResponse(BaseModel):
    key_dates: List[KeyDateResponse]


class DeleteKeyDateResponse(BaseModel):
    success: bool
