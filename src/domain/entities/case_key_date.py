"""
CaseKeyDate Entity

Appointment, hearing or deadline attached to a case.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, JSON, SQLModel


class CaseKeyDate(SQLModel, table=True):
    __tablename__ = "case_key_dates"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)
    case_id: UUID = Field(foreign_key="cases.id", nullable=False, index=True)

    title: str = Field(max_length=255)
    description: Optional[str] = None
    type: str = Field(default="appointment", max_length=50)
    location: Optional[str] = Field(default=None, max_length=255)
    timezone: Optional[str] = Field(default=None, max_length=64)
    duration_minutes: int = Field(default=60)

    occurs_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    notify_by_email: bool = Field(default=False)
    notify_emails: Optional[list] = Field(default=None, sa_column=Column(JSON))
    remind_minutes_before: Optional[int] = None
    email_subject: Optional[str] = Field(default=None, max_length=255)
    email_body: Optional[str] = None

    created_by: Optional[UUID] = Field(default=None, foreign_key="users.id")
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_by: Optional[UUID] = Field(default=None, foreign_key="users.id")
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
