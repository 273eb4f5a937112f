"""
Reminder Entity

Scheduled email reminder for a case key date.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from .enums import ReminderStatus


class Reminder(SQLModel, table=True):
    """
    Reminder entity.

    Business Rules:
    - scheduled -> sent on delivery, scheduled -> failed on any error
    - failed is terminal; the dispatcher never retries it
    - provider_message_id is persisted once sent
    """

    __tablename__ = "reminders"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)
    case_id: UUID = Field(foreign_key="cases.id", nullable=False)
    key_date_id: UUID = Field(foreign_key="case_key_dates.id", nullable=False)

    send_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    status: ReminderStatus = Field(default=ReminderStatus.scheduled)
    send_to: Optional[list] = Field(default=None, sa_column=Column(JSON))
    subject: str = Field(max_length=255)
    body: Optional[str] = None

    provider_message_id: Optional[str] = Field(default=None, max_length=255)
    last_error: Optional[str] = None
    sent_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_reminder_status_send_at", "status", "send_at"),)
