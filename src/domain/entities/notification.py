"""
Notification Entity

User-facing inbox entry created alongside state changes.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class Notification(SQLModel, table=True):
    __tablename__ = "notifications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False)

    title: str = Field(max_length=255)
    message: str
    type: str = Field(default="general", max_length=50)
    related_case_id: Optional[UUID] = Field(default=None, foreign_key="cases.id")
    is_read: bool = Field(default=False)

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_notification_user_read", "user_id", "is_read"),)
