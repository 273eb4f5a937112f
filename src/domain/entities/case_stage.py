"""
CaseStage Entity

Ordered milestone inside a case.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, JSON, SQLModel

from .enums import StageStatus


class CaseStage(SQLModel, table=True):
    __tablename__ = "case_stages"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)
    case_id: UUID = Field(foreign_key="cases.id", nullable=False, index=True)

    title: str = Field(max_length=255)
    description: Optional[str] = None
    notes: Optional[str] = None
    order_index: int = Field(default=0)
    status: StageStatus = Field(default=StageStatus.pending)
    assigned_staff_id: Optional[UUID] = Field(default=None, foreign_key="users.id")

    required_documents: Optional[list] = Field(default=None, sa_column=Column(JSON))
    subtasks: Optional[list] = Field(default=None, sa_column=Column(JSON))

    completed: bool = Field(default=False)
    completed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    due_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
