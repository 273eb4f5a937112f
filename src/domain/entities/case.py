"""
Case Entity

An immigration case owned by one client and handled by staff.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import CaseStatus, CaseType, PriorityLevel


class Case(SQLModel, table=True):
    """
    Case entity.

    Business Rules:
    - Visible to its client, and to admin/staff of the same organization
    - case_number is a human identifier, unique inside the organization
    - completion_date is stamped when status becomes completed
    """

    __tablename__ = "cases"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)

    case_number: str = Field(max_length=32)
    client_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    assigned_staff_id: Optional[UUID] = Field(default=None, foreign_key="users.id")

    case_type: CaseType = Field(default=CaseType.other)
    status: CaseStatus = Field(default=CaseStatus.pending)
    priority: PriorityLevel = Field(default=PriorityLevel.medium)
    title: str = Field(max_length=255)
    description: Optional[str] = None
    progress_percentage: int = Field(default=0)

    drive_folder_id: Optional[str] = Field(default=None, max_length=255)

    filing_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    deadline_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    completion_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_case_org_number", "organization_id", "case_number", unique=True),
        Index("idx_case_org_status", "organization_id", "status"),
    )
