"""
ActivityLog Entity

Immutable audit trail of actions inside an organization.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel


class ActivityLog(SQLModel, table=True):
    """
    ActivityLog entity - append-only audit trail.

    Business Rules:
    - Immutable (never updated)
    - Only deleted by the demo tenant sweeper
    - action is an open enumeration used for display only
    """

    __tablename__ = "activity_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)
    user_id: Optional[UUID] = Field(default=None, index=True)
    case_id: Optional[UUID] = Field(default=None, index=True)

    action: str = Field(max_length=100)  # e.g., "case_created", "document_uploaded"
    description: Optional[str] = None
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_activity_org_created", "organization_id", "created_at"),
    )
