"""
Document Entity

A required or uploaded file attached to a case.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import DocumentStatus


class Document(SQLModel, table=True):
    """
    Document entity.

    Business Rules:
    - Created either as a requirement (pending, no payload) or by upload (submitted)
    - storage_path points into object storage; file_url is a signed/public link
    - Status transitions are driven by staff review
    """

    __tablename__ = "documents"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)
    case_id: UUID = Field(foreign_key="cases.id", nullable=False, index=True)
    uploaded_by: Optional[UUID] = Field(default=None, foreign_key="users.id")

    name: str = Field(max_length=255)
    description: Optional[str] = None
    category: Optional[str] = Field(default=None, max_length=100)
    status: DocumentStatus = Field(default=DocumentStatus.pending)
    is_required: bool = Field(default=False)
    review_notes: Optional[str] = None

    storage_path: Optional[str] = Field(default=None, max_length=1024)
    file_url: Optional[str] = Field(default=None, max_length=2048)
    file_size: Optional[int] = None
    mime_type: Optional[str] = Field(default=None, max_length=255)

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_document_org_created", "organization_id", "created_at"),)
