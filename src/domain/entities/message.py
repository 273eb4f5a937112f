"""
Message Entity

Directional message between two users about a case.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import MessageStatus


class Message(SQLModel, table=True):
    """
    Message entity.

    Business Rules:
    - Read status is only changed by the receiver
    """

    __tablename__ = "messages"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)
    case_id: UUID = Field(foreign_key="cases.id", nullable=False, index=True)
    sender_id: UUID = Field(foreign_key="users.id", nullable=False)
    receiver_id: UUID = Field(foreign_key="users.id", nullable=False)

    subject: Optional[str] = Field(default=None, max_length=255)
    content: str
    status: MessageStatus = Field(default=MessageStatus.sent)
    read_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_message_org_created", "organization_id", "created_at"),
        Index("idx_message_receiver", "receiver_id", "status"),
    )
