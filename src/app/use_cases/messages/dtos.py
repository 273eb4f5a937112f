from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from src.domain.entities import Message, User


class SendMessageCommand(BaseModel):
    case_id: str
    receiver_id: str
    subject: Optional[str] = Field(default=None, max_length=255)
    content: str = Field(..., min_length=1)


class MessageResponse(BaseModel):
    id: str
    case_id: str
    sender_id: str
    sender_name: Optional[str] = None
    receiver_id: str
    receiver_name: Optional[str] = None
    subject: Optional[str] = None
    content: str
    status: str
    read_at: Optional[datetime] = None
    created_at: datetime

    @classmethod
    def from_entity(
        cls, message: Message, people: Optional[Dict[Any, User]] = None
    ) -> "MessageResponse":
        people = people or {}
        sender = people.get(message.sender_id)
        receiver = people.get(message.receiver_id)
        return cls(
            id=str(message.id),
            case_id=str(message.case_id),
            sender_id=str(message.sender_id),
            sender_name=sender.name if sender else None,
            receiver_id=str(message.receiver_id),
            receiver_name=receiver.name if receiver else None,
            subject=message.subject,
            content=message.content,
            status=message.status.value,
            read_at=message.read_at,
            created_at=message.created_at,
        )


class MessageListResponse(BaseModel):
    messages: List[MessageResponse]
