from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities import Notification


class CreateNotificationCommand(BaseModel):
    user_id: str
    title: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)
    type: str = Field(default="general", max_length=50)
    related_case_id: Optional[str] = None


class NotificationResponse(BaseModel):
    id: str
    user_id: str
    title: str
    message: str
    type: str
    related_case_id: Optional[str] = None
    is_read: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationResponse":
        return cls(
            id=str(notification.id),
            user_id=str(notification.user_id),
            title=notification.title,
            message=notification.message,
            type=notification.type,
            related_case_id=(
                str(notification.related_case_id) if notification.related_case_id else None
            ),
            is_read=notification.is_read,
            created_at=notification.created_at,
        )


class NotificationListResponse(BaseModel):
    notifications: List[NotificationResponse]
    unread_count: int


class MarkAllReadResponse(BaseModel):
    updated: int
