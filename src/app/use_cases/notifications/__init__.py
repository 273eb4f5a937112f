"""
Notification Use Cases
"""

from .dtos import (
    CreateNotificationCommand,
    MarkAllReadResponse,
    NotificationListResponse,
    NotificationResponse,
)
from .list_notifications_use_case import ListNotificationsUseCase
from .create_notification_use_case import CreateNotificationUseCase
from .mark_notification_read_use_case import (
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
)

__all__ = [
    "ListNotificationsUseCase",
    "CreateNotificationUseCase",
    "MarkNotificationReadUseCase",
    "MarkAllNotificationsReadUseCase",
    "CreateNotificationCommand",
    "MarkAllReadResponse",
    "NotificationListResponse",
    "NotificationResponse",
]
