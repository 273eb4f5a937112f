"""
Message Use Cases
"""

from .dtos import MessageListResponse, MessageResponse, SendMessageCommand
from .list_messages_use_case import ListMessagesUseCase
from .send_message_use_case import SendMessageUseCase
from .mark_message_read_use_case import MarkMessageReadUseCase

__all__ = [
    "ListMessagesUseCase",
    "SendMessageUseCase",
    "MarkMessageReadUseCase",
    "MessageListResponse",
    "MessageResponse",
    "SendMessageCommand",
]
