"""
Client Directory Use Cases

Staff-facing view of the firm's clients.
"""

from .dtos import (
    ClientDetailResponse,
    ClientListResponse,
    CreateClientCommand,
    CreateClientResponse,
)
from .list_clients_use_case import ListClientsUseCase
from .create_client_use_case import CreateClientUseCase
from .get_client_use_case import GetClientUseCase

__all__ = [
    "ListClientsUseCase",
    "CreateClientUseCase",
    "GetClientUseCase",
    "ClientDetailResponse",
    "ClientListResponse",
    "CreateClientCommand",
    "CreateClientResponse",
]
