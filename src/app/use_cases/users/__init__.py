"""
User Administration Use Cases
"""

from .dtos import CreateUserCommand, CreateUserResponse, UserListResponse
from .list_users_use_case import ListUsersUseCase
from .create_user_use_case import CreateUserUseCase, generate_temporary_password
from .update_user_use_case import UpdateUserUseCase

__all__ = [
    "ListUsersUseCase",
    "CreateUserUseCase",
    "UpdateUserUseCase",
    "generate_temporary_password",
    "CreateUserCommand",
    "CreateUserResponse",
    "UserListResponse",
]
