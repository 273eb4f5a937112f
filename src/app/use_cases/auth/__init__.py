"""
Authentication Use Cases

Login, current user and password change.
"""

from .dtos import (
    ChangePasswordResponse,
    LoginResponse,
    LoginResult,
    MeResponse,
    OrganizationInfo,
    UserInfo,
)
from .login_use_case import LoginUseCase
from .get_me_use_case import GetMeUseCase
from .change_password_use_case import ChangePasswordUseCase

__all__ = [
    "LoginUseCase",
    "GetMeUseCase",
    "ChangePasswordUseCase",
    "LoginResult",
    "LoginResponse",
    "MeResponse",
    "ChangePasswordResponse",
    "OrganizationInfo",
    "UserInfo",
]
