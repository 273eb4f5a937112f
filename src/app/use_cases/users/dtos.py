"""
User Administration DTOs
"""

from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from src.app.use_cases.auth.dtos import UserInfo


class CreateUserCommand(BaseModel):
    email: EmailStr
    name: str = Field(..., min_length=1, max_length=255)
    role: str
    phone: Optional[str] = None
    country_of_origin: Optional[str] = None
    password: Optional[str] = Field(default=None, min_length=8)


class CreateUserResponse(BaseModel):
    user: UserInfo
    temporary_password: Optional[str] = None


class UserListResponse(BaseModel):
    users: List[UserInfo]
