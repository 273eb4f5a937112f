"""
User administration routes (admin only)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.app.services.authorization import Principal
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import UserInfo
from src.app.use_cases.users import (
    CreateUserCommand,
    CreateUserResponse,
    CreateUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    UserListResponse,
)
from src.depends import get_unit_of_work, require_admin

router = APIRouter(prefix="/admin/users", tags=["Users"])


@router.get("", status_code=status.HTTP_200_OK, response_model=UserListResponse)
async def list_users(
    role: Optional[str] = Query(None),
    principal: Principal = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Users of the organization, newest first

    Raises:
        - 400 Bad Request: Unknown role
        - 403 Forbidden: Caller is not an admin
    """
    result = await ListUsersUseCase(uow).execute(principal, role)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreateUserResponse)
async def create_user(
    request: CreateUserCommand,
    principal: Principal = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create a staff or client user

    A temporary password is generated and returned once when none is given.

    Raises:
        - 400 Bad Request: Unknown role
        - 409 Conflict: Email already in use
    """
    result = await CreateUserUseCase(uow).execute(principal, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class UpdateUserRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    role: Optional[str] = None
    country_of_origin: Optional[str] = None
    is_active: Optional[bool] = None


@router.patch("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    principal: Principal = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update profile fields, role or active flag of a user

    Raises:
        - 400 Bad Request: Nothing to update or unknown role
        - 403 Forbidden: Admin changing their own role or deactivating themselves
        - 404 Not Found: User not in this organization
        - 409 Conflict: Email already in use
    """
    result = await UpdateUserUseCase(uow).execute(
        principal, user_id, request.model_dump(exclude_unset=True)
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
