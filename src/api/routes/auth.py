from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.api.utils.session import client_ip, create_session, destroy_session
from src.app.services.authorization import Principal
from src.app.services.rate_limiter import IRateLimiter, enforce_rate_limit
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    ChangePasswordResponse,
    ChangePasswordUseCase,
    GetMeUseCase,
    LoginResponse,
    LoginUseCase,
    MeResponse,
)
from src.depends import get_principal, get_rate_limiter, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Validates incoming login request.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    http_request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    rate_limiter: IRateLimiter = Depends(get_rate_limiter),
):
    """
    User Login

    Authenticates a tenant user, sets the session cookie and also returns the
    token in the body for bearer clients.

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 403 Forbidden: Organization deactivated
        - 429 Too Many Requests: Too many attempts from this IP
    """
    limited = enforce_rate_limit(rate_limiter, "login", None, client_ip(http_request))
    if limited.is_err():
        raise_for_error(limited.error)

    result = await LoginUseCase(uow).execute(request.email, request.password)
    if result.is_err():
        raise_for_error(result.error)

    login_result = result.value
    token = create_session(login_result.user, response)
    return LoginResponse(
        access_token=token, user=login_result.user, organization=login_result.organization
    )


@router.post("/logout", status_code=status.HTTP_200_OK)
async def logout(response: Response):
    """Clear the session cookie. Tokens are stateless and expire on their own."""
    destroy_session(response)
    return {"ok": True}


@router.get("/me", status_code=status.HTTP_200_OK, response_model=MeResponse)
async def me(
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current user and organization

    Raises:
        - 401 Unauthorized: No valid session
    """
    result = await GetMeUseCase(uow).execute(principal)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8, description="New password (min 8 chars)")


password_router = APIRouter(prefix="/users", tags=["Users"])


@password_router.post(
    "/password", status_code=status.HTTP_200_OK, response_model=ChangePasswordResponse
)
async def change_password(
    request: ChangePasswordRequest,
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change own password

    Raises:
        - 400 Bad Request: Wrong current password or weak new password
        - 401 Unauthorized: No valid session
    """
    result = await ChangePasswordUseCase(uow).execute(
        principal, request.current_password, request.new_password
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
