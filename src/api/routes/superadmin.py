"""
Superadmin Console Routes

Platform operator endpoints. Authentication uses a superadmin token,
never a tenant session.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.api.utils.jwt import generate_superadmin_jwt
from src.api.utils.superadmin_auth import SUPERADMIN_COOKIE_NAME, require_superadmin
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.superadmin import (
    CreateTenantCommand,
    CreateTenantResponse,
    CreateTenantUseCase,
    GetOrganizationUseCase,
    GetPlatformDashboardUseCase,
    ListOrganizationsUseCase,
    ListTenantsUseCase,
    OrganizationDetailResponse,
    OrganizationListResponse,
    PlatformDashboardResponse,
    SuperAdminLoginResponse,
    SuperAdminLoginUseCase,
    TenantInfo,
    TenantListResponse,
    UpdateTenantCommand,
    UpdateTenantUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/superadmin", tags=["Superadmin"])


class SuperAdminLoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


@router.post("/login", status_code=status.HTTP_200_OK, response_model=SuperAdminLoginResponse)
async def login(
    request: SuperAdminLoginRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Superadmin login

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 403 Forbidden: Account blocked
    """
    result = await SuperAdminLoginUseCase(uow).execute(request.email, request.password)
    if result.is_err():
        raise_for_error(result.error)

    admin = result.value
    token = generate_superadmin_jwt(admin.id, admin.email)
    response.set_cookie(
        SUPERADMIN_COOKIE_NAME,
        token,
        max_age=ApplicationConfig.SUPERADMIN_TOKEN_TTL_SECONDS,
        httponly=True,
        secure=ApplicationConfig.SESSION_COOKIE_SECURE,
        samesite="lax",
        path="/",
    )
    return SuperAdminLoginResponse(token=token, superadmin=admin)


@router.get(
    "/tenants",
    status_code=status.HTTP_200_OK,
    response_model=TenantListResponse,
    dependencies=[Depends(require_superadmin)],
)
async def list_tenants(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await ListTenantsUseCase(uow).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/tenants",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateTenantResponse,
    dependencies=[Depends(require_superadmin)],
)
async def create_tenant(
    request: CreateTenantCommand, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Create an organization and its first admin

    Raises:
        - 400 Bad Request: Password policy not met
        - 409 Conflict: Admin email already in use
    """
    result = await CreateTenantUseCase(uow).execute(request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/tenants/{organization_id}",
    status_code=status.HTTP_200_OK,
    response_model=TenantInfo,
    dependencies=[Depends(require_superadmin)],
)
async def update_tenant(
    organization_id: str,
    request: UpdateTenantCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Activate or deactivate an organization"""
    result = await UpdateTenantUseCase(uow).execute(organization_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/organizations",
    status_code=status.HTTP_200_OK,
    response_model=OrganizationListResponse,
    dependencies=[Depends(require_superadmin)],
)
async def list_organizations(
    status_filter: Optional[str] = Query(None, alias="status"),
    sort: Optional[str] = Query(None),
    activity: Optional[str] = Query(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListOrganizationsUseCase(uow).execute(status_filter, sort, activity)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/organizations/{organization_id}",
    status_code=status.HTTP_200_OK,
    response_model=OrganizationDetailResponse,
    dependencies=[Depends(require_superadmin)],
)
async def get_organization(organization_id: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetOrganizationUseCase(uow).execute(organization_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/dashboard",
    status_code=status.HTTP_200_OK,
    response_model=PlatformDashboardResponse,
    dependencies=[Depends(require_superadmin)],
)
async def get_dashboard(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetPlatformDashboardUseCase(uow).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value
