"""
Organization settings routes
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.app.services.authorization import Principal
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.settings import (
    GetOrganizationSettingsUseCase,
    OrganizationSettingsResponse,
    UpdateOrganizationSettingsUseCase,
)
from src.depends import get_principal, get_unit_of_work, require_admin

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get(
    "/organization", status_code=status.HTTP_200_OK, response_model=OrganizationSettingsResponse
)
async def get_organization_settings(
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetOrganizationSettingsUseCase(uow).execute(principal)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class UpdateOrganizationSettingsRequest(BaseModel):
    name: Optional[str] = Field(default=None, max_length=255)
    slug: Optional[str] = Field(default=None, max_length=100)
    support_email: Optional[EmailStr] = None
    logo_url: Optional[str] = Field(default=None, max_length=1024)
    preset: Optional[str] = None


@router.patch(
    "/organization", status_code=status.HTTP_200_OK, response_model=OrganizationSettingsResponse
)
async def update_organization_settings(
    request: UpdateOrganizationSettingsRequest,
    principal: Principal = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update name, slug, support email, logo or palette preset

    Raises:
        - 400 Bad Request: No updatable field, blank name, reserved slug or
          unknown preset
        - 403 Forbidden: Caller is not an admin
        - 409 Conflict: Slug used by another organization
    """
    result = await UpdateOrganizationSettingsUseCase(uow).execute(
        principal, request.model_dump(exclude_unset=True)
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
