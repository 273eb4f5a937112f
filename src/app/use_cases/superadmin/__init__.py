"""
Superadmin Console Use Cases

Platform operations outside of any organization.
"""

from .dtos import (
    CreateTenantCommand,
    CreateTenantResponse,
    OrganizationDetailResponse,
    OrganizationListResponse,
    PlatformDashboardResponse,
    SuperAdminInfo,
    SuperAdminLoginResponse,
    TenantInfo,
    TenantListResponse,
    UpdateTenantCommand,
)
from .login_use_case import SuperAdminLoginUseCase
from .list_tenants_use_case import ListTenantsUseCase
from .create_tenant_use_case import CreateTenantUseCase, is_strong_password, slugify
from .update_tenant_use_case import UpdateTenantUseCase
from .list_organizations_use_case import ListOrganizationsUseCase
from .get_organization_use_case import GetOrganizationUseCase
from .get_platform_dashboard_use_case import GetPlatformDashboardUseCase

__all__ = [
    "SuperAdminLoginUseCase",
    "ListTenantsUseCase",
    "CreateTenantUseCase",
    "UpdateTenantUseCase",
    "ListOrganizationsUseCase",
    "GetOrganizationUseCase",
    "GetPlatformDashboardUseCase",
    "slugify",
    "is_strong_password",
    "CreateTenantCommand",
    "CreateTenantResponse",
    "OrganizationDetailResponse",
    "OrganizationListResponse",
    "PlatformDashboardResponse",
    "SuperAdminInfo",
    "SuperAdminLoginResponse",
    "TenantInfo",
    "TenantListResponse",
    "UpdateTenantCommand",
]
