"""
Superadmin Console DTOs
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, EmailStr, Field

from src.domain.entities import Organization


class SuperAdminInfo(BaseModel):
    id: str
    email: str


class SuperAdminLoginResponse(BaseModel):
    token: str
    superadmin: SuperAdminInfo


class TenantInfo(BaseModel):
    id: str
    name: str
    slug: str
    domain: Optional[str] = None
    logo_url: Optional[str] = None
    is_active: bool
    created_at: datetime
    user_count: int = 0

    @classmethod
    def from_entity(cls, organization: Organization, user_count: int = 0) -> "TenantInfo":
        return cls(
            id=str(organization.id),
            name=organization.name,
            slug=organization.slug,
            domain=organization.domain,
            logo_url=organization.logo_url,
            is_active=organization.is_active,
            created_at=organization.created_at,
            user_count=user_count,
        )


class TenantListResponse(BaseModel):
    tenants: List[TenantInfo]


class CreateTenantCommand(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str
    admin_name: Optional[str] = None
    palette: str = "ocean"
    logo_url: Optional[str] = None


class TenantAdminInfo(BaseModel):
    id: str
    email: str
    role: str


class CreateTenantResponse(BaseModel):
    organization: TenantInfo
    admin: TenantAdminInfo
    preset: str


class UpdateTenantCommand(BaseModel):
    is_active: bool


class OrganizationSummary(BaseModel):
    id: str
    name: str
    slug: str
    domain: Optional[str] = None
    is_active: bool
    created_at: datetime
    last_activity_at: Optional[datetime] = None
    admin_count: int = 0
    staff_count: int = 0
    client_count: int = 0
    case_count: int = 0


class OrganizationListResponse(BaseModel):
    organizations: List[OrganizationSummary]


class OrganizationDetailResponse(BaseModel):
    organization: TenantInfo
    last_activity_at: Optional[datetime] = None
    users_by_role: Dict[str, int]
    case_count: int
    open_cases: int
    cases_by_status: Dict[str, int]
    cases_by_type: Dict[str, int]
    document_count: int
    documents_by_status: Dict[str, int]
    messages_last_30_days: int


class PlatformDashboardResponse(BaseModel):
    organizations: int
    active_organizations: int
    users: int
    cases: int
    documents: int
    messages: int
