"""
Authentication Use Case DTOs (Data Transfer Objects)

Response classes for the auth domain.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.entities import Organization, User


class UserInfo(BaseModel):
    """Public view of a user (never carries the password hash)"""

    id: str
    organization_id: str
    email: str
    name: str
    role: str
    phone: Optional[str] = None
    country_of_origin: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            organization_id=str(user.organization_id),
            email=user.email,
            name=user.name,
            role=user.role.value,
            phone=user.phone,
            country_of_origin=user.country_of_origin,
            is_active=user.is_active,
            created_at=user.created_at,
            last_login_at=user.last_login_at,
        )


class OrganizationInfo(BaseModel):
    id: str
    name: str
    slug: str
    logo_url: Optional[str] = None
    support_email: Optional[str] = None
    is_active: bool
    is_demo: bool = False
    branding: Optional[dict] = None

    @classmethod
    def from_entity(cls, organization: Organization) -> "OrganizationInfo":
        metadata = organization.org_metadata or {}
        return cls(
            id=str(organization.id),
            name=organization.name,
            slug=organization.slug,
            logo_url=organization.logo_url,
            support_email=organization.support_email,
            is_active=organization.is_active,
            is_demo=organization.is_demo,
            branding=metadata.get("branding"),
        )


class LoginResult(BaseModel):
    """Authenticated user and organization; the API layer issues the session"""

    user: UserInfo
    organization: OrganizationInfo


class LoginResponse(BaseModel):
    """Response for user login"""

    access_token: str
    user: UserInfo
    organization: OrganizationInfo


class MeResponse(BaseModel):
    user: UserInfo
    organization: OrganizationInfo


class ChangePasswordResponse(BaseModel):
    status: str
    message: str
