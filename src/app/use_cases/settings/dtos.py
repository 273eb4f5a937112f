"""
Organization Settings DTOs
"""

from typing import Optional

from pydantic import BaseModel

from src.domain.entities import Organization


class OrganizationSettingsResponse(BaseModel):
    id: str
    name: str
    slug: str
    domain: Optional[str] = None
    logo_url: Optional[str] = None
    support_email: Optional[str] = None
    branding: Optional[dict] = None

    @classmethod
    def from_entity(cls, organization: Organization) -> "OrganizationSettingsResponse":
        metadata = organization.org_metadata or {}
        return cls(
            id=str(organization.id),
            name=organization.name,
            slug=organization.slug,
            domain=organization.domain,
            logo_url=organization.logo_url,
            support_email=organization.support_email,
            branding=metadata.get("branding"),
        )
