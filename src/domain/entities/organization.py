"""
Organization Entity

Tenant root. Every other tenant-scoped row carries its id.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel


class Organization(SQLModel, table=True):
    """
    Organization entity - an isolated customer account.

    Business Rules:
    - Slug is unique and derived from the name
    - Deactivated (is_active=False) by a superadmin, never hard-deleted
    - org_metadata holds branding and demo flags/limits
    """

    __tablename__ = "organizations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    slug: str = Field(unique=True, index=True, max_length=255)
    domain: Optional[str] = Field(default=None, max_length=255)
    logo_url: Optional[str] = Field(default=None, max_length=1024)
    support_email: Optional[str] = Field(default=None, max_length=255)

    is_active: bool = Field(default=True)
    org_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_organization_is_active", "is_active"),)

    @property
    def is_demo(self) -> bool:
        metadata = self.org_metadata or {}
        return bool(metadata.get("is_demo"))

    @property
    def demo_limits(self) -> dict:
        metadata = self.org_metadata or {}
        return metadata.get("demo_limits") or {}
