"""
User Entity

A person belonging to exactly one organization.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import UserRole


class User(SQLModel, table=True):
    """
    User entity - admin, staff or client of one organization.

    Business Rules:
    - Email is unique and stored lower-cased
    - Password stored as bcrypt hash (cost factor 12)
    - Role decides which route classes are reachable
    - Inactive users cannot log in and their sessions stop resolving
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", nullable=False, index=True)

    email: str = Field(unique=True, index=True, max_length=255)
    name: str = Field(max_length=255)
    role: UserRole = Field(nullable=False)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    phone: Optional[str] = Field(default=None, max_length=50)
    country_of_origin: Optional[str] = Field(default=None, max_length=100)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_org_role", "organization_id", "role"),)
