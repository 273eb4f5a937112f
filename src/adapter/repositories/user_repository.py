from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository
from src.app.services.tenant_scope import TenantScope
from src.domain.entities import User, UserRole


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email.strip().lower())
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_in_scope(self, scope: TenantScope, user_id: UUID) -> Optional[User]:
        stmt = select(User).where(
            User.id == user_id, User.organization_id == scope.organization_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_in_scope(
        self,
        scope: TenantScope,
        role: Optional[UserRole] = None,
        search: Optional[str] = None,
    ) -> List[User]:
        stmt = select(User).where(User.organization_id == scope.organization_id)
        if role is not None:
            stmt = stmt.where(User.role == role)
        if search:
            pattern = f"%{search.lower()}%"
            stmt = stmt.where(
                or_(func.lower(User.name).like(pattern), func.lower(User.email).like(pattern))
            )
        stmt = stmt.order_by(User.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user
