from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.app.services.tenant_scope import TenantScope
from src.domain.entities import User, UserRole


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address (login and uniqueness checks only)"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID (own record of an authenticated principal)"""
        pass

    @abstractmethod
    async def get_in_scope(self, scope: TenantScope, user_id: UUID) -> Optional[User]:
        """Get a user of the caller's organization"""
        pass

    @abstractmethod
    async def list_in_scope(
        self,
        scope: TenantScope,
        role: Optional[UserRole] = None,
        search: Optional[str] = None,
    ) -> List[User]:
        """Users of the caller's organization, newest first; search matches name or email"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass
