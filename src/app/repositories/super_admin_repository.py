from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import SuperAdmin


class ISuperAdminRepository(ABC):
    """SuperAdmin repository interface"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[SuperAdmin]:
        pass

    @abstractmethod
    async def update(self, super_admin: SuperAdmin) -> SuperAdmin:
        pass
