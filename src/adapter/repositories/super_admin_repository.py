from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.super_admin_repository import ISuperAdminRepository
from src.domain.entities import SuperAdmin


class SuperAdminRepository(ISuperAdminRepository):
    """SuperAdmin repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[SuperAdmin]:
        stmt = select(SuperAdmin).where(SuperAdmin.email == email.strip().lower())
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update(self, super_admin: SuperAdmin) -> SuperAdmin:
        self.session.add(super_admin)
        await self.session.flush()
        await self.session.refresh(super_admin)
        return super_admin
