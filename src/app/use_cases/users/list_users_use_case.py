from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserInfo
from src.domain.entities import UserRole
from .dtos import UserListResponse


class ListUsersUseCase:
    """Users of the caller's organization, newest first, optionally by role"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, role: Optional[str] = None
    ) -> Result[UserListResponse]:
        role_filter = None
        if role:
            try:
                role_filter = UserRole(role)
            except ValueError:
                return Return.err(Error("INVALID_ROLE", f"Rol inválido: {role}"))

        async with self.uow:
            users = await self.uow.users.list_in_scope(TenantScope.of(principal), role=role_filter)

        return Return.ok(UserListResponse(users=[UserInfo.from_entity(u) for u in users]))
