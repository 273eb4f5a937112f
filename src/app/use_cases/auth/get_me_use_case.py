from libs.result import Error, Result, Return
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from .dtos import MeResponse, OrganizationInfo, UserInfo


class GetMeUseCase:
    """Load the caller's user and organization"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal) -> Result[MeResponse]:
        async with self.uow:
            user = await self.uow.users.get_in_scope(TenantScope.of(principal), principal.id)
            if user is None:
                return Return.err(Error("UNAUTHORIZED", "Sesión no válida o expirada"))

            organization = await self.uow.organizations.get_by_id(principal.organization_id)
            if organization is None:
                return Return.err(Error("UNAUTHORIZED", "Sesión no válida o expirada"))

            return Return.ok(
                MeResponse(
                    user=UserInfo.from_entity(user),
                    organization=OrganizationInfo.from_entity(organization),
                )
            )
