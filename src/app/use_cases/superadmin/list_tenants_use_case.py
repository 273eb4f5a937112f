from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import TenantInfo, TenantListResponse


class ListTenantsUseCase:
    """All organizations, newest first, with their user counts"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[TenantListResponse]:
        async with self.uow:
            organizations = await self.uow.organizations.list_all()
            roles = await self.uow.metrics.users_by_role_per_organization()

        return Return.ok(
            TenantListResponse(
                tenants=[
                    TenantInfo.from_entity(org, sum(roles.get(org.id, {}).values()))
                    for org in organizations
                ]
            )
        )
