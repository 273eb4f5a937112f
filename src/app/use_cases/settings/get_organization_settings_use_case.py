from libs.result import Error, Result, Return
from src.app.services.authorization import Principal
from src.app.services.unit_of_work import UnitOfWork
from .dtos import OrganizationSettingsResponse


class GetOrganizationSettingsUseCase:
    """Name, slug, contact and branding of the caller's organization"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal) -> Result[OrganizationSettingsResponse]:
        async with self.uow:
            organization = await self.uow.organizations.get_by_id(principal.organization_id)

        if organization is None:
            return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organización no encontrada"))
        return Return.ok(OrganizationSettingsResponse.from_entity(organization))
