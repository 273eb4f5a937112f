import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lookups import parse_uuid
from .dtos import TenantInfo, UpdateTenantCommand

logger = logging.getLogger(__name__)


class UpdateTenantUseCase:
    """Activate or deactivate an organization. Organizations are never deleted."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, organization_id, command: UpdateTenantCommand) -> Result[TenantInfo]:
        parsed = parse_uuid(organization_id)
        if parsed is None:
            return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organización no encontrada"))

        async with self.uow:
            organization = await self.uow.organizations.get_by_id(parsed)
            if organization is None:
                return Return.err(Error("ORGANIZATION_NOT_FOUND", "Organización no encontrada"))

            organization.is_active = command.is_active
            organization = await self.uow.organizations.update(organization)
            await self.uow.commit()

        logger.info(
            f"Organization {organization.id} {'activated' if command.is_active else 'deactivated'}"
        )
        return Return.ok(TenantInfo.from_entity(organization))
