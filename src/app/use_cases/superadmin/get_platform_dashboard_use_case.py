from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import PlatformDashboardResponse


class GetPlatformDashboardUseCase:
    """Platform-wide totals"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[PlatformDashboardResponse]:
        async with self.uow:
            totals = await self.uow.metrics.platform_totals()
        return Return.ok(PlatformDashboardResponse(**totals))
