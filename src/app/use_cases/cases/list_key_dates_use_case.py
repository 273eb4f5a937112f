from libs.result import Error, Result, Return
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lookups import parse_uuid
from .dtos import KeyDateListResponse, KeyDateResponse


class ListKeyDatesUseCase:
    """Key dates of a case, soonest first, each with its reminder if any"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal, case_id: str) -> Result[KeyDateListResponse]:
        parsed = parse_uuid(case_id)
        if parsed is None:
            return Return.err(Error("CASE_NOT_FOUND", "Caso no encontrado"))

        scope = TenantScope.of(principal)
        async with self.uow:
            case = await self.uow.cases.get(scope, parsed)
            if case is None:
                return Return.err(Error("CASE_NOT_FOUND", "Caso no encontrado"))

            key_dates = await self.uow.key_dates.list_for_case(scope, case.id)
            reminders = await self.uow.reminders.list_for_case(scope, case.id)

        by_key_date = {reminder.key_date_id: reminder for reminder in reminders}
        return Return.ok(
            KeyDateListResponse(
                key_dates=[
                    KeyDateResponse.from_entity(kd, by_key_date.get(kd.id)) for kd in key_dates
                ]
            )
        )
