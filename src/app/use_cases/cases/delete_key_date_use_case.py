from libs.result import Error, Result, Return
from src.app.services.activity_recorder import log_activity
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lookups import parse_uuid
from .dtos import DeleteKeyDateResponse


class DeleteKeyDateUseCase:
    """Delete a key date together with its reminders, sent or pending"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, case_id: str, key_date_id: str
    ) -> Result[DeleteKeyDateResponse]:
        parsed_case = parse_uuid(case_id)
        parsed_key_date = parse_uuid(key_date_id)
        if parsed_case is None or parsed_key_date is None:
            return Return.err(Error("KEY_DATE_NOT_FOUND", "Fecha clave no encontrada"))

        async with self.uow:
            key_date = await self.uow.key_dates.get(
                TenantScope.of(principal), parsed_case, parsed_key_date
            )
            if key_date is None:
                return Return.err(Error("KEY_DATE_NOT_FOUND", "Fecha clave no encontrada"))

            title = key_date.title
            await self.uow.reminders.delete_for_key_date(principal.organization_id, key_date.id)
            await self.uow.key_dates.delete(key_date)
            await self.uow.commit()

            await log_activity(
                self.uow,
                principal.organization_id,
                principal.id,
                "case_key_date_deleted",
                f"Eliminó {title}",
                case_id=parsed_case,
                metadata={"key_date_id": str(parsed_key_date)},
            )
            await self.uow.commit()

        return Return.ok(DeleteKeyDateResponse(success=True))
