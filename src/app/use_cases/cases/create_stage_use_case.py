from libs.result import Error, Result, Return
from src.app.services.activity_recorder import log_activity
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import CaseStage
from src.app.use_cases.lookups import find_staff_member, naive_utc, parse_uuid
from .dtos import CreateStageCommand, StageResponse


class CreateStageUseCase:
    """Append a stage (milestone) to a case; order_index defaults to the end"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, case_id: str, command: CreateStageCommand
    ) -> Result[StageResponse]:
        parsed = parse_uuid(case_id)
        if parsed is None:
            return Return.err(Error("CASE_NOT_FOUND", "Caso no encontrado"))

        scope = TenantScope.of(principal)
        async with self.uow:
            case = await self.uow.cases.get(scope, parsed)
            if case is None:
                return Return.err(Error("CASE_NOT_FOUND", "Caso no encontrado"))

            assigned_staff_id = None
            if command.assigned_staff_id:
                staff = await find_staff_member(self.uow, scope, command.assigned_staff_id)
                if staff is None:
                    return Return.err(Error("STAFF_NOT_FOUND", "Miembro del equipo no encontrado"))
                assigned_staff_id = staff.id

            order_index = command.order_index
            if order_index is None:
                existing = await self.uow.case_stages.list_for_case(scope, case.id)
                order_index = len(existing)

            stage = await self.uow.case_stages.create(
                CaseStage(
                    organization_id=principal.organization_id,
                    case_id=case.id,
                    title=command.title.strip(),
                    description=command.description,
                    notes=command.notes,
                    order_index=order_index,
                    due_date=naive_utc(command.due_date),
                    assigned_staff_id=assigned_staff_id,
                    required_documents=command.required_documents,
                    subtasks=command.subtasks,
                )
            )
            await self.uow.commit()

            await log_activity(
                self.uow,
                principal.organization_id,
                principal.id,
                "case_stage_created",
                f"Agregó la etapa {stage.title}",
                case_id=case.id,
                metadata={"stage_id": str(stage.id)},
            )
            await self.uow.commit()

        return Return.ok(StageResponse.from_entity(stage))
