"""
Update Stage Use Case

Whitelisted partial update of a case stage.
"""

from datetime import datetime
from typing import Any, Dict

from libs.result import Error, Result, Return
from src.app.services.activity_recorder import log_activity
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import StageStatus
from src.app.use_cases.lookups import find_staff_member, naive_utc, parse_uuid
from .dtos import StageResponse

UPDATABLE_FIELDS = (
    "title",
    "description",
    "due_date",
    "status",
    "assigned_staff_id",
    "notes",
    "required_documents",
    "subtasks",
)


class UpdateStageUseCase:
    """
    Business Rules:
    - Only whitelisted fields are applied; an update with none of them is rejected
    - An unknown status is rejected with INVALID_STATUS
    - status=completed sets completed/completed_at, any other status clears them
    - Logs case_stage_updated
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        case_id: str,
        stage_id: str,
        changes: Dict[str, Any],
    ) -> Result[StageResponse]:
        updates = {key: value for key, value in changes.items() if key in UPDATABLE_FIELDS}
        if not updates:
            return Return.err(Error("NO_FIELDS", "No hay campos válidos para actualizar"))

        if "status" in updates:
            try:
                updates["status"] = StageStatus(updates["status"])
            except ValueError:
                return Return.err(
                    Error("INVALID_STATUS", f"Estado de etapa inválido: {updates['status']}")
                )

        parsed_case = parse_uuid(case_id)
        parsed_stage = parse_uuid(stage_id)
        if parsed_case is None or parsed_stage is None:
            return Return.err(Error("STAGE_NOT_FOUND", "Etapa no encontrada"))

        scope = TenantScope.of(principal)
        async with self.uow:
            stage = await self.uow.case_stages.get(scope, parsed_case, parsed_stage)
            if stage is None:
                return Return.err(Error("STAGE_NOT_FOUND", "Etapa no encontrada"))

            if updates.get("assigned_staff_id") is not None:
                staff = await find_staff_member(self.uow, scope, updates["assigned_staff_id"])
                if staff is None:
                    return Return.err(Error("STAFF_NOT_FOUND", "Miembro del equipo no encontrado"))
                updates["assigned_staff_id"] = staff.id

            for key, value in updates.items():
                setattr(stage, key, naive_utc(value))

            if "status" in updates:
                if stage.status == StageStatus.completed:
                    stage.completed = True
                    stage.completed_at = datetime.utcnow()
                else:
                    stage.completed = False
                    stage.completed_at = None

            await self.uow.case_stages.update(stage)
            await self.uow.commit()

            await log_activity(
                self.uow,
                principal.organization_id,
                principal.id,
                "case_stage_updated",
                f"Actualizó la etapa {stage.title}",
                case_id=stage.case_id,
                metadata={"stage_id": str(stage.id), "fields": sorted(updates.keys())},
            )
            await self.uow.commit()

        return Return.ok(StageResponse.from_entity(stage))
