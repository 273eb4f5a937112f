"""
Update Case Use Case

Applies a whitelisted partial update to a case.
"""

from datetime import datetime
from typing import Any, Dict

from libs.result import Error, Result, Return
from src.app.services.activity_recorder import create_notification, log_activity
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import CaseStatus, PriorityLevel
from src.app.use_cases.lookups import find_staff_member, naive_utc, parse_uuid, people_by_id
from .dtos import CaseResponse

UPDATABLE_FIELDS = (
    "status",
    "priority",
    "title",
    "description",
    "filing_date",
    "deadline_date",
    "progress_percentage",
    "assigned_staff_id",
)

STATUS_LABELS = {
    CaseStatus.pending: "pendiente",
    CaseStatus.in_progress: "en progreso",
    CaseStatus.under_review: "en revisión",
    CaseStatus.approved: "aprobado",
    CaseStatus.rejected: "rechazado",
    CaseStatus.completed: "completado",
}


class UpdateCaseUseCase:
    """
    Business Rules:
    - Only whitelisted fields are applied; an update with none of them is rejected
    - Invalid status/priority values are rejected (400), never dropped
    - status=completed stamps completion_date
    - Logs case_updated; a status change notifies the client
    - Last write wins on concurrent updates
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, case_id: str, changes: Dict[str, Any]
    ) -> Result[CaseResponse]:
        updates = {key: value for key, value in changes.items() if key in UPDATABLE_FIELDS}
        if not updates:
            return Return.err(Error("NO_FIELDS", "No hay campos válidos para actualizar"))

        if "status" in updates:
            try:
                updates["status"] = CaseStatus(updates["status"])
            except ValueError:
                return Return.err(Error("INVALID_STATUS", f"Estado inválido: {updates['status']}"))
        if "priority" in updates:
            try:
                updates["priority"] = PriorityLevel(updates["priority"])
            except ValueError:
                return Return.err(
                    Error("INVALID_PRIORITY", f"Prioridad inválida: {updates['priority']}")
                )
        if "title" in updates and not (updates["title"] or "").strip():
            return Return.err(Error("INVALID_TITLE", "El título es obligatorio"))

        parsed = parse_uuid(case_id)
        if parsed is None:
            return Return.err(Error("CASE_NOT_FOUND", "Caso no encontrado"))

        scope = TenantScope.of(principal)
        async with self.uow:
            case = await self.uow.cases.get(scope, parsed)
            if case is None:
                return Return.err(Error("CASE_NOT_FOUND", "Caso no encontrado"))

            if updates.get("assigned_staff_id") is not None:
                staff = await find_staff_member(self.uow, scope, updates["assigned_staff_id"])
                if staff is None:
                    return Return.err(Error("STAFF_NOT_FOUND", "Miembro del equipo no encontrado"))
                updates["assigned_staff_id"] = staff.id

            previous_status = case.status
            for key, value in updates.items():
                setattr(case, key, naive_utc(value))

            now = datetime.utcnow()
            if updates.get("status") == CaseStatus.completed and previous_status != CaseStatus.completed:
                case.completion_date = now
            case.updated_at = now

            await self.uow.cases.update(case)
            await self.uow.commit()

            await log_activity(
                self.uow,
                principal.organization_id,
                principal.id,
                "case_updated",
                f"Actualizó el caso {case.case_number}",
                case_id=case.id,
                metadata={"fields": sorted(updates.keys())},
            )
            if "status" in updates and case.status != previous_status:
                await create_notification(
                    self.uow,
                    principal.organization_id,
                    case.client_id,
                    "Actualización de tu caso",
                    f"El caso {case.case_number} ahora está {STATUS_LABELS[case.status]}",
                    category="case",
                    case_id=case.id,
                )
            await self.uow.commit()

            people = await people_by_id(self.uow, scope)

        return Return.ok(CaseResponse.from_entity(case, people))
