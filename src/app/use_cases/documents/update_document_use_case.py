"""
Update Document Use Case

Review decision on a document: status, review notes and the required flag.
"""

from datetime import datetime
from typing import Any, Dict

from libs.result import Error, Result, Return
from src.app.services.activity_recorder import create_notification, log_activity
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lookups import parse_uuid
from src.domain.entities import DocumentStatus
from .dtos import DocumentResponse

STATUS_MESSAGES = {
    DocumentStatus.approved: "fue verificado correctamente",
    DocumentStatus.rejected: "fue rechazado",
    DocumentStatus.requires_action: "requiere cambios",
    DocumentStatus.submitted: "se registró",
    DocumentStatus.pending: "se marcó como pendiente",
}


class UpdateDocumentUseCase:
    """
    Business Rules:
    - Admin/staff only (Role Gate)
    - status must be a known document status (400 otherwise)
    - Every successful call carrying a status logs exactly one
      document_status_updated and notifies the case's client once;
      repeated calls with the same status each produce their own pair
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, document_id: str, changes: Dict[str, Any]
    ) -> Result[DocumentResponse]:
        status = None
        if changes.get("status"):
            try:
                status = DocumentStatus(changes["status"])
            except ValueError:
                return Return.err(Error("INVALID_STATUS", f"Estado inválido: {changes['status']}"))

        has_notes = "review_notes" in changes
        has_required = "is_required" in changes and changes["is_required"] is not None
        if status is None and not has_notes and not has_required:
            return Return.err(Error("NO_FIELDS", "No hay campos para actualizar"))

        parsed = parse_uuid(document_id)
        if parsed is None:
            return Return.err(Error("DOCUMENT_NOT_FOUND", "Documento no encontrado"))

        scope = TenantScope.of(principal)
        async with self.uow:
            document = await self.uow.documents.get(scope, parsed)
            if document is None:
                return Return.err(Error("DOCUMENT_NOT_FOUND", "Documento no encontrado"))

            if status is not None:
                document.status = status
            if has_notes:
                document.review_notes = changes["review_notes"] or None
            if has_required:
                document.is_required = bool(changes["is_required"])
            document.updated_at = datetime.utcnow()

            document = await self.uow.documents.update(document)
            await self.uow.commit()

            if status is not None:
                case = await self.uow.cases.get(scope, document.case_id)
                await log_activity(
                    self.uow,
                    principal.organization_id,
                    principal.id,
                    "document_status_updated",
                    f"Actualizó {document.name} a {status.value}",
                    case_id=document.case_id,
                    metadata={"document_id": str(document.id), "status": status.value},
                )
                if case is not None:
                    message = STATUS_MESSAGES.get(status, "fue actualizado")
                    await create_notification(
                        self.uow,
                        principal.organization_id,
                        case.client_id,
                        "Estado de documento actualizado",
                        f'Tu documento "{document.name}" {message}.',
                        category="document",
                        case_id=case.id,
                    )
                await self.uow.commit()

        return Return.ok(DocumentResponse.from_entity(document))
