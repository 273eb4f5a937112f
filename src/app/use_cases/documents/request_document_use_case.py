from libs.result import Error, Result, Return
from src.app.services.activity_recorder import create_notification, log_activity
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lookups import parse_uuid
from src.domain.entities import Document, DocumentStatus
from .dtos import DocumentResponse, RequestDocumentCommand


class RequestDocumentUseCase:
    """
    Ask the client of a case for a document.

    Creates a required, pending document, logs document_required and
    notifies the client.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, command: RequestDocumentCommand
    ) -> Result[DocumentResponse]:
        case_id = parse_uuid(command.case_id)
        if case_id is None:
            return Return.err(Error("CASE_NOT_FOUND", "Caso no encontrado"))

        name = command.name.strip()
        scope = TenantScope.of(principal)
        async with self.uow:
            case = await self.uow.cases.get(scope, case_id)
            if case is None:
                return Return.err(Error("CASE_NOT_FOUND", "Caso no encontrado"))

            document = await self.uow.documents.create(
                Document(
                    organization_id=principal.organization_id,
                    case_id=case.id,
                    name=name,
                    description=command.description,
                    category=command.category,
                    is_required=True,
                    status=DocumentStatus.pending,
                )
            )
            await self.uow.commit()

            requester = await self.uow.users.get_in_scope(scope, principal.id)
            requester_name = requester.name if requester else "Tu asesor"
            await log_activity(
                self.uow,
                principal.organization_id,
                principal.id,
                "document_required",
                f"Marcó {name} como requerido",
                case_id=case.id,
                metadata={"document_id": str(document.id)},
            )
            await create_notification(
                self.uow,
                principal.organization_id,
                case.client_id,
                "Nuevo documento requerido",
                f'{requester_name} necesita el documento "{name}" para el caso {case.case_number}',
                category="document",
                case_id=case.id,
            )
            await self.uow.commit()

        return Return.ok(DocumentResponse.from_entity(document))
