import logging

from libs.result import Error, Result, Return
from src.app.services.activity_recorder import log_activity
from src.app.services.authorization import Principal
from src.app.services.storage_service import IStorageService
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lookups import parse_uuid
from .dtos import DeleteDocumentResponse

logger = logging.getLogger(__name__)


class DeleteDocumentUseCase:
    """
    Delete a document and its stored payload.

    Staff may delete any document of the organization, a client only those
    of their own cases. Payload removal is best-effort: the row is deleted
    even if storage refuses.
    """

    def __init__(self, uow: UnitOfWork, storage: IStorageService):
        self.uow = uow
        self.storage = storage

    async def execute(self, principal: Principal, document_id: str) -> Result[DeleteDocumentResponse]:
        parsed = parse_uuid(document_id)
        if parsed is None:
            return Return.err(Error("DOCUMENT_NOT_FOUND", "Documento no encontrado"))

        async with self.uow:
            document = await self.uow.documents.get(TenantScope.of(principal), parsed)
            if document is None:
                return Return.err(Error("DOCUMENT_NOT_FOUND", "Documento no encontrado"))

            if document.storage_path:
                try:
                    await self.storage.delete(document.storage_path)
                except Exception as exc:
                    logger.warning(
                        f"Could not delete stored payload {document.storage_path}: {exc}"
                    )

            name, case_id = document.name, document.case_id
            await self.uow.documents.delete(document)
            await self.uow.commit()

            await log_activity(
                self.uow,
                principal.organization_id,
                principal.id,
                "document_deleted",
                f"Eliminó el documento {name}",
                case_id=case_id,
                metadata={"document_id": str(parsed)},
            )
            await self.uow.commit()

        return Return.ok(DeleteDocumentResponse(success=True))
