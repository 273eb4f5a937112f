from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.authorization import Principal
from src.app.services.storage_service import IStorageService
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lookups import parse_uuid
from src.domain.entities import DocumentStatus
from .dtos import DocumentListResponse, DocumentResponse


class ListDocumentsUseCase:
    """
    Documents visible to the caller, newest first.

    Stored payloads get a fresh signed URL; documents without a payload keep
    their recorded file_url.
    """

    def __init__(self, uow: UnitOfWork, storage: IStorageService):
        self.uow = uow
        self.storage = storage

    async def execute(
        self,
        principal: Principal,
        case_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Result[DocumentListResponse]:
        status_filter = None
        if status:
            try:
                status_filter = DocumentStatus(status)
            except ValueError:
                return Return.err(Error("INVALID_STATUS", f"Estado inválido: {status}"))

        case_filter = None
        if case_id:
            case_filter = parse_uuid(case_id)
            if case_filter is None:
                return Return.ok(DocumentListResponse(documents=[]))

        async with self.uow:
            documents = await self.uow.documents.list(
                TenantScope.of(principal), case_id=case_filter, status=status_filter
            )

        items = []
        for document in documents:
            url = None
            if document.storage_path:
                url = await self.storage.signed_url(document.storage_path)
            items.append(DocumentResponse.from_entity(document, url))
        return Return.ok(DocumentListResponse(documents=items))
