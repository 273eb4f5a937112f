"""
Upload Document Use Case

Stores a file for a case and records it as a submitted document.
"""

import logging
from datetime import datetime

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.app.services.activity_recorder import create_notification, log_activity
from src.app.services.authorization import Principal
from src.app.services.rate_limiter import (
    IRateLimiter,
    enforce_rate_limit,
    is_demo_organization,
)
from src.app.services.storage_service import IStorageService
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lookups import parse_uuid
from src.domain.entities import Document, DocumentStatus
from .dtos import DocumentResponse, UploadDocumentCommand

logger = logging.getLogger(__name__)


class UploadDocumentUseCase:
    """
    Use case for document upload.

    Business Rules:
    - Any role with access to the case may upload (clients only to their own cases)
    - Payload size is capped (413) and its content type whitelisted (415)
    - Rate limited per tenant and user; demo tenants also have a daily cap
    - The payload is stored first; a storage failure fails the upload (502)
      and writes nothing
    - With document_id the upload fulfils that existing requirement,
      otherwise a new document row is created; status becomes submitted
    - Logs document_uploaded; a client upload notifies the assigned staff,
      a staff upload notifies the client
    """

    def __init__(self, uow: UnitOfWork, storage: IStorageService, rate_limiter: IRateLimiter):
        self.uow = uow
        self.storage = storage
        self.rate_limiter = rate_limiter

    async def execute(
        self, principal: Principal, command: UploadDocumentCommand
    ) -> Result[DocumentResponse]:
        name = (command.name or "").strip()
        if not name:
            return Return.err(Error("MISSING_FIELDS", "Faltan campos obligatorios"))
        if len(command.content) > ApplicationConfig.MAX_UPLOAD_BYTES:
            return Return.err(Error("FILE_TOO_LARGE", "Documento demasiado grande"))
        if command.content_type not in ApplicationConfig.ALLOWED_UPLOAD_TYPES:
            return Return.err(
                Error("UNSUPPORTED_MEDIA_TYPE", "Tipo de archivo no permitido")
            )

        case_id = parse_uuid(command.case_id)
        if case_id is None:
            return Return.err(Error("CASE_NOT_FOUND", "Caso no encontrado"))

        scope = TenantScope.of(principal)
        async with self.uow:
            case = await self.uow.cases.get(scope, case_id)
            if case is None:
                return Return.err(Error("CASE_NOT_FOUND", "Caso no encontrado"))

            existing = None
            if command.document_id:
                document_id = parse_uuid(command.document_id)
                existing = await self.uow.documents.get(scope, document_id) if document_id else None
                if existing is None or existing.case_id != case.id:
                    return Return.err(
                        Error("DOCUMENT_NOT_FOUND", "Referencia de documento inválida")
                    )

            organization = await self.uow.organizations.get_by_id(principal.organization_id)
            limited = enforce_rate_limit(
                self.rate_limiter,
                "document_upload",
                principal.organization_id,
                str(principal.id),
                organization,
            )
            if limited.is_err():
                return Return.err(limited.error)

            if is_demo_organization(organization):
                daily_limit = int(
                    organization.demo_limits.get(
                        "daily_uploads", ApplicationConfig.DEMO_DAILY_UPLOAD_LIMIT
                    )
                )
                start_of_day = datetime.utcnow().replace(hour=0, minute=0, second=0, microsecond=0)
                uploaded_today = await self.uow.documents.count_uploaded_since(scope, start_of_day)
                if uploaded_today >= daily_limit:
                    return Return.err(
                        Error("DAILY_LIMIT_REACHED", "Límite diario alcanzado", reason="3600")
                    )

            try:
                stored = await self.storage.upload_case_document(
                    principal.organization_id,
                    case.id,
                    command.file_name or name,
                    command.content,
                    command.content_type,
                    uploader_id=principal.id,
                )
            except Exception as exc:
                logger.error(f"Storage upload failed for case {case.id}: {exc}")
                return Return.err(
                    Error("STORAGE_UPLOAD_FAILED", "No pudimos guardar el archivo, intenta de nuevo")
                )

            now = datetime.utcnow()
            if existing is not None:
                existing.uploaded_by = principal.id
                existing.name = name
                if command.description:
                    existing.description = command.description
                existing.storage_path = stored.path
                existing.file_url = stored.signed_url
                existing.file_size = len(command.content)
                existing.mime_type = command.content_type
                existing.status = DocumentStatus.submitted
                existing.updated_at = now
                document = await self.uow.documents.update(existing)
            else:
                document = await self.uow.documents.create(
                    Document(
                        organization_id=principal.organization_id,
                        case_id=case.id,
                        uploaded_by=principal.id,
                        name=name,
                        description=command.description,
                        category=command.category,
                        status=DocumentStatus.submitted,
                        is_required=False,
                        storage_path=stored.path,
                        file_url=stored.signed_url,
                        file_size=len(command.content),
                        mime_type=command.content_type,
                    )
                )
            await self.uow.commit()

            await log_activity(
                self.uow,
                principal.organization_id,
                principal.id,
                "document_uploaded",
                f"Subió {name}",
                case_id=case.id,
                metadata={"document_id": str(document.id)},
            )
            if principal.is_client:
                if case.assigned_staff_id:
                    uploader = await self.uow.users.get_in_scope(scope, principal.id)
                    uploader_name = uploader.name if uploader else "El cliente"
                    await create_notification(
                        self.uow,
                        principal.organization_id,
                        case.assigned_staff_id,
                        "Nuevo documento enviado",
                        f"{uploader_name} subió {name} para el caso {case.case_number}",
                        category="document",
                        case_id=case.id,
                    )
            else:
                await create_notification(
                    self.uow,
                    principal.organization_id,
                    case.client_id,
                    "Documento disponible",
                    f"Se agregó {name} a tu expediente {case.case_number}",
                    category="document",
                    case_id=case.id,
                )
            await self.uow.commit()

        return Return.ok(DocumentResponse.from_entity(document))
