"""
AI Document Review Use Case

Sends a document to the review agent webhook together with a staff prompt.
"""

import base64
import logging
from typing import Any, Dict

from libs.result import Error, Result, Return
from src.app.services.authorization import Principal
from src.app.services.document_review_service import (
    DocumentReviewError,
    IDocumentReviewService,
)
from src.app.services.rate_limiter import IRateLimiter, enforce_rate_limit
from src.app.services.storage_service import IStorageService
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lookups import parse_uuid
from .dtos import ReviewDocumentCommand, ReviewDocumentResponse

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/pdf"
EMPTY_ANSWER = "No recibimos detalles del agente."


def _pdf_file_name(name: str) -> str:
    return name if name.lower().endswith(".pdf") else f"{name}.pdf"


class ReviewDocumentUseCase:
    """
    Business Rules:
    - Admin/staff only (Role Gate)
    - prompt is required
    - The file comes inline (base64) or from the stored payload of a
      document visible to the caller
    - Rate limited per tenant and user
    - Webhook unconfigured -> 500, unreachable or non-2xx -> 502
    """

    def __init__(
        self,
        uow: UnitOfWork,
        storage: IStorageService,
        review_service: IDocumentReviewService,
        rate_limiter: IRateLimiter,
    ):
        self.uow = uow
        self.storage = storage
        self.review_service = review_service
        self.rate_limiter = rate_limiter

    async def execute(
        self, principal: Principal, command: ReviewDocumentCommand
    ) -> Result[ReviewDocumentResponse]:
        prompt = (command.prompt or "").strip()
        if not prompt:
            return Return.err(Error("MISSING_PROMPT", "Debes indicar un prompt para la IA."))

        if not self.review_service.is_configured:
            return Return.err(
                Error("REVIEW_NOT_CONFIGURED", "El agente de IA no está configurado.")
            )

        scope = TenantScope.of(principal)
        file_base64 = command.file_base64
        file_name = command.file_name or "documento"
        file_type = command.file_type or DEFAULT_MIME_TYPE
        case_id = command.case_id

        async with self.uow:
            organization = await self.uow.organizations.get_by_id(principal.organization_id)
            limited = enforce_rate_limit(
                self.rate_limiter,
                "document_review",
                principal.organization_id,
                str(principal.id),
                organization,
            )
            if limited.is_err():
                return Return.err(limited.error)

            if command.document_id:
                document_id = parse_uuid(command.document_id)
                document = (
                    await self.uow.documents.get(scope, document_id) if document_id else None
                )
                if document is None:
                    return Return.err(Error("DOCUMENT_NOT_FOUND", "Documento no encontrado."))
                if not document.storage_path:
                    return Return.err(
                        Error(
                            "DOCUMENT_HAS_NO_FILE",
                            "Este documento no tiene un archivo asociado.",
                        )
                    )
                try:
                    content = await self.storage.download(document.storage_path)
                except Exception as exc:
                    logger.error(f"Download of {document.storage_path} failed: {exc}")
                    return Return.err(
                        Error(
                            "DOCUMENT_DOWNLOAD_FAILED",
                            "No pudimos descargar el archivo desde el almacenamiento de documentos.",
                        )
                    )
                file_base64 = base64.b64encode(content).decode("ascii")
                file_name = _pdf_file_name(document.name)
                file_type = document.mime_type or DEFAULT_MIME_TYPE
                case_id = case_id or str(document.case_id)

            if not file_base64:
                return Return.err(Error("MISSING_FILE", "Falta el archivo a analizar."))

            requester = await self.uow.users.get_in_scope(scope, principal.id)

        payload: Dict[str, Any] = {
            "prompt": prompt,
            "file_name": file_name,
            "file_type": file_type,
            "file_base64": file_base64,
            "case_id": case_id,
            "document_id": command.document_id,
            "requested_by": str(principal.id),
            "requested_by_name": requester.name if requester else None,
        }

        try:
            answer = await self.review_service.review(payload)
        except DocumentReviewError as exc:
            logger.warning(f"Document review failed: {exc} {exc.details}")
            return Return.err(Error("REVIEW_FAILED", str(exc), reason=exc.details or None))

        result = None
        if isinstance(answer, dict):
            result = answer.get("result") or answer.get("message")
        return Return.ok(ReviewDocumentResponse(result=result or EMPTY_ANSWER, raw=answer))
