"""
Document Use Cases
"""

from .dtos import (
    DeleteDocumentResponse,
    DocumentListResponse,
    DocumentResponse,
    RequestDocumentCommand,
    UploadDocumentCommand,
)
from .list_documents_use_case import ListDocumentsUseCase
from .upload_document_use_case import UploadDocumentUseCase
from .request_document_use_case import RequestDocumentUseCase
from .update_document_use_case import UpdateDocumentUseCase, STATUS_MESSAGES
from .delete_document_use_case import DeleteDocumentUseCase

__all__ = [
    "ListDocumentsUseCase",
    "UploadDocumentUseCase",
    "RequestDocumentUseCase",
    "UpdateDocumentUseCase",
    "DeleteDocumentUseCase",
    "STATUS_MESSAGES",
    "DeleteDocumentResponse",
    "DocumentListResponse",
    "DocumentResponse",
    "RequestDocumentCommand",
    "UploadDocumentCommand",
]
