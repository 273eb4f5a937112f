"""
Document Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities import Document


class UploadDocumentCommand(BaseModel):
    """Multipart upload already read into memory by the API layer"""

    case_id: str
    name: str
    file_name: str
    content_type: str
    content: bytes
    document_id: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None


class RequestDocumentCommand(BaseModel):
    case_id: str
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    category: Optional[str] = None


class DocumentResponse(BaseModel):
    id: str
    case_id: str
    uploaded_by: Optional[str] = None
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    status: str
    is_required: bool
    review_notes: Optional[str] = None
    storage_path: Optional[str] = None
    file_url: Optional[str] = None
    file_size: Optional[int] = None
    mime_type: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, document: Document, file_url: Optional[str] = None) -> "DocumentResponse":
        return cls(
            id=str(document.id),
            case_id=str(document.case_id),
            uploaded_by=str(document.uploaded_by) if document.uploaded_by else None,
            name=document.name,
            description=document.description,
            category=document.category,
            status=document.status.value,
            is_required=document.is_required,
            review_notes=document.review_notes,
            storage_path=document.storage_path,
            file_url=file_url or document.file_url,
            file_size=document.file_size,
            mime_type=document.mime_type,
            created_at=document.created_at,
            updated_at=document.updated_at,
        )


class DocumentListResponse(BaseModel):
    documents: List[DocumentResponse]


class DeleteDocumentResponse(BaseModel):
    success: bool
