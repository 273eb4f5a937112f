"""
Document API Routes

Upload, request, review and delete case documents.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from pydantic import BaseModel

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.authorization import Principal
from src.app.services.rate_limiter import IRateLimiter
from src.app.services.storage_service import IStorageService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.documents import (
    DeleteDocumentResponse,
    DeleteDocumentUseCase,
    DocumentListResponse,
    DocumentResponse,
    ListDocumentsUseCase,
    RequestDocumentCommand,
    RequestDocumentUseCase,
    UpdateDocumentUseCase,
    UploadDocumentCommand,
    UploadDocumentUseCase,
)
from src.depends import (
    get_principal,
    get_rate_limiter,
    get_storage,
    get_unit_of_work,
    require_staff,
)

router = APIRouter(prefix="/documents", tags=["Documents"])


@router.get("", status_code=status.HTTP_200_OK, response_model=DocumentListResponse)
async def list_documents(
    case_id: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IStorageService = Depends(get_storage),
):
    result = await ListDocumentsUseCase(uow, storage).execute(principal, case_id, status_filter)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=DocumentResponse)
async def upload_document(
    case_id: str = Form(...),
    name: str = Form(...),
    document_id: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    file: UploadFile = File(...),
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IStorageService = Depends(get_storage),
    rate_limiter: IRateLimiter = Depends(get_rate_limiter),
):
    """
    Upload a document (multipart)

    Raises:
        - 404 Not Found: Case (or referenced requirement) not visible to the caller
        - 413 Payload Too Large: File over MAX_UPLOAD_BYTES
        - 415 Unsupported Media Type: Content type not allowed
        - 429 Too Many Requests: Upload rate or demo daily cap reached
        - 502 Bad Gateway: Object storage rejected the file
    """
    # One byte past the cap is enough to know the file is too large
    content = await file.read(ApplicationConfig.MAX_UPLOAD_BYTES + 1)
    command = UploadDocumentCommand(
        case_id=case_id,
        name=name,
        file_name=file.filename or name,
        content_type=file.content_type or "application/octet-stream",
        content=content,
        document_id=document_id or None,
        description=description,
        category=category,
    )
    result = await UploadDocumentUseCase(uow, storage, rate_limiter).execute(principal, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/request", status_code=status.HTTP_201_CREATED, response_model=DocumentResponse)
async def request_document(
    request: RequestDocumentCommand,
    principal: Principal = Depends(require_staff),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Ask the client of a case for a document"""
    result = await RequestDocumentUseCase(uow).execute(principal, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class UpdateDocumentRequest(BaseModel):
    status: Optional[str] = None
    review_notes: Optional[str] = None
    is_required: Optional[bool] = None


@router.patch("/{document_id}", status_code=status.HTTP_200_OK, response_model=DocumentResponse)
async def update_document(
    document_id: str,
    request: UpdateDocumentRequest,
    principal: Principal = Depends(require_staff),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Review a document

    Raises:
        - 400 Bad Request: Invalid status or nothing to update
        - 404 Not Found: Document not in this organization
    """
    result = await UpdateDocumentUseCase(uow).execute(
        principal, document_id, request.model_dump(exclude_unset=True)
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{document_id}", status_code=status.HTTP_200_OK, response_model=DeleteDocumentResponse
)
async def delete_document(
    document_id: str,
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IStorageService = Depends(get_storage),
):
    """
    Delete a document and its stored payload

    Staff may delete any document of the organization, a client only those
    of their own cases.
    """
    result = await DeleteDocumentUseCase(uow, storage).execute(principal, document_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
