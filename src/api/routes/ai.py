from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.authorization import Principal
from src.app.services.document_review_service import IDocumentReviewService
from src.app.services.rate_limiter import IRateLimiter
from src.app.services.storage_service import IStorageService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.ai import (
    ReviewDocumentCommand,
    ReviewDocumentResponse,
    ReviewDocumentUseCase,
)
from src.depends import (
    get_document_review_service,
    get_rate_limiter,
    get_storage,
    get_unit_of_work,
    require_staff,
)

router = APIRouter(prefix="/ai", tags=["AI"])


@router.post(
    "/document-review", status_code=status.HTTP_200_OK, response_model=ReviewDocumentResponse
)
async def review_document(
    request: ReviewDocumentCommand,
    principal: Principal = Depends(require_staff),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IStorageService = Depends(get_storage),
    review_service: IDocumentReviewService = Depends(get_document_review_service),
    rate_limiter: IRateLimiter = Depends(get_rate_limiter),
):
    """
    Ask the review agent about a document

    The file is sent inline as base64, or loaded from a stored document.

    Raises:
        - 400 Bad Request: Missing prompt or file
        - 404 Not Found: Document not in this organization
        - 429 Too Many Requests: Review rate exceeded
        - 500 Internal Server Error: Review webhook not configured
        - 502 Bad Gateway: Download or webhook failure
    """
    use_case = ReviewDocumentUseCase(uow, storage, review_service, rate_limiter)
    result = await use_case.execute(principal, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
