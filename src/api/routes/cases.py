"""
Case API Routes

Case records, their stages and key dates. Reads are tenant scoped; clients
only ever see their own cases. Mutations are reserved to admin/staff.
"""

from datetime import datetime
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.authorization import Principal
from src.app.services.drive_service import IDriveService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.cases import (
    CaseDetailResponse,
    CaseListResponse,
    CaseResponse,
    CreateCaseCommand,
    CreateCaseUseCase,
    CreateKeyDateCommand,
    CreateKeyDateUseCase,
    CreateStageCommand,
    CreateStageUseCase,
    DeleteKeyDateResponse,
    DeleteKeyDateUseCase,
    GetCaseUseCase,
    KeyDateListResponse,
    KeyDateResponse,
    ListCasesUseCase,
    ListKeyDatesUseCase,
    StageResponse,
    UpdateCaseUseCase,
    UpdateKeyDateUseCase,
    UpdateStageUseCase,
)
from src.depends import get_drive_service, get_principal, get_unit_of_work, require_staff

router = APIRouter(prefix="/cases", tags=["Cases"])


@router.get("", status_code=status.HTTP_200_OK, response_model=CaseListResponse)
async def list_cases(
    status_filter: Optional[str] = Query(None, alias="status"),
    client_id: Optional[str] = Query(None),
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List cases visible to the caller, newest first

    Raises:
        - 400 Bad Request: Unknown status
        - 401 Unauthorized: No valid session
    """
    result = await ListCasesUseCase(uow).execute(principal, status_filter, client_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CaseResponse)
async def create_case(
    request: CreateCaseCommand,
    principal: Principal = Depends(require_staff),
    uow: UnitOfWork = Depends(get_unit_of_work),
    drive: IDriveService = Depends(get_drive_service),
):
    """
    Create a case for a client of the organization

    Raises:
        - 400 Bad Request: Unknown case type or priority
        - 403 Forbidden: Caller is a client
        - 404 Not Found: Client or assigned staff not in this organization
    """
    result = await CreateCaseUseCase(uow, drive).execute(principal, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{case_id}", status_code=status.HTTP_200_OK, response_model=CaseDetailResponse)
async def get_case(
    case_id: str,
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Case detail with stages ordered by order_index

    Raises:
        - 404 Not Found: Case missing or not visible to the caller
    """
    result = await GetCaseUseCase(uow).execute(principal, case_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class UpdateCaseRequest(BaseModel):
    status: Optional[str] = None
    priority: Optional[str] = None
    title: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    filing_date: Optional[datetime] = None
    deadline_date: Optional[datetime] = None
    progress_percentage: Optional[int] = Field(default=None, ge=0, le=100)
    assigned_staff_id: Optional[str] = None


@router.patch("/{case_id}", status_code=status.HTTP_200_OK, response_model=CaseResponse)
async def update_case(
    case_id: str,
    request: UpdateCaseRequest,
    principal: Principal = Depends(require_staff),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update whitelisted case fields

    Raises:
        - 400 Bad Request: No updatable field, or invalid status/priority
        - 403 Forbidden: Caller is a client
        - 404 Not Found: Case not in this organization
    """
    result = await UpdateCaseUseCase(uow).execute(
        principal, case_id, request.model_dump(exclude_unset=True)
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{case_id}/stages", status_code=status.HTTP_201_CREATED, response_model=StageResponse
)
async def create_stage(
    case_id: str,
    request: CreateStageCommand,
    principal: Principal = Depends(require_staff),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateStageUseCase(uow).execute(principal, case_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class UpdateStageRequest(BaseModel):
    title: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    status: Optional[str] = None
    assigned_staff_id: Optional[str] = None
    notes: Optional[str] = None
    required_documents: Optional[List[Any]] = None
    subtasks: Optional[List[Any]] = None


@router.patch(
    "/{case_id}/stages/{stage_id}",
    status_code=status.HTTP_200_OK,
    response_model=StageResponse,
)
async def update_stage(
    case_id: str,
    stage_id: str,
    request: UpdateStageRequest,
    principal: Principal = Depends(require_staff),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update whitelisted stage fields

    Raises:
        - 400 Bad Request: No updatable field, or invalid status
        - 404 Not Found: Case or stage not in this organization
    """
    result = await UpdateStageUseCase(uow).execute(
        principal, case_id, stage_id, request.model_dump(exclude_unset=True)
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{case_id}/key-dates", status_code=status.HTTP_200_OK, response_model=KeyDateListResponse
)
async def list_key_dates(
    case_id: str,
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListKeyDatesUseCase(uow).execute(principal, case_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{case_id}/key-dates", status_code=status.HTTP_201_CREATED, response_model=KeyDateResponse
)
async def create_key_date(
    case_id: str,
    request: CreateKeyDateCommand,
    principal: Principal = Depends(require_staff),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add an appointment, hearing or deadline

    A reminder email is scheduled when notify_by_email is set and recipients
    are given.

    Raises:
        - 400 Bad Request: Missing title
        - 404 Not Found: Case not in this organization
    """
    result = await CreateKeyDateUseCase(uow).execute(principal, case_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class RecipientRequest(BaseModel):
    email: str
    name: Optional[str] = None


class UpdateKeyDateRequest(BaseModel):
    title: Optional[str] = Field(default=None, max_length=255)
    occurs_at: Optional[datetime] = None
    description: Optional[str] = None
    type: Optional[str] = None
    location: Optional[str] = None
    timezone: Optional[str] = None
    duration_minutes: Optional[int] = None
    notify_by_email: Optional[bool] = None
    notify_emails: Optional[List[RecipientRequest]] = None
    remind_minutes_before: Optional[int] = None
    email_subject: Optional[str] = None
    email_body: Optional[str] = None


@router.patch(
    "/{case_id}/key-dates/{key_date_id}",
    status_code=status.HTTP_200_OK,
    response_model=KeyDateResponse,
)
async def update_key_date(
    case_id: str,
    key_date_id: str,
    request: UpdateKeyDateRequest,
    principal: Principal = Depends(require_staff),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update a key date and reschedule its reminder

    Raises:
        - 400 Bad Request: No updatable field, blank title or missing date
        - 404 Not Found: Case or key date not in this organization
    """
    result = await UpdateKeyDateUseCase(uow).execute(
        principal, case_id, key_date_id, request.model_dump(exclude_unset=True)
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{case_id}/key-dates/{key_date_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteKeyDateResponse,
)
async def delete_key_date(
    case_id: str,
    key_date_id: str,
    principal: Principal = Depends(require_staff),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteKeyDateUseCase(uow).execute(principal, case_id, key_date_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
