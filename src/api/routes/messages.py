from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.api.error import raise_for_error
from src.app.services.authorization import Principal
from src.app.services.rate_limiter import IRateLimiter
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.messages import (
    ListMessagesUseCase,
    MarkMessageReadUseCase,
    MessageListResponse,
    MessageResponse,
    SendMessageCommand,
    SendMessageUseCase,
)
from src.depends import get_principal, get_rate_limiter, get_unit_of_work

router = APIRouter(prefix="/messages", tags=["Messages"])


@router.get("", status_code=status.HTTP_200_OK, response_model=MessageListResponse)
async def list_messages(
    case_id: Optional[str] = Query(None),
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Messages visible to the caller

    Clients, demo tenants and staff without a case_id only see conversations
    they take part in.
    """
    result = await ListMessagesUseCase(uow).execute(principal, case_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MessageResponse)
async def send_message(
    request: SendMessageCommand,
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
    rate_limiter: IRateLimiter = Depends(get_rate_limiter),
):
    """
    Send a message about a case

    Raises:
        - 404 Not Found: Case not visible, or receiver not in this organization
        - 429 Too Many Requests: Message rate exceeded
    """
    result = await SendMessageUseCase(uow, rate_limiter).execute(principal, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch("/{message_id}", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def mark_message_read(
    message_id: str,
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Mark a received message as read (receiver only)"""
    result = await MarkMessageReadUseCase(uow).execute(principal, message_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
