from fastapi import APIRouter, Depends, Query, status

from src.api.error import raise_for_error
from src.app.services.authorization import Principal
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.notifications import (
    CreateNotificationCommand,
    CreateNotificationUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkAllReadResponse,
    MarkNotificationReadUseCase,
    NotificationListResponse,
    NotificationResponse,
)
from src.depends import get_principal, get_unit_of_work, require_staff

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", status_code=status.HTTP_200_OK, response_model=NotificationListResponse)
async def list_notifications(
    unread_only: bool = Query(False),
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Own notifications, newest first (50 max)"""
    result = await ListNotificationsUseCase(uow).execute(principal, unread_only)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=NotificationResponse)
async def create_notification(
    request: CreateNotificationCommand,
    principal: Principal = Depends(require_staff),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateNotificationUseCase(uow).execute(principal, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/read-all", status_code=status.HTTP_200_OK, response_model=MarkAllReadResponse)
async def mark_all_read(
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await MarkAllNotificationsReadUseCase(uow).execute(principal)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{notification_id}/read", status_code=status.HTTP_200_OK, response_model=NotificationResponse
)
async def mark_read(
    notification_id: str,
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await MarkNotificationReadUseCase(uow).execute(principal, notification_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
