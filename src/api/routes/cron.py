"""
Scheduled Job Routes

Called by an external scheduler with the x-cron-key header.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.api.error import raise_for_error
from src.api.utils.cron_auth import verify_cron_key
from src.app.services.email_service import IEmailService
from src.app.services.storage_service import IStorageService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.cron import DispatchRemindersUseCase, SweepDemoTenantUseCase
from src.depends import get_email_service, get_storage, get_unit_of_work

router = APIRouter(prefix="/cron", tags=["Cron"], dependencies=[Depends(verify_cron_key)])


@router.post("/demo-clean", status_code=status.HTTP_200_OK)
async def demo_clean(
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IStorageService = Depends(get_storage),
):
    """
    Sweep demo-tenant documents, messages and notifications older than the TTL

    Raises:
        - 401 Unauthorized: Missing or wrong x-cron-key
        - 500 Internal Server Error: DEMO_ORG_ID not configured
    """
    result = await SweepDemoTenantUseCase(uow, storage).execute()
    if result.is_err():
        raise_for_error(result.error)
    return {"deleted": result.value}


@router.post("/reminders", status_code=status.HTTP_200_OK)
async def dispatch_reminders(
    organization_id: Optional[str] = Query(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
    email: IEmailService = Depends(get_email_service),
):
    """
    Send due key-date reminders

    Raises:
        - 401 Unauthorized: Missing or wrong x-cron-key
        - 500 Internal Server Error: Email provider not configured
    """
    result = await DispatchRemindersUseCase(uow, email).execute(organization_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
