from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.api.error import raise_for_error
from src.app.services.authorization import Principal
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.activity import ActivityListResponse, ListActivityUseCase
from src.depends import get_principal, get_unit_of_work

router = APIRouter(prefix="/activity", tags=["Activity"])


@router.get("", status_code=status.HTTP_200_OK, response_model=ActivityListResponse)
async def list_activity(
    case_id: Optional[str] = Query(None),
    limit: int = Query(20, ge=1, le=100),
    principal: Principal = Depends(get_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Recent activity; clients only see activity of their own cases"""
    result = await ListActivityUseCase(uow).execute(principal, case_id, limit)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
