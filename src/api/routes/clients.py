"""
Client directory routes (admin and staff)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.api.error import raise_for_error
from src.app.services.authorization import Principal
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.clients import (
    ClientDetailResponse,
    ClientListResponse,
    CreateClientCommand,
    CreateClientResponse,
    CreateClientUseCase,
    GetClientUseCase,
    ListClientsUseCase,
)
from src.depends import get_unit_of_work, require_staff

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.get("", status_code=status.HTTP_200_OK, response_model=ClientListResponse)
async def list_clients(
    search: Optional[str] = Query(None, max_length=100),
    principal: Principal = Depends(require_staff),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Clients of the organization with their case count and unread notifications"""
    result = await ListClientsUseCase(uow).execute(principal, search)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreateClientResponse)
async def create_client(
    request: CreateClientCommand,
    principal: Principal = Depends(require_staff),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Register a client; the temporary password is returned once

    Raises:
        - 409 Conflict: Email already in use
    """
    result = await CreateClientUseCase(uow).execute(principal, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{client_id}", status_code=status.HTTP_200_OK, response_model=ClientDetailResponse)
async def get_client(
    client_id: str,
    principal: Principal = Depends(require_staff),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Client with their cases, stages and documents

    Raises:
        - 404 Not Found: No client with this id in the organization
    """
    result = await GetClientUseCase(uow).execute(principal, client_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
