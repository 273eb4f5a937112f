from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import CaseStatus
from src.app.use_cases.lookups import parse_uuid, people_by_id
from .dtos import CaseListResponse, CaseResponse


class ListCasesUseCase:
    """
    List cases visible to the caller, newest first.

    Clients only ever see their own cases; admin and staff see every case
    of their organization.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        status: Optional[str] = None,
        client_id: Optional[str] = None,
    ) -> Result[CaseListResponse]:
        status_filter = None
        if status:
            try:
                status_filter = CaseStatus(status)
            except ValueError:
                return Return.err(Error("INVALID_STATUS", f"Estado inválido: {status}"))

        client_filter = None
        if client_id:
            client_filter = parse_uuid(client_id)
            if client_filter is None:
                # Unknown client in scope: nothing to show
                return Return.ok(CaseListResponse(cases=[]))

        scope = TenantScope.of(principal)
        async with self.uow:
            cases = await self.uow.cases.list(scope, status=status_filter, client_id=client_filter)
            people = await people_by_id(self.uow, scope)

        return Return.ok(
            CaseListResponse(cases=[CaseResponse.from_entity(c, people) for c in cases])
        )
