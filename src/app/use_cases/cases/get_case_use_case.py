from libs.result import Error, Result, Return
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lookups import parse_uuid, people_by_id
from .dtos import CaseDetailResponse, CaseResponse, StageResponse


class GetCaseUseCase:
    """Case detail with its stages ordered by order_index"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal, case_id: str) -> Result[CaseDetailResponse]:
        parsed = parse_uuid(case_id)
        if parsed is None:
            return Return.err(Error("CASE_NOT_FOUND", "Caso no encontrado"))

        scope = TenantScope.of(principal)
        async with self.uow:
            case = await self.uow.cases.get(scope, parsed)
            if case is None:
                return Return.err(Error("CASE_NOT_FOUND", "Caso no encontrado"))

            stages = await self.uow.case_stages.list_for_case(scope, case.id)
            people = await people_by_id(self.uow, scope)

        client = people.get(case.client_id)
        staff = people.get(case.assigned_staff_id) if case.assigned_staff_id else None
        return Return.ok(
            CaseDetailResponse(
                case=CaseResponse.from_entity(case, people),
                stages=[StageResponse.from_entity(s) for s in stages],
                client_phone=client.phone if client else None,
                country_of_origin=client.country_of_origin if client else None,
                staff_email=staff.email if staff else None,
            )
        )
