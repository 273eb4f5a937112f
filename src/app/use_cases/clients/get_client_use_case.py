from libs.result import Error, Result, Return
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserInfo
from src.app.use_cases.cases.dtos import CaseResponse, StageResponse
from src.app.use_cases.documents.dtos import DocumentResponse
from src.app.use_cases.lookups import parse_uuid, people_by_id
from src.domain.entities import UserRole
from .dtos import ClientCase, ClientDetailResponse


class GetClientUseCase:
    """A client with every case of theirs, each with stages and documents"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal, client_id: str) -> Result[ClientDetailResponse]:
        parsed = parse_uuid(client_id)
        if parsed is None:
            return Return.err(Error("CLIENT_NOT_FOUND", "Cliente no encontrado"))

        scope = TenantScope.of(principal)
        async with self.uow:
            client = await self.uow.users.get_in_scope(scope, parsed)
            if client is None or client.role != UserRole.client:
                return Return.err(Error("CLIENT_NOT_FOUND", "Cliente no encontrado"))

            people = await people_by_id(self.uow, scope)
            cases = []
            for case in await self.uow.cases.list(scope, client_id=client.id):
                stages = await self.uow.case_stages.list_for_case(scope, case.id)
                documents = await self.uow.documents.list(scope, case_id=case.id)
                cases.append(
                    ClientCase(
                        case=CaseResponse.from_entity(case, people),
                        stages=[StageResponse.from_entity(s) for s in stages],
                        documents=[DocumentResponse.from_entity(d) for d in documents],
                    )
                )

        return Return.ok(ClientDetailResponse(client=UserInfo.from_entity(client), cases=cases))
