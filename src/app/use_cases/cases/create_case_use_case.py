"""
Create Case Use Case

Opens a new case for a client of the caller's organization.
"""

import asyncio
import logging
import random
from datetime import datetime

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.app.repositories.case_repository import CaseNumberConflict
from src.app.services.activity_recorder import create_notification, log_activity
from src.app.services.authorization import Principal
from src.app.services.drive_service import IDriveService
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Case, CaseType, Document, DocumentStatus, PriorityLevel, UserRole
from src.app.use_cases.lookups import find_staff_member, naive_utc, parse_uuid
from .dtos import CaseResponse, CreateCaseCommand

logger = logging.getLogger(__name__)

CASE_NUMBER_ATTEMPTS = 5


def generate_case_number(case_type: CaseType, now: datetime) -> str:
    """XXX-YYYY-NNNN: first three letters of the case type, year, random digits"""
    prefix = (case_type.value or "cas")[:3].upper()
    return f"{prefix}-{now.year}-{random.randint(0, 9999):04d}"


class CreateCaseUseCase:
    """
    Use case for opening a case.

    Business Rules:
    - Only admin/staff (enforced by the Role Gate before execute)
    - The client must be a client-role user of the same organization
    - Assigned staff defaults to the creator
    - Case number XXX-YYYY-NNNN, unique within the organization: numbers in
      use are skipped up front and an insert that loses a race is retried
      with a fresh number
    - Initial required documents are created as pending requirements
    - Drive folder provisioning is best-effort and bounded by a timeout:
      the case is created even when Drive fails
    - Logs case_created and notifies the client
    """

    def __init__(self, uow: UnitOfWork, drive: IDriveService):
        self.uow = uow
        self.drive = drive

    async def execute(
        self, principal: Principal, command: CreateCaseCommand
    ) -> Result[CaseResponse]:
        try:
            case_type = CaseType(command.case_type)
        except ValueError:
            return Return.err(Error("INVALID_CASE_TYPE", f"Tipo de caso inválido: {command.case_type}"))
        try:
            priority = PriorityLevel(command.priority)
        except ValueError:
            return Return.err(Error("INVALID_PRIORITY", f"Prioridad inválida: {command.priority}"))

        scope = TenantScope.of(principal)
        async with self.uow:
            client_id = parse_uuid(command.client_id)
            client = await self.uow.users.get_in_scope(scope, client_id) if client_id else None
            if client is None or client.role != UserRole.client:
                return Return.err(Error("CLIENT_NOT_FOUND", "Cliente no encontrado"))

            assigned_staff_id = principal.id
            if command.assigned_staff_id:
                staff = await find_staff_member(self.uow, scope, command.assigned_staff_id)
                if staff is None:
                    return Return.err(Error("STAFF_NOT_FOUND", "Miembro del equipo no encontrado"))
                assigned_staff_id = staff.id

            now = datetime.utcnow()
            case_number = generate_case_number(case_type, now)
            for _ in range(CASE_NUMBER_ATTEMPTS - 1):
                if not await self.uow.cases.case_number_exists(principal.organization_id, case_number):
                    break
                case_number = generate_case_number(case_type, now)

            case = Case(
                organization_id=principal.organization_id,
                case_number=case_number,
                client_id=client.id,
                assigned_staff_id=assigned_staff_id,
                case_type=case_type,
                priority=priority,
                title=command.title.strip(),
                description=command.description,
                filing_date=naive_utc(command.filing_date),
                deadline_date=naive_utc(command.deadline_date),
            )
            for _ in range(CASE_NUMBER_ATTEMPTS):
                try:
                    case = await self.uow.cases.create(case)
                    break
                except CaseNumberConflict:
                    logger.warning(f"Case number {case.case_number} taken on insert, retrying")
                    case.case_number = generate_case_number(case_type, now)
            else:
                return Return.err(
                    Error("CASE_NUMBER_CONFLICT", "No se pudo asignar un número de caso")
                )
            case_number = case.case_number

            seen = set()
            for name in command.required_documents:
                normalized = (name or "").strip()
                if not normalized or normalized.lower() in seen:
                    continue
                seen.add(normalized.lower())
                await self.uow.documents.create(
                    Document(
                        organization_id=principal.organization_id,
                        case_id=case.id,
                        name=normalized,
                        is_required=True,
                        status=DocumentStatus.pending,
                    )
                )

            await self.uow.commit()

            folder_id = await self._provision_drive_folder(case_number, client.name)
            if folder_id:
                case.drive_folder_id = folder_id
                await self.uow.cases.update(case)
                await self.uow.commit()

            await log_activity(
                self.uow,
                principal.organization_id,
                principal.id,
                "case_created",
                f"Creó el caso {case_number}",
                case_id=case.id,
            )
            await create_notification(
                self.uow,
                principal.organization_id,
                client.id,
                "Nuevo caso creado",
                f"Se abrió el caso {case_number}: {case.title}",
                category="case",
                case_id=case.id,
            )
            await self.uow.commit()

            return Return.ok(CaseResponse.from_entity(case, {client.id: client}))

    async def _provision_drive_folder(self, case_number: str, client_name: str):
        try:
            return await asyncio.wait_for(
                self.drive.ensure_case_folder(case_number, client_name),
                timeout=ApplicationConfig.EXTERNAL_TIMEOUT_SECONDS,
            )
        except Exception as exc:
            logger.warning(f"Drive folder provisioning failed for case {case_number}: {exc}")
            return None
