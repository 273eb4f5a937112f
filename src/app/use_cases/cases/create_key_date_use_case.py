"""
Create Key Date Use Case

Records an appointment or deadline of a case and, when requested,
schedules its email reminder.
"""

from libs.result import Error, Result, Return
from src.app.services.activity_recorder import log_activity
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import CaseKeyDate
from src.app.use_cases.lookups import naive_utc, parse_uuid
from .dtos import CreateKeyDateCommand, KeyDateResponse
from .key_date_reminders import (
    build_reminder,
    clean,
    clean_recipients,
    duration_minutes,
    remind_minutes,
)


class CreateKeyDateUseCase:
    """
    Business Rules:
    - Title and occurs_at are required
    - Duration defaults to 60 minutes, minimum 15
    - A reminder is scheduled only when notify_by_email is set and at least one
      recipient is given
    - Reminder send_at = occurs_at - remind_minutes_before (default 1440, min 5);
      a send_at already in the past is moved to one minute from now
    - Logs case_key_date_created
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, case_id: str, command: CreateKeyDateCommand
    ) -> Result[KeyDateResponse]:
        title = clean(command.title)
        if not title:
            return Return.err(Error("INVALID_TITLE", "El título es obligatorio"))

        parsed = parse_uuid(case_id)
        if parsed is None:
            return Return.err(Error("CASE_NOT_FOUND", "Caso no encontrado"))

        recipients = clean_recipients(r.model_dump() for r in command.notify_emails)
        notify_by_email = bool(command.notify_by_email and recipients)

        scope = TenantScope.of(principal)
        async with self.uow:
            case = await self.uow.cases.get(scope, parsed)
            if case is None:
                return Return.err(Error("CASE_NOT_FOUND", "Caso no encontrado"))

            key_date = await self.uow.key_dates.create(
                CaseKeyDate(
                    organization_id=principal.organization_id,
                    case_id=case.id,
                    title=title,
                    description=clean(command.description),
                    type=clean(command.type) or "appointment",
                    location=clean(command.location),
                    timezone=clean(command.timezone),
                    duration_minutes=duration_minutes(command.duration_minutes),
                    occurs_at=naive_utc(command.occurs_at),
                    notify_by_email=notify_by_email,
                    notify_emails=recipients if notify_by_email else None,
                    remind_minutes_before=remind_minutes(command.remind_minutes_before),
                    email_subject=clean(command.email_subject),
                    email_body=clean(command.email_body),
                    created_by=principal.id,
                )
            )

            reminder = None
            if notify_by_email:
                reminder = await self.uow.reminders.create(build_reminder(key_date, case))

            await self.uow.commit()

            await log_activity(
                self.uow,
                principal.organization_id,
                principal.id,
                "case_key_date_created",
                f"Agregó {title}",
                case_id=case.id,
                metadata={"key_date_id": str(key_date.id)},
            )
            await self.uow.commit()

        return Return.ok(KeyDateResponse.from_entity(key_date, reminder))
