"""
Update Key Date Use Case

Partial update of a key date; its reminder follows the new schedule.
"""

from datetime import datetime
from typing import Any, Dict

from libs.result import Error, Result, Return
from src.app.services.activity_recorder import log_activity
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lookups import naive_utc, parse_uuid
from .dtos import KeyDateResponse
from .key_date_reminders import (
    build_reminder,
    clean,
    clean_recipients,
    duration_minutes,
    remind_minutes,
    reschedule,
)

UPDATABLE_FIELDS = (
    "title",
    "description",
    "type",
    "location",
    "timezone",
    "duration_minutes",
    "occurs_at",
    "notify_by_email",
    "notify_emails",
    "remind_minutes_before",
    "email_subject",
    "email_body",
)
TEXT_FIELDS = ("description", "location", "timezone", "email_subject", "email_body")


class UpdateKeyDateUseCase:
    """
    Business Rules:
    - Only whitelisted fields are applied; an update with none of them is rejected
    - Title cannot be blanked; duration keeps its 15 minute floor and
      remind_minutes_before its 5 minute floor
    - Afterwards the reminder is reconciled with the key date:
      * notifying with recipients and a reminder exists: rescheduled and re-armed
        (status back to scheduled, sent_at and last_error cleared)
      * notifying with recipients and no reminder: one is created
      * not notifying: the reminder is removed
    - Stamps updated_at/updated_by and logs case_key_date_updated
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        principal: Principal,
        case_id: str,
        key_date_id: str,
        changes: Dict[str, Any],
    ) -> Result[KeyDateResponse]:
        updates = {key: value for key, value in changes.items() if key in UPDATABLE_FIELDS}
        if not updates:
            return Return.err(Error("NO_FIELDS", "No hay campos válidos para actualizar"))

        if "title" in updates:
            updates["title"] = clean(updates["title"])
            if not updates["title"]:
                return Return.err(Error("INVALID_TITLE", "El título es obligatorio"))
        if "occurs_at" in updates and updates["occurs_at"] is None:
            return Return.err(Error("INVALID_DATE", "La fecha es obligatoria"))
        for key in TEXT_FIELDS:
            if key in updates:
                updates[key] = clean(updates[key])
        if "type" in updates:
            updates["type"] = clean(updates["type"]) or "appointment"
        if "duration_minutes" in updates:
            updates["duration_minutes"] = duration_minutes(updates["duration_minutes"])
        if "remind_minutes_before" in updates:
            updates["remind_minutes_before"] = remind_minutes(updates["remind_minutes_before"])
        if "notify_emails" in updates:
            updates["notify_emails"] = clean_recipients(updates["notify_emails"])
        if "notify_by_email" in updates:
            updates["notify_by_email"] = bool(updates["notify_by_email"])

        parsed_case = parse_uuid(case_id)
        parsed_key_date = parse_uuid(key_date_id)
        if parsed_case is None or parsed_key_date is None:
            return Return.err(Error("KEY_DATE_NOT_FOUND", "Fecha clave no encontrada"))

        scope = TenantScope.of(principal)
        async with self.uow:
            case = await self.uow.cases.get(scope, parsed_case)
            key_date = (
                await self.uow.key_dates.get(scope, parsed_case, parsed_key_date)
                if case is not None
                else None
            )
            if key_date is None:
                return Return.err(Error("KEY_DATE_NOT_FOUND", "Fecha clave no encontrada"))

            for key, value in updates.items():
                setattr(key_date, key, naive_utc(value))

            recipients = key_date.notify_emails or []
            key_date.notify_by_email = bool(key_date.notify_by_email and recipients)
            if not key_date.notify_by_email:
                key_date.notify_emails = None
            key_date.updated_at = datetime.utcnow()
            key_date.updated_by = principal.id
            await self.uow.key_dates.update(key_date)

            reminder = await self.uow.reminders.get_for_key_date(
                principal.organization_id, key_date.id
            )
            if key_date.notify_by_email:
                if reminder is None:
                    reminder = await self.uow.reminders.create(build_reminder(key_date, case))
                else:
                    reminder = await self.uow.reminders.update(
                        reschedule(reminder, key_date, case)
                    )
            elif reminder is not None:
                await self.uow.reminders.delete_for_key_date(
                    principal.organization_id, key_date.id
                )
                reminder = None

            await self.uow.commit()

            await log_activity(
                self.uow,
                principal.organization_id,
                principal.id,
                "case_key_date_updated",
                f"Actualizó {key_date.title}",
                case_id=key_date.case_id,
                metadata={"key_date_id": str(key_date.id), "fields": sorted(updates.keys())},
            )
            await self.uow.commit()

        return Return.ok(KeyDateResponse.from_entity(key_date, reminder))

