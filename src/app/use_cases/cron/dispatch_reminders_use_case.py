"""
Reminder Dispatcher

Delivers scheduled key-date reminders whose send time has passed.
"""

import html
import logging
from datetime import datetime
from typing import Dict, List, Optional

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.app.services.activity_recorder import create_notification, log_activity
from src.app.services.email_service import EmailRecipient, IEmailService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.lookups import parse_uuid
from src.domain.entities import Reminder, ReminderStatus

logger = logging.getLogger(__name__)

NO_RECIPIENTS = "Sin destinatarios"


def normalize_recipients(value) -> List[EmailRecipient]:
    """Entries without an email are dropped"""
    if not isinstance(value, list):
        return []
    recipients = []
    for entry in value:
        if isinstance(entry, dict) and entry.get("email"):
            recipients.append(EmailRecipient(email=entry["email"], name=entry.get("name")))
        elif isinstance(entry, str) and entry:
            recipients.append(EmailRecipient(email=entry))
    return recipients


def build_html_body(text: Optional[str]) -> str:
    if not text:
        return "<p>Recordatorio automático.</p>"
    lines = [html.escape(line.strip()) for line in text.split("\n")]
    return f"<p>{'<br/>'.join(lines)}</p>"


class DispatchRemindersUseCase:
    """
    Business Rules:
    - Picks scheduled reminders with send_at <= now, oldest first, at most
      REMINDER_BATCH_SIZE per run
    - No recipients -> failed with "Sin destinatarios"
    - Delivered -> sent with sent_at and provider_message_id; the assigned
      staff is notified and case_reminder_sent is logged
    - Delivery error -> failed with the error message; failed is terminal
    - One failing reminder never stops the batch
    """

    def __init__(self, uow: UnitOfWork, email: IEmailService):
        self.uow = uow
        self.email = email

    async def _mark_failed(self, reminder: Reminder, message: str, now: datetime):
        reminder.status = ReminderStatus.failed
        reminder.last_error = message
        reminder.updated_at = now
        await self.uow.reminders.update(reminder)
        await self.uow.commit()

    async def execute(
        self, organization_id=None, now: Optional[datetime] = None
    ) -> Result[Dict[str, int]]:
        if not self.email.is_configured:
            return Return.err(
                Error("EMAIL_NOT_CONFIGURED", "El proveedor de correo no está configurado")
            )

        now = now or datetime.utcnow()
        processed = 0

        async with self.uow:
            due = await self.uow.reminders.get_due(
                now, ApplicationConfig.REMINDER_BATCH_SIZE, parse_uuid(organization_id)
            )

            for reminder in due:
                recipients = normalize_recipients(reminder.send_to)
                if not recipients:
                    await self._mark_failed(reminder, NO_RECIPIENTS, now)
                    continue

                try:
                    message_id = await self.email.send(
                        recipients,
                        reminder.subject,
                        reminder.body or None,
                        build_html_body(reminder.body),
                    )
                except Exception as exc:
                    logger.warning(f"Reminder {reminder.id} delivery failed: {exc}")
                    await self._mark_failed(
                        reminder, str(exc) or "Error enviando recordatorio", now
                    )
                    continue

                reminder.status = ReminderStatus.sent
                reminder.sent_at = now
                reminder.provider_message_id = message_id
                reminder.last_error = None
                reminder.updated_at = now
                await self.uow.reminders.update(reminder)
                await self.uow.commit()
                processed += 1

                case = await self.uow.cases.get_for_scheduler(
                    reminder.organization_id, reminder.case_id
                )
                key_date = await self.uow.key_dates.get_for_scheduler(
                    reminder.organization_id, reminder.key_date_id
                )
                staff_id = case.assigned_staff_id if case else None
                if staff_id:
                    await create_notification(
                        self.uow,
                        reminder.organization_id,
                        staff_id,
                        f"Recordatorio enviado: {key_date.title if key_date else reminder.subject}",
                        f"Se envió el recordatorio programado del caso {case.case_number}",
                        category="reminder",
                        case_id=reminder.case_id,
                    )
                await log_activity(
                    self.uow,
                    reminder.organization_id,
                    staff_id,
                    "case_reminder_sent",
                    f"Recordatorio {reminder.subject}",
                    case_id=reminder.case_id,
                    metadata={"reminder_id": str(reminder.id)},
                )
                await self.uow.commit()

        logger.info(f"Reminder dispatch processed {processed} of {len(due)} due reminders")
        return Return.ok({"processed": processed})
