"""
Reminder scheduling shared by key date creation and updates.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional

from src.domain.entities import Case, CaseKeyDate, Reminder, ReminderStatus

DEFAULT_REMIND_MINUTES = 24 * 60
MIN_REMIND_MINUTES = 5
DEFAULT_DURATION_MINUTES = 60
MIN_DURATION_MINUTES = 15


def clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def clean_recipients(recipients: Optional[Iterable[Dict[str, Any]]]) -> List[Dict[str, Any]]:
    """Drop entries without an email; names are optional"""
    cleaned = []
    for recipient in recipients or []:
        email = clean(recipient.get("email"))
        if email:
            cleaned.append({"email": email, "name": clean(recipient.get("name"))})
    return cleaned


def duration_minutes(value: Optional[int]) -> int:
    if value is None:
        return DEFAULT_DURATION_MINUTES
    return max(MIN_DURATION_MINUTES, value)


def remind_minutes(value: Optional[int]) -> int:
    if value is None:
        return DEFAULT_REMIND_MINUTES
    return max(MIN_REMIND_MINUTES, value)


def reminder_send_at(occurs_at: datetime, minutes_before: Optional[int]) -> datetime:
    """occurs_at - minutes_before; a time already past becomes one minute from now"""
    now = datetime.utcnow()
    send_at = occurs_at - timedelta(minutes=remind_minutes(minutes_before))
    if send_at <= now:
        send_at = now + timedelta(minutes=1)
    return send_at


def reminder_subject(key_date: CaseKeyDate) -> str:
    return key_date.email_subject or f"Recordatorio {key_date.title}"


def reminder_body(key_date: CaseKeyDate, case: Case) -> str:
    if key_date.email_body:
        return key_date.email_body
    return (
        f"Hola,\n\nTe recordamos {key_date.title.lower()} del expediente "
        f"{case.case_number}. Fecha: {key_date.occurs_at.strftime('%d/%m/%Y %H:%M')} UTC."
    )


def build_reminder(key_date: CaseKeyDate, case: Case) -> Reminder:
    return Reminder(
        organization_id=key_date.organization_id,
        case_id=case.id,
        key_date_id=key_date.id,
        send_at=reminder_send_at(key_date.occurs_at, key_date.remind_minutes_before),
        send_to=key_date.notify_emails,
        subject=reminder_subject(key_date),
        body=reminder_body(key_date, case),
    )


def reschedule(reminder: Reminder, key_date: CaseKeyDate, case: Case) -> Reminder:
    """Point an existing reminder at the key date's current schedule and re-arm it"""
    reminder.send_at = reminder_send_at(key_date.occurs_at, key_date.remind_minutes_before)
    reminder.send_to = key_date.notify_emails
    reminder.subject = reminder_subject(key_date)
    reminder.body = reminder_body(key_date, case)
    reminder.status = ReminderStatus.scheduled
    reminder.sent_at = None
    reminder.last_error = None
    reminder.provider_message_id = None
    reminder.updated_at = datetime.utcnow()
    return reminder
