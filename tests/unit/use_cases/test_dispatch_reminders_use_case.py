from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.use_cases.cron import DispatchRemindersUseCase, build_html_body, normalize_recipients
from src.domain.entities import CaseKeyDate, Reminder, ReminderStatus, UserRole
from tests.factories import make_case, make_user

NOW = datetime(2025, 6, 1, 9, 0, 0)


@pytest.fixture
def email():
    email = MagicMock()
    email.is_configured = True
    email.send = AsyncMock(return_value="msg_123")
    return email


@pytest.fixture
def case():
    org_id = uuid4()
    staff = make_user(org_id, role=UserRole.staff)
    client = make_user(org_id)
    return make_case(org_id, client.id, staff.id)


def _reminder(case, send_to):
    key_date_id = uuid4()
    return Reminder(
        id=uuid4(),
        organization_id=case.organization_id,
        case_id=case.id,
        key_date_id=key_date_id,
        send_at=NOW - timedelta(minutes=5),
        send_to=send_to,
        subject="Entrevista USCIS",
        body="Trae tu pasaporte\nLlega 15 minutos antes",
    )


@pytest.fixture
def uow(mock_uow, case):
    mock_uow.cases.get_for_scheduler.return_value = case
    mock_uow.key_dates.get_for_scheduler.return_value = CaseKeyDate(
        organization_id=case.organization_id,
        case_id=case.id,
        title="Entrevista",
        occurs_at=NOW + timedelta(days=1),
    )
    return mock_uow


@pytest.mark.asyncio
async def test_delivers_due_reminder(uow, email, case):
    """Delivered reminders become sent with the provider id, staff is notified"""
    reminder = _reminder(case, [{"email": "ana@example.com", "name": "Ana"}])
    uow.reminders.get_due.return_value = [reminder]

    result = await DispatchRemindersUseCase(uow, email).execute(now=NOW)

    assert result.is_ok()
    assert result.value == {"processed": 1}
    assert reminder.status == ReminderStatus.sent
    assert reminder.sent_at == NOW
    assert reminder.provider_message_id == "msg_123"
    assert reminder.last_error is None

    recipients, subject, text, html = email.send.call_args.args
    assert [r.email for r in recipients] == ["ana@example.com"]
    assert subject == "Entrevista USCIS"
    assert html == "<p>Trae tu pasaporte<br/>Llega 15 minutos antes</p>"

    notification = uow.notifications.create.call_args.args[0]
    assert notification.user_id == case.assigned_staff_id
    assert notification.title == "Recordatorio enviado: Entrevista"
    activity = uow.activity_logs.create.call_args.args[0]
    assert activity.action == "case_reminder_sent"
    assert activity.event_metadata == {"reminder_id": str(reminder.id)}


@pytest.mark.asyncio
async def test_reminder_without_recipients_fails(uow, email, case):
    reminder = _reminder(case, [{"name": "Sin correo"}])
    uow.reminders.get_due.return_value = [reminder]

    result = await DispatchRemindersUseCase(uow, email).execute(now=NOW)

    assert result.value == {"processed": 0}
    assert reminder.status == ReminderStatus.failed
    assert reminder.last_error == "Sin destinatarios"
    email.send.assert_not_called()


@pytest.mark.asyncio
async def test_delivery_error_marks_failed_and_batch_continues(uow, email, case):
    failing = _reminder(case, ["a@example.com"])
    working = _reminder(case, ["b@example.com"])
    uow.reminders.get_due.return_value = [failing, working]
    email.send.side_effect = [RuntimeError("Resend API error: 422"), "msg_456"]

    result = await DispatchRemindersUseCase(uow, email).execute(now=NOW)

    assert result.value == {"processed": 1}
    assert failing.status == ReminderStatus.failed
    assert failing.last_error == "Resend API error: 422"
    assert working.status == ReminderStatus.sent


@pytest.mark.asyncio
async def test_batch_is_scoped_to_organization(uow, email):
    uow.reminders.get_due.return_value = []
    org_id = uuid4()

    await DispatchRemindersUseCase(uow, email).execute(organization_id=str(org_id), now=NOW)

    args = uow.reminders.get_due.call_args.args
    assert args[0] == NOW
    assert args[2] == org_id


@pytest.mark.asyncio
async def test_email_not_configured(uow, email):
    email.is_configured = False

    result = await DispatchRemindersUseCase(uow, email).execute(now=NOW)

    assert result.is_err()
    assert result.error.code == "EMAIL_NOT_CONFIGURED"
    uow.reminders.get_due.assert_not_called()


def test_normalize_recipients():
    recipients = normalize_recipients(
        [{"email": "a@example.com", "name": "A"}, {"name": "x"}, "b@example.com", ""]
    )

    assert [(r.email, r.name) for r in recipients] == [("a@example.com", "A"), ("b@example.com", None)]
    assert normalize_recipients(None) == []


def test_build_html_body_escapes_and_defaults():
    assert build_html_body("<b>hola</b>") == "<p>&lt;b&gt;hola&lt;/b&gt;</p>"
    assert build_html_body(None) == "<p>Recordatorio automático.</p>"
