import re
from unittest.mock import AsyncMock, patch

import pytest

from src.app.repositories.case_repository import CaseNumberConflict
from src.app.use_cases.cases import CreateCaseCommand, CreateCaseUseCase
from src.domain.entities import CaseType, DocumentStatus, UserRole
from tests.factories import make_user

CASE_NUMBER_PATTERN = re.compile(r"^[A-Z]{3}-\d{4}-\d{4}$")


@pytest.fixture
def client_user(admin_principal):
    return make_user(admin_principal.organization_id, role=UserRole.client, name="Luis Gómez")


@pytest.fixture
def uow(mock_uow, client_user):
    mock_uow.users.get_in_scope.return_value = client_user
    mock_uow.cases.case_number_exists.return_value = False
    mock_uow.cases.create.side_effect = lambda case: case
    mock_uow.documents.create.side_effect = lambda document: document
    return mock_uow


@pytest.fixture
def drive():
    drive = AsyncMock()
    drive.ensure_case_folder.return_value = "folder-123"
    return drive


def _command(client_user, **overrides):
    values = dict(client_id=str(client_user.id), case_type="family", title="Petición I-130")
    values.update(overrides)
    return CreateCaseCommand(**values)


@pytest.mark.asyncio
async def test_create_case(uow, drive, admin_principal, client_user):
    """A case is created for the client, assigned to the creator, logged and notified"""
    # Act
    result = await CreateCaseUseCase(uow, drive).execute(admin_principal, _command(client_user))

    # Assert
    assert result.is_ok()
    case = result.value
    assert CASE_NUMBER_PATTERN.match(case.case_number)
    assert case.case_number.startswith("FAM-")
    assert case.client_id == str(client_user.id)
    assert case.client_name == "Luis Gómez"
    assert case.assigned_staff_id == str(admin_principal.id)
    assert case.organization_id == str(admin_principal.organization_id)
    assert case.status == "pending"
    assert case.drive_folder_id == "folder-123"

    activity = uow.activity_logs.create.call_args.args[0]
    assert activity.action == "case_created"
    notification = uow.notifications.create.call_args.args[0]
    assert notification.user_id == client_user.id
    assert notification.type == "case"


@pytest.mark.asyncio
async def test_drive_failure_still_creates_case(uow, drive, admin_principal, client_user):
    drive.ensure_case_folder.side_effect = RuntimeError("Drive API error (files): 500")

    result = await CreateCaseUseCase(uow, drive).execute(admin_principal, _command(client_user))

    assert result.is_ok()
    assert result.value.drive_folder_id is None
    uow.cases.create.assert_called_once()
    uow.cases.update.assert_not_called()
    uow.activity_logs.create.assert_called_once()


@pytest.mark.asyncio
async def test_activity_log_failure_does_not_fail_case(uow, drive, admin_principal, client_user):
    uow.activity_logs.create.side_effect = RuntimeError("db gone")

    result = await CreateCaseUseCase(uow, drive).execute(admin_principal, _command(client_user))

    assert result.is_ok()
    uow.savepoint.assert_called()
    uow.rollback.assert_not_called()
    uow.notifications.create.assert_called_once()


@pytest.mark.asyncio
async def test_initial_required_documents_are_deduplicated(uow, drive, admin_principal, client_user):
    command = _command(client_user, required_documents=["Pasaporte", " pasaporte ", "", "Acta"])

    result = await CreateCaseUseCase(uow, drive).execute(admin_principal, command)

    assert result.is_ok()
    created = [call.args[0] for call in uow.documents.create.call_args_list]
    assert [d.name for d in created] == ["Pasaporte", "Acta"]
    assert all(d.is_required and d.status == DocumentStatus.pending for d in created)


@pytest.mark.asyncio
async def test_case_number_retries_on_collision(uow, drive, admin_principal, client_user):
    uow.cases.case_number_exists.side_effect = [True, False]

    result = await CreateCaseUseCase(uow, drive).execute(admin_principal, _command(client_user))

    assert result.is_ok()
    assert uow.cases.case_number_exists.await_count == 2


@pytest.mark.asyncio
async def test_client_must_be_client_of_organization(uow, drive, admin_principal, client_user):
    uow.users.get_in_scope.return_value = make_user(
        admin_principal.organization_id, role=UserRole.staff
    )

    result = await CreateCaseUseCase(uow, drive).execute(admin_principal, _command(client_user))

    assert result.is_err()
    assert result.error.code == "CLIENT_NOT_FOUND"
    uow.cases.create.assert_not_called()


@pytest.mark.asyncio
async def test_invalid_case_type_rejected(uow, drive, admin_principal, client_user):
    result = await CreateCaseUseCase(uow, drive).execute(
        admin_principal, _command(client_user, case_type="space_law")
    )

    assert result.is_err()
    assert result.error.code == "INVALID_CASE_TYPE"


def test_case_type_prefixes():
    from datetime import datetime

    from src.app.use_cases.cases.create_case_use_case import generate_case_number

    number = generate_case_number(CaseType.green_card, datetime(2025, 3, 1))

    assert number.startswith("GRE-2025-")
    assert CASE_NUMBER_PATTERN.match(number)


@pytest.mark.asyncio
async def test_insert_conflict_retries_with_new_number(uow, drive, admin_principal, client_user):
    """Another request may take the number between the check and the insert"""
    attempted = []

    async def create(case):
        attempted.append(case.case_number)
        if len(attempted) == 1:
            raise CaseNumberConflict(case.case_number)
        return case

    uow.cases.create.side_effect = create
    numbers = iter([11, 12])
    with patch(
        "src.app.use_cases.cases.create_case_use_case.random.randint",
        side_effect=lambda a, b: next(numbers),
    ):
        result = await CreateCaseUseCase(uow, drive).execute(admin_principal, _command(client_user))

    assert result.is_ok()
    assert [n[-4:] for n in attempted] == ["0011", "0012"]
    assert result.value.case_number.endswith("-0012")
    assert "0012" in uow.activity_logs.create.call_args.args[0].description


@pytest.mark.asyncio
async def test_insert_conflicts_exhaust_attempts(uow, drive, admin_principal, client_user):
    uow.cases.create.side_effect = CaseNumberConflict("FAM-2025-0001")

    result = await CreateCaseUseCase(uow, drive).execute(admin_principal, _command(client_user))

    assert result.is_err()
    assert result.error.code == "CASE_NUMBER_CONFLICT"
    assert uow.cases.create.await_count == 5
    uow.commit.assert_not_called()
