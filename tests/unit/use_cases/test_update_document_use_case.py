import pytest

from src.app.use_cases.documents import UpdateDocumentUseCase
from src.domain.entities import DocumentStatus, UserRole
from tests.factories import make_case, make_document, make_user


@pytest.fixture
def case(admin_principal):
    client = make_user(admin_principal.organization_id, role=UserRole.client)
    return make_case(admin_principal.organization_id, client.id, admin_principal.id)


@pytest.fixture
def document(case):
    return make_document(case.organization_id, case.id)


@pytest.fixture
def uow(mock_uow, case, document):
    mock_uow.documents.get.return_value = document
    mock_uow.documents.update.side_effect = lambda d: d
    mock_uow.cases.get.return_value = case
    return mock_uow


@pytest.mark.asyncio
async def test_status_change_logs_and_notifies_once(uow, admin_principal, document, case):
    """One status change yields exactly one activity row and one client notification"""
    result = await UpdateDocumentUseCase(uow).execute(
        admin_principal, str(document.id), {"status": "approved"}
    )

    assert result.is_ok()
    assert result.value.status == "approved"
    assert uow.activity_logs.create.await_count == 1
    assert uow.notifications.create.await_count == 1

    activity = uow.activity_logs.create.call_args.args[0]
    assert activity.action == "document_status_updated"
    assert activity.event_metadata == {"document_id": str(document.id), "status": "approved"}

    notification = uow.notifications.create.call_args.args[0]
    assert notification.user_id == case.client_id
    assert "fue verificado correctamente" in notification.message


@pytest.mark.asyncio
async def test_repeated_status_produces_its_own_pair(uow, admin_principal, document):
    use_case = UpdateDocumentUseCase(uow)

    await use_case.execute(admin_principal, str(document.id), {"status": "rejected"})
    await use_case.execute(admin_principal, str(document.id), {"status": "rejected"})

    assert uow.activity_logs.create.await_count == 2
    assert uow.notifications.create.await_count == 2


@pytest.mark.asyncio
async def test_notes_only_update_is_silent(uow, admin_principal, document):
    result = await UpdateDocumentUseCase(uow).execute(
        admin_principal, str(document.id), {"review_notes": "Falta la página 2"}
    )

    assert result.is_ok()
    assert document.review_notes == "Falta la página 2"
    assert document.status == DocumentStatus.submitted
    uow.activity_logs.create.assert_not_called()
    uow.notifications.create.assert_not_called()


@pytest.mark.asyncio
async def test_invalid_status_is_rejected(uow, admin_principal, document):
    result = await UpdateDocumentUseCase(uow).execute(
        admin_principal, str(document.id), {"status": "lost"}
    )

    assert result.is_err()
    assert result.error.code == "INVALID_STATUS"
    uow.documents.update.assert_not_called()


@pytest.mark.asyncio
async def test_empty_update_is_rejected(uow, admin_principal, document):
    result = await UpdateDocumentUseCase(uow).execute(admin_principal, str(document.id), {})

    assert result.is_err()
    assert result.error.code == "NO_FIELDS"


@pytest.mark.asyncio
async def test_document_of_other_tenant_is_not_found(uow, admin_principal, document):
    uow.documents.get.return_value = None

    result = await UpdateDocumentUseCase(uow).execute(
        admin_principal, str(document.id), {"status": "approved"}
    )

    assert result.is_err()
    assert result.error.code == "DOCUMENT_NOT_FOUND"
