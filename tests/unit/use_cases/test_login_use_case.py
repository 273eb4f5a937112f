import pytest

from src.app.use_cases.auth.login_use_case import LoginUseCase
from src.domain.entities import UserRole
from tests.factories import make_organization, make_user


@pytest.mark.asyncio
async def test_successful_login(mock_uow):
    """Valid credentials return the user and organization and stamp last_login_at"""
    # Arrange
    organization = make_organization()
    user = make_user(organization.id, role=UserRole.staff, password="SecurePass123!")
    mock_uow.users.get_by_email.return_value = user
    mock_uow.organizations.get_by_id.return_value = organization

    # Act
    result = await LoginUseCase(mock_uow).execute(user.email, "SecurePass123!")

    # Assert
    assert result.is_ok()
    assert result.value.user.id == str(user.id)
    assert result.value.user.role == "staff"
    assert result.value.organization.id == str(organization.id)
    assert user.last_login_at is not None
    mock_uow.users.update.assert_called_once_with(user)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_login_wrong_password(mock_uow):
    organization = make_organization()
    user = make_user(organization.id, password="SecurePass123!")
    mock_uow.users.get_by_email.return_value = user

    result = await LoginUseCase(mock_uow).execute(user.email, "WrongPassword!")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_login_unknown_email_gives_same_error(mock_uow):
    """Unknown email and wrong password are indistinguishable"""
    mock_uow.users.get_by_email.return_value = None

    result = await LoginUseCase(mock_uow).execute("nobody@example.com", "whatever")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_inactive_organization(mock_uow):
    organization = make_organization(is_active=False)
    user = make_user(organization.id, password="SecurePass123!")
    mock_uow.users.get_by_email.return_value = user
    mock_uow.organizations.get_by_id.return_value = organization

    result = await LoginUseCase(mock_uow).execute(user.email, "SecurePass123!")

    assert result.is_err()
    assert result.error.code == "ORGANIZATION_INACTIVE"
    mock_uow.users.update.assert_not_called()


@pytest.mark.asyncio
async def test_login_deactivated_user(mock_uow):
    organization = make_organization()
    user = make_user(organization.id, password="SecurePass123!", is_active=False)
    mock_uow.users.get_by_email.return_value = user
    mock_uow.organizations.get_by_id.return_value = organization

    result = await LoginUseCase(mock_uow).execute(user.email, "SecurePass123!")

    assert result.is_err()
    assert result.error.code == "USER_INACTIVE"
    assert user.last_login_at is None
    mock_uow.commit.assert_not_called()
