from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.services.authorization import Principal
from src.domain.entities import Organization, UserRole

REPOSITORIES = (
    "organizations",
    "users",
    "cases",
    "case_stages",
    "key_dates",
    "reminders",
    "documents",
    "messages",
    "notifications",
    "activity_logs",
    "super_admins",
    "metrics",
)


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork; every repository method is an AsyncMock"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    savepoint = MagicMock()
    savepoint.__aenter__ = AsyncMock(return_value=None)
    savepoint.__aexit__ = AsyncMock(return_value=False)
    uow.savepoint = MagicMock(return_value=savepoint)
    for name in REPOSITORIES:
        setattr(uow, name, AsyncMock())
    return uow


@pytest.fixture
def organization():
    return Organization(id=uuid4(), name="Acme Legal", slug="acme-legal", is_active=True)


@pytest.fixture
def admin_principal(organization):
    return Principal(id=uuid4(), role=UserRole.admin, organization_id=organization.id)


@pytest.fixture
def client_principal(organization):
    return Principal(id=uuid4(), role=UserRole.client, organization_id=organization.id)
