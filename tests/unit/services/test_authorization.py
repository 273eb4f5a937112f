from uuid import uuid4

from src.app.services.authorization import STAFF_ROLES, Principal, require_role
from src.app.services.tenant_scope import TenantScope
from src.domain.entities import UserRole


def _principal(role: UserRole) -> Principal:
    return Principal(id=uuid4(), role=role, organization_id=uuid4())


def test_missing_principal_is_unauthorized():
    result = require_role(None, UserRole)

    assert result.is_err()
    assert result.error.code == "UNAUTHORIZED"


def test_wrong_role_is_forbidden():
    result = require_role(_principal(UserRole.client), STAFF_ROLES)

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"


def test_allowed_role_passes_principal_through():
    principal = _principal(UserRole.staff)

    result = require_role(principal, STAFF_ROLES)

    assert result.is_ok()
    assert result.value is principal


def test_role_predicates():
    assert _principal(UserRole.client).is_client
    assert _principal(UserRole.admin).is_staff
    assert not _principal(UserRole.client).is_staff


def test_scope_restricts_only_clients():
    client = _principal(UserRole.client)
    staff = _principal(UserRole.staff)

    client_scope = TenantScope.of(client)

    assert client_scope.organization_id == client.organization_id
    assert client_scope.user_id == client.id
    assert client_scope.restricted_to_owner is True
    assert TenantScope.of(staff).restricted_to_owner is False
