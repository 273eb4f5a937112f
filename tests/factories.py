"""Entity builders shared by unit and integration tests"""

from datetime import datetime
from uuid import uuid4

import bcrypt

from src.domain.entities import (
    Case,
    CaseType,
    Document,
    DocumentStatus,
    Organization,
    User,
    UserRole,
)

# Low cost factor keeps the suite fast; production hashes use 12
_FAST_ROUNDS = 4


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(_FAST_ROUNDS)).decode()


def make_organization(name="Acme Legal", **overrides) -> Organization:
    values = dict(id=uuid4(), name=name, slug=f"{name.lower().replace(' ', '-')}-{uuid4().hex[:6]}")
    values.update(overrides)
    return Organization(**values)


def make_user(organization_id, role=UserRole.client, name="Ana Pérez", password=None, **overrides) -> User:
    values = dict(
        id=uuid4(),
        organization_id=organization_id,
        email=f"{uuid4().hex[:10]}@example.com",
        name=name,
        role=role,
        password_hash=hash_password(password) if password else "x" * 60,
    )
    values.update(overrides)
    return User(**values)


def make_case(organization_id, client_id, assigned_staff_id=None, **overrides) -> Case:
    values = dict(
        id=uuid4(),
        organization_id=organization_id,
        case_number=f"FAM-{datetime.utcnow().year}-{uuid4().int % 10000:04d}",
        client_id=client_id,
        assigned_staff_id=assigned_staff_id,
        case_type=CaseType.family,
        title="Petición familiar",
    )
    values.update(overrides)
    return Case(**values)


def make_document(organization_id, case_id, **overrides) -> Document:
    values = dict(
        id=uuid4(),
        organization_id=organization_id,
        case_id=case_id,
        name="Pasaporte",
        status=DocumentStatus.submitted,
        storage_path=f"{organization_id}/{case_id}/pasaporte.pdf",
    )
    values.update(overrides)
    return Document(**values)
