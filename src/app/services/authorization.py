"""
Role Gate

Principal model and the role check every protected operation goes through.
"""

from dataclasses import dataclass
from typing import Iterable, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.domain.entities import UserRole


@dataclass(frozen=True)
class Principal:
    """Resolved identity of the caller for the current request"""

    id: UUID
    role: UserRole
    organization_id: UUID

    @property
    def is_client(self) -> bool:
        return self.role == UserRole.client

    @property
    def is_staff(self) -> bool:
        return self.role in (UserRole.admin, UserRole.staff)


STAFF_ROLES = (UserRole.admin, UserRole.staff)


def require_role(
    principal: Optional[Principal], allowed_roles: Iterable[UserRole]
) -> Result[Principal]:
    """
    Check that a principal exists and holds one of the allowed roles.

    Returns:
        Result with the principal, or Error UNAUTHORIZED (no identity)
        / FORBIDDEN (identity with the wrong role)
    """
    if principal is None:
        return Return.err(Error("UNAUTHORIZED", "Sesión no válida o expirada"))

    if principal.role not in tuple(allowed_roles):
        return Return.err(
            Error("FORBIDDEN", "No tienes permisos para realizar esta acción")
        )

    return Return.ok(principal)
