"""
Tenant Scope

Value object carried into every tenant-scoped repository call.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.entities import UserRole
from .authorization import Principal


@dataclass(frozen=True)
class TenantScope:
    """
    Data-access scope of a caller.

    Repositories add ``organization_id == scope.organization_id`` to every
    query and, when ``restricted_to_owner`` is set, the ownership predicate
    of the entity being read.
    """

    organization_id: UUID
    user_id: UUID
    role: UserRole

    @property
    def restricted_to_owner(self) -> bool:
        return self.role == UserRole.client

    @classmethod
    def of(cls, principal: Principal) -> "TenantScope":
        return cls(
            organization_id=principal.organization_id,
            user_id=principal.id,
            role=principal.role,
        )
