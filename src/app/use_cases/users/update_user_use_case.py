"""
Update User Use Case

Admin edits a user of their organization, including role changes.
"""

from typing import Any, Dict

from libs.result import Error, Result, Return
from src.app.services.activity_recorder import log_activity
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserInfo
from src.app.use_cases.lookups import parse_uuid
from src.domain.entities import UserRole

UPDATABLE_FIELDS = ("name", "email", "phone", "role", "country_of_origin", "is_active")


class UpdateUserUseCase:
    """
    Business Rules:
    - Admin only (Role Gate); target must belong to the same organization
    - Only whitelisted fields are applied; none → 400
    - An admin cannot change their own role or deactivate themselves
    - A deactivated user can no longer log in; open sessions stop resolving
    - A new email must be unused (409)
    - Logs user_updated
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, user_id: str, changes: Dict[str, Any]
    ) -> Result[UserInfo]:
        updates = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
        if not updates:
            return Return.err(Error("NO_FIELDS", "No hay campos válidos para actualizar"))

        if "role" in updates:
            try:
                updates["role"] = UserRole(updates["role"])
            except ValueError:
                return Return.err(Error("INVALID_ROLE", f"Rol inválido: {updates['role']}"))
        if "name" in updates and not (updates["name"] or "").strip():
            return Return.err(Error("INVALID_NAME", "El nombre es obligatorio"))
        if "is_active" in updates and not isinstance(updates["is_active"], bool):
            return Return.err(Error("INVALID_STATUS", "is_active debe ser verdadero o falso"))

        parsed = parse_uuid(user_id)
        if parsed is None:
            return Return.err(Error("USER_NOT_FOUND", "Usuario no encontrado"))

        async with self.uow:
            user = await self.uow.users.get_in_scope(TenantScope.of(principal), parsed)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "Usuario no encontrado"))

            if user.id == principal.id and "role" in updates and updates["role"] != user.role:
                return Return.err(
                    Error("CANNOT_CHANGE_OWN_ROLE", "No puedes cambiar tu propio rol")
                )
            if user.id == principal.id and updates.get("is_active") is False:
                return Return.err(
                    Error("CANNOT_DEACTIVATE_SELF", "No puedes desactivar tu propia cuenta")
                )

            if "email" in updates:
                email = (updates["email"] or "").strip().lower()
                if not email:
                    return Return.err(Error("INVALID_EMAIL", "Correo inválido"))
                if email != user.email and await self.uow.users.get_by_email(email) is not None:
                    return Return.err(Error("EMAIL_ALREADY_EXISTS", "El correo ya está en uso"))
                updates["email"] = email

            for key, value in updates.items():
                setattr(user, key, value)

            user = await self.uow.users.update(user)
            await self.uow.commit()

            await log_activity(
                self.uow,
                principal.organization_id,
                principal.id,
                "user_updated",
                f"Actualizó el usuario {user.name}",
                metadata={"user_id": str(user.id), "fields": sorted(updates.keys())},
            )
            await self.uow.commit()

        return Return.ok(UserInfo.from_entity(user))
