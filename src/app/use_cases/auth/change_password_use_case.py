"""
Change Password Use Case

Lets any authenticated user replace their own password.
"""

import bcrypt

from libs.result import Error, Result, Return
from src.app.services.activity_recorder import log_activity
from src.app.services.authorization import Principal
from src.app.services.tenant_scope import TenantScope
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ChangePasswordResponse

MIN_PASSWORD_LENGTH = 8


class ChangePasswordUseCase:
    """
    Business Rules:
    - The current password must match
    - The new password has at least 8 characters and differs from the current one
    - Stored as a bcrypt hash (cost 12)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, current_password: str, new_password: str
    ) -> Result[ChangePasswordResponse]:
        if len(new_password or "") < MIN_PASSWORD_LENGTH:
            return Return.err(
                Error(
                    "WEAK_PASSWORD",
                    "La nueva contraseña debe tener al menos 8 caracteres",
                )
            )
        if new_password == current_password:
            return Return.err(
                Error("WEAK_PASSWORD", "La nueva contraseña debe ser distinta a la actual")
            )

        async with self.uow:
            user = await self.uow.users.get_in_scope(TenantScope.of(principal), principal.id)
            if user is None:
                return Return.err(Error("UNAUTHORIZED", "Sesión no válida o expirada"))

            if not bcrypt.checkpw(current_password.encode(), user.password_hash.encode()):
                return Return.err(
                    Error("INVALID_PASSWORD", "La contraseña actual no es correcta")
                )

            user.password_hash = bcrypt.hashpw(
                new_password.encode(), bcrypt.gensalt(12)
            ).decode()
            await self.uow.users.update(user)
            await self.uow.commit()

            await log_activity(
                self.uow,
                principal.organization_id,
                principal.id,
                "password_changed",
                "Contraseña actualizada",
            )
            await self.uow.commit()

        return Return.ok(
            ChangePasswordResponse(status="ok", message="Contraseña actualizada")
        )
