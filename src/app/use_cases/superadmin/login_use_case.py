from datetime import datetime

import bcrypt

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import SuperAdminStatus
from .dtos import SuperAdminInfo

_DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(12))


class SuperAdminLoginUseCase:
    """
    Business Rules:
    - Email lookup is case-insensitive
    - A blocked account is refused with 403 before the password is checked
    - Token issuance is left to the API layer
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[SuperAdminInfo]:
        if not email or not password:
            return Return.err(Error("MISSING_FIELDS", "Email y contraseña requeridos"))

        async with self.uow:
            admin = await self.uow.super_admins.get_by_email(email)
            if admin is None:
                bcrypt.checkpw(password.encode(), _DUMMY_HASH)
                return Return.err(Error("INVALID_CREDENTIALS", "Credenciales inválidas"))

            if admin.status != SuperAdminStatus.active:
                return Return.err(Error("ACCOUNT_BLOCKED", "Cuenta bloqueada"))

            if not bcrypt.checkpw(password.encode(), admin.password_hash.encode()):
                return Return.err(Error("INVALID_CREDENTIALS", "Credenciales inválidas"))

            admin.last_login_at = datetime.utcnow()
            await self.uow.super_admins.update(admin)
            await self.uow.commit()

            return Return.ok(SuperAdminInfo(id=str(admin.id), email=admin.email))
