"""
Login Use Case

Authenticates a tenant user by email and password.
"""

from datetime import datetime

import bcrypt

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import LoginResult, OrganizationInfo, UserInfo

# Pre-computed hash used when the email is unknown, keeps response time flat
_DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(12))


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Email lookup is case-insensitive (emails are stored lower-cased)
    - The user and the user's organization must be active
    - Updates user.last_login_at
    - Session issuance is left to the API layer (Session Resolver)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[LoginResult]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResult, or Error INVALID_CREDENTIALS /
            USER_INACTIVE / ORGANIZATION_INACTIVE
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                bcrypt.checkpw(password.encode(), _DUMMY_HASH)
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Correo o contraseña incorrectos")
                )

            if not bcrypt.checkpw(password.encode(), user.password_hash.encode()):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Correo o contraseña incorrectos")
                )

            if not user.is_active:
                return Return.err(
                    Error("USER_INACTIVE", "Tu cuenta está desactivada, contacta a tu despacho")
                )

            organization = await self.uow.organizations.get_by_id(user.organization_id)
            if organization is None or not organization.is_active:
                return Return.err(
                    Error(
                        "ORGANIZATION_INACTIVE",
                        "La organización está desactivada, contacta a soporte",
                    )
                )

            user.last_login_at = datetime.utcnow()
            await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(
                LoginResult(
                    user=UserInfo.from_entity(user),
                    organization=OrganizationInfo.from_entity(organization),
                )
            )
