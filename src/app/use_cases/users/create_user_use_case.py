"""
Create User Use Case

Admin creates a staff, admin or client account inside their organization.
"""

import secrets

import bcrypt

from libs.result import Error, Result, Return
from src.app.services.activity_recorder import log_activity
from src.app.services.authorization import Principal
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserInfo
from src.domain.entities import User, UserRole
from .dtos import CreateUserCommand, CreateUserResponse

TEMPORARY_PASSWORD_CHARSET = (
    "ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz23456789!@#$%^&*"
)


def generate_temporary_password(length: int = 12) -> str:
    return "".join(secrets.choice(TEMPORARY_PASSWORD_CHARSET) for _ in range(length))


class CreateUserUseCase:
    """
    Business Rules:
    - Admin only (Role Gate)
    - Email is normalized to lower case and must be unused (409)
    - A temporary password is generated when none is supplied and returned once
    - Logs user_created
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, command: CreateUserCommand
    ) -> Result[CreateUserResponse]:
        try:
            role = UserRole(command.role)
        except ValueError:
            return Return.err(Error("INVALID_ROLE", f"Rol inválido: {command.role}"))

        email = command.email.strip().lower()
        temporary_password = None
        password = command.password
        if not password:
            temporary_password = generate_temporary_password()
            password = temporary_password

        async with self.uow:
            if await self.uow.users.get_by_email(email) is not None:
                return Return.err(Error("EMAIL_ALREADY_EXISTS", "El correo ya está en uso"))

            user = await self.uow.users.create(
                User(
                    organization_id=principal.organization_id,
                    email=email,
                    name=command.name.strip(),
                    role=role,
                    phone=command.phone,
                    country_of_origin=command.country_of_origin,
                    password_hash=bcrypt.hashpw(password.encode(), bcrypt.gensalt(12)).decode(),
                )
            )
            await self.uow.commit()

            await log_activity(
                self.uow,
                principal.organization_id,
                principal.id,
                "user_created",
                f"Creó el usuario {user.name}",
                metadata={"user_id": str(user.id), "role": role.value},
            )
            await self.uow.commit()

        return Return.ok(
            CreateUserResponse(
                user=UserInfo.from_entity(user), temporary_password=temporary_password
            )
        )
