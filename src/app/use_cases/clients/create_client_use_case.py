"""
Create Client Use Case

Staff open an account for a new client of the firm.
"""

import logging

import bcrypt

from libs.result import Error, Result, Return
from src.app.services.activity_recorder import log_activity
from src.app.services.authorization import Principal
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserInfo
from src.app.use_cases.users.create_user_use_case import generate_temporary_password
from src.domain.entities import User, UserRole
from .dtos import CreateClientCommand, CreateClientResponse

logger = logging.getLogger(__name__)


class CreateClientUseCase:
    """
    Business Rules:
    - Admin or staff only
    - Email is normalized to lower case and must be unused across the platform (409)
    - The account always starts with a generated temporary password, returned once
    - Logs client_created
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, command: CreateClientCommand
    ) -> Result[CreateClientResponse]:
        email = command.email.strip().lower()
        name = command.name.strip()
        if not name:
            return Return.err(Error("INVALID_NAME", "El nombre es obligatorio"))

        temporary_password = generate_temporary_password()

        async with self.uow:
            if await self.uow.users.get_by_email(email) is not None:
                return Return.err(Error("EMAIL_ALREADY_EXISTS", "El correo ya está en uso"))

            client = await self.uow.users.create(
                User(
                    organization_id=principal.organization_id,
                    email=email,
                    name=name,
                    role=UserRole.client,
                    phone=command.phone,
                    country_of_origin=command.country_of_origin,
                    password_hash=bcrypt.hashpw(
                        temporary_password.encode(), bcrypt.gensalt(12)
                    ).decode(),
                )
            )
            await self.uow.commit()
            logger.info(f"Client {client.id} created in organization {principal.organization_id}")

            await log_activity(
                self.uow,
                principal.organization_id,
                principal.id,
                "client_created",
                f"Registró al cliente {client.name}",
                metadata={"client_id": str(client.id)},
            )
            await self.uow.commit()

        return Return.ok(
            CreateClientResponse(
                client=UserInfo.from_entity(client), temporary_password=temporary_password
            )
        )
